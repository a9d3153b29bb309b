"""Single-slot clipboard used by cut, copy and paste."""

from __future__ import annotations


class Clipboard:
    """Holds the most recently copied bytes, replaced wholesale on each copy."""

    __slots__ = ("_content",)

    def __init__(self, content: bytes = b"") -> None:
        self._content = bytes(content)

    def get(self) -> bytes:
        return self._content

    def set(self, content: bytes | bytearray | memoryview) -> None:
        self._content = bytes(content)

    def __len__(self) -> int:
        return len(self._content)

    def __repr__(self) -> str:
        return f"Clipboard({self._content!r})"

"""Exceptions raised inside the buffer layer."""

from __future__ import annotations

from typing import Optional


class EditError(RuntimeError):
    """Base for failures a :class:`TextBuffer` reports back as a status."""

    status = "edit_error"


class BufferRangeError(EditError):
    """Raised when a position or span falls outside the logical content."""

    status = "invalid_range"

    def __init__(
        self,
        message: str,
        *,
        pos: int,
        span: Optional[int] = None,
        length: int,
    ) -> None:
        super().__init__(message)
        self.pos = pos
        self.span = span
        self.length = length


class HistoryExhaustedError(EditError):
    """Raised when undo or redo is requested on an empty stack."""

    def __init__(self, direction: str) -> None:
        super().__init__(f"Cannot {direction} further.")
        self.direction = direction
        self.status = f"nothing_to_{direction}"


class StorageError(ValueError):
    """Raised for out-of-bounds raw storage access (a caller bug)."""

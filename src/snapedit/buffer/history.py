"""Two-stack undo/redo history made of full-state snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from snapedit.runtime import telemetry


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Immutable copy of the buffer storage at one point in time.

    ``capacity`` is restored along with the content; later growth
    thresholds depend on it.
    """

    data: bytes
    length: int
    capacity: int
    label: str = ""


def _capture(
    data: bytes | bytearray | memoryview, length: int, capacity: int, label: str
) -> Snapshot:
    if length < 0 or length > len(data):
        raise ValueError(f"length {length} exceeds the {len(data)} bytes supplied")
    if length > capacity:
        raise ValueError(f"length {length} exceeds capacity {capacity}")
    return Snapshot(
        data=bytes(data[:length]), length=length, capacity=capacity, label=label
    )


class HistoryStore:
    """Owns the undo and redo stacks.

    Every push creates a fresh :class:`Snapshot`, so the two stacks never
    share an instance. Depth is unbounded.
    """

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._undo: List[Snapshot] = []
        self._redo: List[Snapshot] = []
        self._logger_name = logger_name

    def save(
        self,
        data: bytes | bytearray | memoryview,
        length: int,
        capacity: int,
        *,
        label: str = "",
    ) -> Snapshot:
        """Record a pre-edit state and discard the redo branch."""

        snapshot = _capture(data, length, capacity, label)
        self._undo.append(snapshot)
        if self._redo:
            dropped = len(self._redo)
            self._redo.clear()
            telemetry.record_event(
                "history.redo_cleared",
                level="debug",
                data={"dropped": dropped, "label": label},
                logger_name=self._logger_name,
            )
        return snapshot

    def push_undo(
        self,
        data: bytes | bytearray | memoryview,
        length: int,
        capacity: int,
        *,
        label: str = "",
    ) -> Snapshot:
        snapshot = _capture(data, length, capacity, label)
        self._undo.append(snapshot)
        return snapshot

    def push_redo(
        self,
        data: bytes | bytearray | memoryview,
        length: int,
        capacity: int,
        *,
        label: str = "",
    ) -> Snapshot:
        snapshot = _capture(data, length, capacity, label)
        self._redo.append(snapshot)
        return snapshot

    def pop_undo(self) -> Optional[Snapshot]:
        return self._undo.pop() if self._undo else None

    def pop_redo(self) -> Optional[Snapshot]:
        return self._redo.pop() if self._redo else None

    def peek_undo(self) -> Optional[Snapshot]:
        return self._undo[-1] if self._undo else None

    def peek_redo(self) -> Optional[Snapshot]:
        return self._redo[-1] if self._redo else None

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()

    def __repr__(self) -> str:
        return f"HistoryStore(undo={len(self._undo)}, redo={len(self._redo)})"

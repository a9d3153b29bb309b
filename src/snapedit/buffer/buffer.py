"""Text buffer façade combining byte storage, clipboard, and snapshot history."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import Callable, ContextManager, Optional, Union

from snapedit.config import EditorConfig
from snapedit.runtime import telemetry

from .errors import EditError, HistoryExhaustedError
from .history import HistoryStore, Snapshot
from .registers import Clipboard
from .storage import ByteStorage
from .validation import ensure_position, ensure_range, ensure_replace_span

TextLike = Union[str, bytes, bytearray, memoryview]


@dataclass(slots=True)
class BufferView:
    """Read-only picture of a buffer for hosts and collaborators."""

    data: bytes
    length: int
    capacity: int
    clipboard: bytes
    undo_depth: int
    redo_depth: int
    encoding: str = "utf-8"

    @property
    def text(self) -> str:
        return self.data.decode(self.encoding, errors="replace")


@dataclass(slots=True)
class EditResult:
    """Outcome of one buffer operation.

    ``status`` is ``"ok"`` or the status of the :class:`EditError` that
    aborted the call; ``length``/``capacity`` describe the state afterwards.
    """

    label: str
    status: str = "ok"
    message: Optional[str] = None
    length: int = 0
    capacity: int = 0

    @property
    def ok(self) -> bool:
        return self.status == "ok"


class TextBuffer:
    def __init__(
        self,
        *,
        name: str = "default",
        config: Optional[EditorConfig] = None,
        history: Optional[HistoryStore] = None,
        clipboard: Optional[Clipboard] = None,
        logger_name: Optional[str] = None,
    ) -> None:
        self.name = name
        self.config = config or EditorConfig()
        self._logger_name = logger_name
        self._storage = ByteStorage(self.config.initial_capacity)
        self._history = (
            history if history is not None else HistoryStore(logger_name=logger_name)
        )
        self._clipboard = clipboard if clipboard is not None else Clipboard()

    @classmethod
    def from_text(cls, text: TextLike, **kwargs) -> "TextBuffer":
        buffer = cls(**kwargs)
        buffer.load_raw(buffer._encode(text))
        return buffer

    # -- queries -----------------------------------------------------------

    @property
    def length(self) -> int:
        return self._storage.length

    @property
    def capacity(self) -> int:
        return self._storage.capacity

    @property
    def clipboard(self) -> bytes:
        return self._clipboard.get()

    @property
    def history(self) -> HistoryStore:
        return self._history

    @property
    def text(self) -> str:
        return self.get_text().decode(self.config.encoding, errors="replace")

    def __len__(self) -> int:
        return self._storage.length

    def get_text(self) -> bytes:
        return self._storage.read()

    def find_text(self, needle: TextLike) -> Optional[int]:
        """Offset of the first occurrence of ``needle``, ``None`` if absent."""

        offset = self._storage.find(self._encode(needle))
        return None if offset < 0 else offset

    def view(self) -> BufferView:
        return BufferView(
            data=self.get_text(),
            length=self.length,
            capacity=self.capacity,
            clipboard=self.clipboard,
            undo_depth=self._history.undo_depth,
            redo_depth=self._history.redo_depth,
            encoding=self.config.encoding,
        )

    # -- edits -------------------------------------------------------------

    def append(self, text: TextLike) -> EditResult:
        payload = self._encode(text)
        with self._transaction("append") as tx:
            tx.record()
            storage = self._storage
            end = storage.length
            storage.grow_to_fit(end + len(payload))
            storage.write(end, payload)
            storage.set_length(end + len(payload))
        return tx.result

    def insert_and_replace(
        self, pos: int, substring: TextLike, replace_len: int = 0
    ) -> EditResult:
        """Overwrite ``replace_len`` bytes at ``pos`` with ``substring``.

        With ``replace_len == 0`` this is a plain insertion; ``pos`` may equal
        the current length.
        """

        payload = self._encode(substring)
        with self._transaction("insert_and_replace") as tx:
            self._checked(tx, ensure_replace_span, pos, replace_len, self.length)
            self._splice(pos, payload, replace_len)
        return tx.result

    def delete_text(self, pos: int, count: int) -> EditResult:
        with self._transaction("delete_text") as tx:
            self._checked(tx, ensure_range, pos, count, self.length)
            self._remove(pos, count)
        return tx.result

    def cut_text(self, pos: int, count: int) -> EditResult:
        with self._transaction("cut_text") as tx:
            self._checked(tx, ensure_range, pos, count, self.length)
            self._clipboard.set(self._storage.read(pos, pos + count))
            if self.config.split_compound_edits:
                tx.record()
            self._remove(pos, count)
        return tx.result

    def copy_text(self, pos: int, count: int) -> EditResult:
        with self._transaction("copy_text") as tx:
            ensure_range(pos, count, self.length)
            self._clipboard.set(self._storage.read(pos, pos + count))
        return tx.result

    def paste_text(self, pos: int) -> EditResult:
        with self._transaction("paste_text") as tx:
            self._checked(tx, ensure_position, pos, self.length)
            if self.config.split_compound_edits:
                tx.record()
            self._splice(pos, self._clipboard.get(), 0)
        return tx.result

    def undo(self) -> EditResult:
        with self._transaction("undo") as tx:
            self._step("undo", self._history.pop_undo, self._history.push_redo)
        return tx.result

    def redo(self) -> EditResult:
        with self._transaction("redo") as tx:
            self._step("redo", self._history.pop_redo, self._history.push_undo)
        return tx.result

    # -- collaborator entry points ----------------------------------------

    def load_raw(self, data: TextLike) -> EditResult:
        """Replace the whole content; capacity becomes ``len(data) + 1``.

        Loading is not recorded in history, and existing history is kept.
        """

        payload = self._encode(data)
        with self._transaction("load_raw") as tx:
            self._storage.reallocate(len(payload) + 1)
            self._storage.write(0, payload)
            self._storage.set_length(len(payload))
        return tx.result

    def save_raw(self) -> bytes:
        return self.get_text()

    # -- internals ---------------------------------------------------------

    def _transaction(self, label: str) -> "Transaction":
        return Transaction(self, label)

    def _checked(
        self, tx: "Transaction", check: Callable[..., None], *args: int
    ) -> None:
        if self.config.snapshot_before_validation:
            tx.record()
            check(*args)
        else:
            check(*args)
            tx.record()

    def _record(self, label: str) -> Snapshot:
        storage = self._storage
        return self._history.save(
            storage.read(), storage.length, storage.capacity, label=label
        )

    def _splice(self, pos: int, payload: bytes, replace_len: int) -> None:
        storage = self._storage
        length = storage.length
        new_length = length + len(payload) - replace_len
        if new_length >= storage.capacity:
            storage.resize(new_length * 2)
        tail = length - pos - replace_len
        storage.move(pos + replace_len, pos + len(payload), tail)
        storage.write(pos, payload)
        storage.set_length(new_length)

    def _remove(self, pos: int, count: int) -> None:
        storage = self._storage
        length = storage.length
        storage.move(pos + count, pos, length - pos - count)
        storage.set_length(length - count)

    def _step(
        self,
        direction: str,
        pop: Callable[[], Optional[Snapshot]],
        push_opposite: Callable[..., Snapshot],
    ) -> None:
        storage = self._storage
        current = (storage.read(), storage.length, storage.capacity)
        if self.config.cross_push_on_empty:
            push_opposite(*current, label=direction)
        snapshot = pop()
        if snapshot is None:
            raise HistoryExhaustedError(direction)
        if not self.config.cross_push_on_empty:
            push_opposite(*current, label=direction)
        self._restore(snapshot)

    def _restore(self, snapshot: Snapshot) -> None:
        storage = self._storage
        if storage.capacity != snapshot.capacity:
            storage.reallocate(snapshot.capacity)
        storage.write(0, snapshot.data)
        storage.set_length(snapshot.length)

    def _encode(self, text: TextLike) -> bytes:
        if isinstance(text, str):
            return text.encode(self.config.encoding)
        if isinstance(text, (bytes, bytearray, memoryview)):
            return bytes(text)
        raise TypeError(f"expected str or bytes-like, got {type(text).__name__}")


class Transaction(AbstractContextManager["Transaction"]):
    """Scope of one buffer operation.

    Runs the body inside a telemetry span. An :class:`EditError` raised in the
    body is logged and folded into :attr:`result` instead of propagating.
    """

    def __init__(self, buffer: TextBuffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self.result = EditResult(label=label)
        self._span_cm: Optional[ContextManager[telemetry.SpanHandle]] = None
        self.handle: Optional[telemetry.SpanHandle] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            logger_name=self.buffer._logger_name,
            component="buffer",
            metadata={"buffer": self.buffer.name, "length": self.buffer.length},
        )
        self.handle = self._span_cm.__enter__()
        return self

    def record(self) -> Snapshot:
        """Push the live state onto the undo stack and drop the redo branch."""

        return self.buffer._record(self.label)

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.result.length = self.buffer.length
        self.result.capacity = self.buffer.capacity
        if isinstance(exc, EditError):
            self.result.status = exc.status
            self.result.message = str(exc)
            if self.handle is not None:
                self.handle.add_metadata("status", exc.status)
                self.handle.reject(str(exc))
            if self._span_cm is not None:
                self._span_cm.__exit__(None, None, None)
            return True
        if exc is None and self.handle is not None:
            self.handle.add_metadata("status", self.result.status)
            self.handle.add_metadata("length_after", self.result.length)
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["BufferView", "EditResult", "TextBuffer", "Transaction", "TextLike"]

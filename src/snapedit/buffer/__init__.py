"""Byte buffer, clipboard, and snapshot history."""

from .buffer import BufferView, EditResult, TextBuffer, TextLike, Transaction
from .errors import BufferRangeError, EditError, HistoryExhaustedError, StorageError
from .history import HistoryStore, Snapshot
from .registers import Clipboard
from .storage import ByteStorage
from .validation import ensure_position, ensure_range, ensure_replace_span

__all__ = [
    "BufferView",
    "EditResult",
    "TextBuffer",
    "TextLike",
    "Transaction",
    "BufferRangeError",
    "EditError",
    "HistoryExhaustedError",
    "StorageError",
    "HistoryStore",
    "Snapshot",
    "Clipboard",
    "ByteStorage",
    "ensure_position",
    "ensure_range",
    "ensure_replace_span",
]

"""Range checks shared by the buffer operations."""

from __future__ import annotations

from .errors import BufferRangeError


def ensure_range(pos: int, span: int, length: int) -> None:
    """Accept ``[pos, pos + span)`` only when it starts inside the content.

    ``pos == length`` is rejected even for an empty span; delete, cut and
    copy have nothing to act on there.
    """

    if pos < 0 or span < 0 or pos >= length or pos + span > length:
        raise BufferRangeError(
            "Invalid position or length.", pos=pos, span=span, length=length
        )


def ensure_position(pos: int, length: int) -> None:
    if pos < 0 or pos > length:
        raise BufferRangeError("Invalid position.", pos=pos, length=length)


def ensure_replace_span(pos: int, replace_len: int, length: int) -> None:
    """Insertion may start at ``length``; the replaced span must fit."""

    if pos < 0 or replace_len < 0 or pos > length or pos + replace_len > length:
        raise BufferRangeError(
            "Invalid position or replace length.",
            pos=pos,
            span=replace_len,
            length=length,
        )

"""Growable byte storage with explicit length and capacity."""

from __future__ import annotations

from .errors import StorageError


class ByteStorage:
    """Fixed-size ``bytearray`` region of ``capacity`` bytes, ``length`` in use.

    The region never grows implicitly; callers decide when to :meth:`resize`.
    Bytes past ``length`` are unused allocation and carry no meaning.
    """

    __slots__ = ("_data", "_length")

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise StorageError("capacity must be at least 1")
        self._data = bytearray(capacity)
        self._length = 0

    @property
    def capacity(self) -> int:
        return len(self._data)

    @property
    def length(self) -> int:
        return self._length

    def set_length(self, length: int) -> None:
        if length < 0 or length > self.capacity:
            raise StorageError(
                f"length {length} outside capacity {self.capacity}"
            )
        self._length = length

    def resize(self, capacity: int) -> None:
        """Reallocate to ``capacity`` bytes, keeping the first ``length`` bytes."""

        if capacity < 1 or capacity < self._length:
            raise StorageError(
                f"cannot resize to {capacity} with {self._length} bytes in use"
            )
        grown = bytearray(capacity)
        grown[: self._length] = self._data[: self._length]
        self._data = grown

    def reallocate(self, capacity: int) -> None:
        """Drop the content and allocate a fresh region of ``capacity`` bytes."""

        if capacity < 1:
            raise StorageError("capacity must be at least 1")
        self._data = bytearray(capacity)
        self._length = 0

    def grow_to_fit(self, required: int) -> None:
        """Double capacity until ``required < capacity``."""

        capacity = self.capacity
        while required >= capacity:
            capacity *= 2
        if capacity != self.capacity:
            self.resize(capacity)

    def move(self, src: int, dst: int, count: int) -> None:
        """Copy ``count`` bytes from ``src`` to ``dst``; ranges may overlap."""

        if count < 0 or src < 0 or dst < 0:
            raise StorageError("negative offset or count")
        if src + count > self.capacity or dst + count > self.capacity:
            raise StorageError(
                f"move of {count} bytes {src}->{dst} exceeds capacity {self.capacity}"
            )
        if count == 0 or src == dst:
            return
        # the right-hand slice is materialized first, so overlap is harmless
        self._data[dst : dst + count] = self._data[src : src + count]

    def write(self, offset: int, payload: bytes) -> None:
        end = offset + len(payload)
        if offset < 0 or end > self.capacity:
            raise StorageError(
                f"write of {len(payload)} bytes at {offset} exceeds capacity {self.capacity}"
            )
        self._data[offset:end] = payload

    def read(self, start: int = 0, end: int | None = None) -> bytes:
        """Return a copy of ``[start, end)`` within the logical content."""

        stop = self._length if end is None else end
        if start < 0 or stop < start or stop > self._length:
            raise StorageError(f"read [{start}, {stop}) outside length {self._length}")
        return bytes(self._data[start:stop])

    def find(self, needle: bytes) -> int:
        return self._data.find(needle, 0, self._length)

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"ByteStorage(length={self._length}, capacity={self.capacity})"

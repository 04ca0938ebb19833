"""A fixed-size block allocator carved out of one byte buffer."""

from __future__ import annotations

import struct
from dataclasses import dataclass

_HEADER = struct.Struct("<II")
_CANARY = 0xDEADBEAF
_ALIGN = struct.calcsize("P")


def _round_up(value: int, align: int) -> int:
    return (value + align - 1) & ~(align - 1)


@dataclass(frozen=True, eq=False)
class Slab:
    """A block leased from a :class:`SlabPool`."""

    index: int
    data: memoryview


class SlabPool:
    """Pool of equally sized blocks taken from a ``blob_size`` byte buffer.

    Each block holds at least ``slab_size`` bytes, rounded up to pointer
    alignment, behind a small header recording its lease and a canary.
    """

    def __init__(self, slab_size: int, blob_size: int) -> None:
        if slab_size < 0 or blob_size < 0:
            raise ValueError("sizes must not be negative")
        self.size = _round_up(slab_size, _ALIGN) + _HEADER.size
        if self.size > blob_size:
            raise ValueError("blob is too small for a single slab")
        self.count = blob_size // self.size
        self._blob = bytearray(blob_size)
        self._view = memoryview(self._blob)

    def _offset(self, index: int) -> int:
        return index * self.size

    def alloc(self) -> Slab:
        """Lease the first free block; MemoryError when all are in use."""
        for index in range(self.count):
            offset = self._offset(index)
            leased, _ = _HEADER.unpack_from(self._blob, offset)
            if not leased:
                _HEADER.pack_into(self._blob, offset, 1, _CANARY)
                start = offset + _HEADER.size
                return Slab(index, self._view[start:offset + self.size])
        raise MemoryError("no free slab")

    def free(self, block: Slab) -> None:
        """Return ``block`` to the pool; ValueError if it is not from this pool."""
        if block.data.obj is not self._blob or not 0 <= block.index < self.count:
            raise ValueError("block does not belong to this pool")
        offset = self._offset(block.index)
        _, canary = _HEADER.unpack_from(self._blob, offset)
        if canary != _CANARY:
            raise ValueError("block does not belong to this pool")
        _HEADER.pack_into(self._blob, offset, 0, canary)
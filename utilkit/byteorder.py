"""Byte swapping and conversion between host and fixed byte orders."""

from __future__ import annotations

import sys
from typing import Callable

_LITTLE_ENDIAN = sys.byteorder == "little"


def bswap16(value: int) -> int:
    """Swap the bytes of a 16-bit value."""
    return ((value >> 8) & 0xFF) | ((value & 0xFF) << 8)


def bswap24(value: int) -> int:
    """Swap the outer bytes of a 24-bit value."""
    return ((value >> 16) & 0xFF) | (value & 0xFF00) | ((value & 0xFF) << 16)


def bswap32(value: int) -> int:
    """Swap the bytes of a 32-bit value."""
    return (
        ((value >> 24) & 0xFF)
        | ((value >> 8) & 0xFF00)
        | ((value & 0xFF00) << 8)
        | ((value & 0xFF) << 24)
    )


def bswap48(value: int) -> int:
    """Swap the bytes of a 48-bit value."""
    return (
        ((value >> 40) & 0xFF)
        | ((value >> 24) & 0xFF00)
        | ((value >> 8) & 0xFF0000)
        | ((value & 0xFF0000) << 8)
        | ((value & 0xFF00) << 24)
        | ((value & 0xFF) << 40)
    )


def bswap64(value: int) -> int:
    """Swap the bytes of a 64-bit value."""
    return (
        ((value >> 56) & 0xFF)
        | ((value >> 40) & 0xFF00)
        | ((value >> 24) & 0xFF0000)
        | ((value >> 8) & 0xFF000000)
        | ((value & 0xFF000000) << 8)
        | ((value & 0xFF0000) << 24)
        | ((value & 0xFF00) << 40)
        | ((value & 0xFF) << 56)
    )


_SWAPS: dict[int, Callable[[int], int]] = {
    16: bswap16,
    24: bswap24,
    32: bswap32,
    48: bswap48,
    64: bswap64,
}


def _swap_for(bits: int) -> Callable[[int], int]:
    try:
        return _SWAPS[bits]
    except KeyError:
        raise ValueError(f"unsupported width: {bits} bits") from None


def _to_order(value: int, bits: int, native: bool) -> int:
    swap = _swap_for(bits)
    return value if native else swap(value)


def cpu_to_le(value: int, bits: int) -> int:
    """Convert a host-order value to little endian."""
    return _to_order(value, bits, _LITTLE_ENDIAN)


def le_to_cpu(value: int, bits: int) -> int:
    """Convert a little-endian value to host order."""
    return _to_order(value, bits, _LITTLE_ENDIAN)


def cpu_to_be(value: int, bits: int) -> int:
    """Convert a host-order value to big endian."""
    return _to_order(value, bits, not _LITTLE_ENDIAN)


def be_to_cpu(value: int, bits: int) -> int:
    """Convert a big-endian value to host order."""
    return _to_order(value, bits, not _LITTLE_ENDIAN)
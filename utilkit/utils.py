"""General helpers: numbers, bit twiddling, time stamps and debug dumps."""

from __future__ import annotations

import random
import sys
import time
import traceback
from datetime import datetime, timezone

_U8 = 0xFF
_U16 = 0xFFFF
_U32 = 0xFFFFFFFF


def randint(limit: int) -> int:
    """Return a random number between 0 and ``limit``, both inclusive."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    return random.randint(0, limit)


def round_up_pow2(value: int) -> int:
    """Round a 32-bit value up to the nearest power of two.

    Powers of two are returned unchanged. Like the 32-bit arithmetic it
    mirrors, 0 and values above 2**31 wrap around to 0.
    """
    v = ((value & _U32) - 1) & _U32
    for shift in (1, 2, 4, 8, 16):
        v |= v >> shift
    return (v + 1) & _U32


def num_digits_in_number(num: int) -> int:
    """Return the number of decimal digits in ``num`` (0 has none)."""
    n = abs(num)
    return len(str(n)) if n else 0


def _printable(byte: int) -> str:
    return chr(byte) if 0x20 <= byte < 0x7F else "."


def hexdump(data: bytes, title: str = "") -> str:
    """Write a hex and ASCII dump of ``data`` to stdout and return it."""
    data = bytes(data)
    if not data:
        raise ValueError("nothing to dump")
    parts = [f"{title} [{len(data)}] =>\n"]
    for offset in range(0, len(data), 16):
        row = data[offset:offset + 16]
        hexes = [f"{b:02x} " for b in row]
        cut = min(8, len(row))
        text = "".join(_printable(b) for b in row).ljust(16)
        parts.append(
            f"    {offset:04d}  "
            + "".join(hexes[:cut])
            + " "
            + "".join(hexes[cut:])
            + "   " * (16 - len(row))
            + f" |{text}|\n"
        )
    out = "".join(parts)
    sys.stdout.write(out)
    return out


def usec_now() -> int:
    """Return the current time in microseconds."""
    return time.time_ns() // 1000


def usec_since(last: int) -> int:
    """Return microseconds elapsed since ``last`` (from :func:`usec_now`)."""
    return usec_now() - last


def millis_now() -> int:
    """Return the current time in milliseconds."""
    return usec_now() // 1000


def millis_since(last: int) -> int:
    """Return milliseconds elapsed since ``last`` (from :func:`millis_now`)."""
    return millis_now() - last


def get_time() -> tuple[int, int]:
    """Return the current time as ``(seconds, microseconds)``."""
    seconds, micro = divmod(usec_now(), 1_000_000)
    return seconds, micro


def iso8601_utc_datetime() -> str:
    """Return the current UTC time as ``YYYY-MM-DDThh:mm:ssZ``."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def dump_trace() -> str:
    """Write the caller's stack trace to stdout and return it."""
    frames = traceback.format_stack()[:-1]
    out = "".join(f"\t{frame.rstrip()}\n" for frame in frames) + "\n"
    sys.stdout.write(out)
    return out


def _code(c: int | str) -> int:
    return ord(c) if isinstance(c, str) else c


def char_is_space(c: int | str) -> bool:
    """True for space, tab, newline, vertical tab, form feed and CR."""
    d = (_code(c) - 9) & 0xFF
    return bool((0x80001F >> (d & 31)) & (1 >> (d >> 5)))


def char_is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def char_is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    return ord("a") <= (_code(c) | 32) <= ord("z")


def u8_bit_reverse(value: int) -> int:
    """Reverse the bit order of an 8-bit value."""
    b = value & _U8
    b = ((b & 0xAA) >> 1) | ((b & 0x55) << 1)
    b = ((b & 0xCC) >> 2) | ((b & 0x33) << 2)
    return ((b >> 4) | (b << 4)) & _U8


def u16_bit_reverse(value: int) -> int:
    """Reverse the bit order of a 16-bit value."""
    x = value & _U16
    x = ((x & 0xAAAA) >> 1) | ((x & 0x5555) << 1)
    x = ((x & 0xCCCC) >> 2) | ((x & 0x3333) << 2)
    x = ((x & 0xF0F0) >> 4) | ((x & 0x0F0F) << 4)
    return ((x >> 8) | (x << 8)) & _U16


def u32_bit_reverse(value: int) -> int:
    """Reverse the bit order of a 32-bit value."""
    x = value & _U32
    x = ((x & 0xAAAAAAAA) >> 1) | ((x & 0x55555555) << 1)
    x = ((x & 0xCCCCCCCC) >> 2) | ((x & 0x33333333) << 2)
    x = ((x & 0xF0F0F0F0) >> 4) | ((x & 0x0F0F0F0F) << 4)
    x = ((x & 0xFF00FF00) >> 8) | ((x & 0x00FF00FF) << 8)
    return ((x >> 16) | (x << 16)) & _U32
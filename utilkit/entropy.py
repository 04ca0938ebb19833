"""Secure random bytes from the operating system."""

from __future__ import annotations

import os

MAX_RANDOM_BYTES = 256


def get_random_bytes(length: int) -> bytes:
    """Return ``length`` cryptographically secure random bytes.

    At most 256 bytes can be requested at once.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if length > MAX_RANDOM_BYTES:
        raise OverflowError(
            f"at most {MAX_RANDOM_BYTES} random bytes per request, got {length}"
        )
    return os.urandom(length)
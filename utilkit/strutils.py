"""String helpers: hex conversion, trimming, tokenizing and string hashes."""

from __future__ import annotations

import re
import string

_U32 = 0xFFFFFFFF
_U64 = 0xFFFFFFFFFFFFFFFF
_C_SPACE = " \t\n\v\f\r"
_POLY_P = 31
_POLY_M = 1_000_000_009
_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_HEX_DIGITS = frozenset(string.hexdigits)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def atohstr(data: bytes) -> str:
    """Return the upper-case hexadecimal representation of ``data``."""
    return bytes(data).hex().upper()


def hstrtoa(hstr: str) -> bytes:
    """Convert a hexadecimal string to bytes.

    Raises ValueError for empty or odd-length input and for characters
    that are not hex digits.
    """
    if not hstr or len(hstr) % 2:
        raise ValueError("hex string must have a non-zero even length")
    if not all(ch in _HEX_DIGITS for ch in hstr):
        raise ValueError(f"invalid hex string: {hstr!r}")
    return bytes.fromhex(hstr)


def safe_atoi(text: str | None) -> int:
    """Parse a leading decimal integer the way ``atoi`` does.

    Unlike plain ``atoi``, a string that does not start with a number is
    an error (ValueError), so "0" and "A" can be told apart.
    """
    if text is None:
        raise ValueError("no text to parse")
    match = _INT_PREFIX.match(text)
    value = int(match.group(1)) if match else 0
    if value == 0 and not text.startswith("0"):
        raise ValueError(f"not a number: {text!r}")
    return value


def safe_strncpy(src: str, size: int) -> str:
    """Return at most ``size - 1`` characters of ``src``."""
    if size < 1:
        raise ValueError("size must be at least 1")
    return src[: size - 1]


def trim_suffix(text: str, suffix: str) -> str:
    """Remove the longest common tail shared by ``text`` and ``suffix``."""
    if text is None or suffix is None:
        raise ValueError("text and suffix are required")
    if len(suffix) > len(text):
        raise ValueError("suffix is longer than text")
    i, j = len(text), len(suffix)
    while j > 0 and text[i - 1] == suffix[j - 1]:
        i -= 1
        j -= 1
    return text[:i]


def rstrip(text: str) -> str:
    """Remove trailing space characters (only ``' '``)."""
    return text.rstrip(" ")


def lstrip(text: str) -> str:
    """Remove leading space characters (only ``' '``)."""
    return text.lstrip(" ")


def strip(text: str) -> str:
    """Remove leading and trailing space characters (only ``' '``)."""
    return text.strip(" ")


def chomp(text: str) -> str:
    """Remove any trailing carriage returns and newlines."""
    return text.rstrip("\r\n")


def remove_all(text: str, char: str) -> str:
    """Remove every occurrence of ``char`` from ``text``."""
    return text.replace(char, "")


def _tokens(text: str, sep: str) -> list[str]:
    if not sep:
        return [text] if text else []
    pattern = "[" + "".join(re.escape(c) for c in sep) + "]"
    return [tok for tok in re.split(pattern, text) if tok]


def split_string(text: str, sep: str) -> list[str]:
    """Split ``text`` on any character of ``sep``, dropping empty tokens.

    Raises ValueError when no token is found.
    """
    tokens = _tokens(text, sep)
    if not tokens:
        raise ValueError("no tokens found")
    return tokens


def strcntchr(text: str, char: str) -> int:
    """Return how many times ``char`` occurs in ``text``."""
    return text.count(char)


def strisempty(text: str | None) -> bool:
    """True when ``text`` is None, empty, or only whitespace."""
    return text is None or all(c in _C_SPACE for c in text)


def _hash_input(text: str | bytes, length: int) -> bytes:
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    nul = data.find(0)
    if nul >= 0:
        data = data[:nul]
    if length >= 0:
        data = data[:length]
    return data


def _signed(byte: int) -> int:
    return byte - 256 if byte >= 128 else byte


def hash32_djb2(text: str | bytes, length: int = -1) -> int:
    """djb2 hash of ``text`` up to ``length`` bytes (negative: whole text)."""
    h = 5381
    for byte in _hash_input(text, length):
        h = (h * 33 + _signed(byte)) & _U32
    return h


def hash32_fnv(text: str | bytes, length: int = -1) -> int:
    """32-bit FNV-1 style hash of ``text`` up to ``length`` bytes."""
    h = 0
    for byte in _hash_input(text, length):
        h = (h + (h << 1) + (h << 4) + (h << 7) + (h << 8) + (h << 24)) & _U32
        h ^= byte
    return h


def poly_hash(text: str | bytes, length: int = -1) -> int:
    """Polynomial rolling hash modulo 1e9+9 of ``text`` up to ``length`` bytes."""
    h = 0
    p_pow = 1
    for byte in _hash_input(text, length):
        term = ((_signed(byte) - ord("a") + 1) * p_pow) & _U64
        h = ((h + term) & _U64) % _POLY_M
        p_pow = (p_pow * _POLY_P) % _POLY_M
    return h


def str_sep(text: str | None, sep: str) -> tuple[str | None, str | None]:
    """Return the next token of ``text`` and the remaining text.

    Leading separators are skipped and one separator after the token is
    consumed. Empty or None input is returned unchanged in both places.
    """
    if not text:
        return text, text
    size = len(text)
    start = 0
    while start < size and text[start] in sep:
        start += 1
    end = start
    while end < size and text[end] not in sep:
        end += 1
    rest = text[end + 1:] if end < size else ""
    return text[start:end], rest


def str_sep_count(text: str | None, sep: str | None) -> int:
    """Return the number of tokens ``text`` splits into on ``sep``."""
    if not text:
        return 0
    if sep is None:
        return 1
    return len(_tokens(text, sep))


def to_upper(text: str) -> str:
    """Upper-case the ASCII letters of ``text``; other characters stay."""
    return text.translate(_TO_UPPER)


def to_lower(text: str) -> str:
    """Lower-case the ASCII letters of ``text``; other characters stay."""
    return text.translate(_TO_LOWER)
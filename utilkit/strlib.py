"""A string with a fixed capacity and append/copy operations."""

from __future__ import annotations

_MODES = frozenset({"a", "af", "c", "cf"})


class BoundedString:
    """Text limited to ``max_len`` characters.

    Operations take a mode: "a" appends, "c" copies over the contents; an
    "f" suffix fills as much as fits instead of failing. Operations that
    do not fit raise OverflowError.
    """

    def __init__(self, max_len: int, text: str = "", allocated: bool = True):
        if max_len < 0:
            raise ValueError("max_len must not be negative")
        if len(text) > max_len:
            raise ValueError("text does not fit into max_len")
        self._max_len = max_len
        self._text = text
        self.allocated = allocated

    @property
    def max_len(self) -> int:
        return self._max_len

    @property
    def text(self) -> str:
        return self._text

    def __str__(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def __repr__(self) -> str:
        return f"BoundedString({self._max_len!r}, {self._text!r})"

    def clone(self) -> BoundedString:
        """Return a resizable copy whose capacity equals the current length."""
        return BoundedString(len(self._text), self._text)

    def resize(self, new_len: int) -> None:
        """Change the capacity, truncating the text if needed."""
        if not self.allocated:
            raise ValueError("string is not resizable")
        if new_len < 0:
            raise ValueError("new_len must not be negative")
        self._max_len = new_len
        self._text = self._text[:new_len]

    def _start(self, mode: str) -> int:
        if mode not in _MODES:
            raise ValueError(f"invalid mode: {mode!r}")
        return len(self._text) if mode[0] == "a" else 0

    def printf(self, mode: str, fmt: str, *args) -> int:
        """Write ``fmt % args`` and return the number of characters written.

        The result plus the kept text must stay below ``max_len``.
        """
        start = self._start(mode)
        rendered = fmt % args
        if start + len(rendered) >= self._max_len:
            raise OverflowError("formatted text does not fit")
        self._text = self._text[:start] + rendered
        return len(rendered)

    def copy(self, mode: str, text: str) -> int:
        """Write ``text`` and return the number of characters written."""
        start = self._start(mode)
        length = len(text)
        if start + length > self._max_len:
            if not mode.endswith("f"):
                raise OverflowError("text does not fit")
            length = self._max_len - start
        self._text = self._text[:start] + text[:length]
        return length

    def merge(self, other: BoundedString) -> None:
        """Append ``other``, growing if needed, and empty ``other``."""
        target = len(self._text) + len(other)
        if target > self._max_len:
            self.resize(target)
        self.copy("a", other.text)
        other._text = ""
        other._max_len = 0
        other.allocated = False

    def flush(self) -> None:
        """Empty the text, keeping the capacity."""
        self._text = ""
"""A bounded first-in last-out store."""

from __future__ import annotations

from typing import Any


class Filo:
    """A stack holding at most ``max_size`` items."""

    def __init__(self, max_size: int) -> None:
        if max_size < 0:
            raise ValueError("max_size must not be negative")
        self.max_size = max_size
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        """Put ``item`` on top; OverflowError when full."""
        if len(self._items) >= self.max_size:
            raise OverflowError("filo is full")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item; IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty filo")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it; IndexError when empty."""
        if not self._items:
            raise IndexError("peek into an empty filo")
        return self._items[-1]

    def reset(self) -> None:
        """Drop all items."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def free_space(self) -> int:
        """Return how many more items fit."""
        return self.max_size - len(self._items)
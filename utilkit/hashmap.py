"""A string-keyed hash map with separate chaining and djb2 hashing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator

from utilkit.strutils import hash32_djb2
from utilkit.utils import round_up_pow2

_BASE_SIZE = 32
_DENSITY_FACTOR = 0.8


@dataclass
class _Item:
    hash: int
    key: str
    value: Any


class HashMap:
    """Map of string keys to values; capacity doubles when density passes 0.8."""

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self._capacity = round_up_pow2(_BASE_SIZE)
        self._pool: list[list[_Item]] = [[] for _ in range(self._capacity)]
        self._count = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def _bucket(self, key_hash: int) -> list[_Item]:
        return self._pool[key_hash & (self._capacity - 1)]

    def _rehash(self) -> None:
        old_capacity = self._capacity
        self._capacity <<= 1
        self._pool.extend([] for _ in range(old_capacity))
        mask = self._capacity - 1
        for pivot, bucket in enumerate(self._pool[:old_capacity]):
            kept = []
            for item in bucket:
                target = item.hash & mask
                if target == pivot:
                    kept.append(item)
                else:
                    self._pool[target].insert(0, item)
            self._pool[pivot] = kept

    def insert(self, key: str, value: Any) -> int:
        """Insert or update ``key`` and return its hash."""
        if self._count / self._capacity > _DENSITY_FACTOR:
            self._rehash()
        key_hash = hash32_djb2(key)
        bucket = self._bucket(key_hash)
        for item in bucket:
            if item.hash == key_hash and item.key == key:
                item.value = value
                return key_hash
        bucket.append(_Item(key_hash, key, value))
        self._count += 1
        return key_hash

    def _locate(
        self, key: str | None, key_hash: int | None
    ) -> tuple[list[_Item], int | None]:
        if key is None and key_hash is None:
            raise ValueError("a key or a key hash is required")
        h = hash32_djb2(key) if key is not None else key_hash
        bucket = self._bucket(h)
        for index, item in enumerate(bucket):
            if item.hash == h and (key is None or item.key == key):
                return bucket, index
        return bucket, None

    def get(self, key: str | None = None, key_hash: int | None = None) -> Any:
        """Return the value for ``key`` (or for ``key_hash``), or None."""
        bucket, index = self._locate(key, key_hash)
        return None if index is None else bucket[index].value

    def delete(self, key: str | None = None, key_hash: int | None = None) -> Any:
        """Remove ``key`` (or the entry for ``key_hash``); return its value or None."""
        bucket, index = self._locate(key, key_hash)
        if index is None:
            return None
        item = bucket.pop(index)
        self._count -= 1
        return item.value

    def clear(self, callback: Callable[[str, Any], None] | None = None) -> None:
        """Remove all entries, calling ``callback(key, value)`` for each."""
        if callback is not None:
            for key, value in self.items():
                callback(key, value)
        self._reset()

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[str]:
        for key, _ in self.items():
            yield key

    def items(self) -> Iterator[tuple[str, Any]]:
        """Yield ``(key, value)`` pairs in bucket order."""
        for bucket in self._pool:
            for item in bucket:
                yield item.key, item.value
"""Least-frequently-used cache and a plain dictionary cache."""

from collections import OrderedDict
from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any


@dataclass
class _Entry:
    key: Hashable
    value: Any
    freq: int


class LFUCache:
    """Bounded cache that evicts the least frequently used key.

    Among keys of equal frequency, the least recently touched one goes first.
    """

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._entries: dict[Hashable, _Entry] = {}
        self._buckets: dict[int, OrderedDict[Hashable, _Entry]] = {}
        self._min_freq = 0

    def put(self, key: Hashable, value: Any) -> None:
        entry = self._entries.get(key)
        if entry is not None:
            entry.value = value
            self._touch(entry)
            return
        if len(self._entries) >= self.capacity:
            self._evict()
        entry = _Entry(key, value, 1)
        self._entries[key] = entry
        self._buckets.setdefault(1, OrderedDict())[key] = entry
        self._min_freq = 1

    def get(self, key: Hashable) -> Any:
        """Return the value for ``key``, or None if it is absent."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        self._touch(entry)
        return entry.value

    def __len__(self) -> int:
        return len(self._entries)

    def __str__(self) -> str:
        lines = []
        for freq in sorted(self._buckets):
            bucket = self._buckets[freq]
            items = "".join(
                f"{{{e.key} {e.value} {e.freq}}}" for e in reversed(bucket.values())
            )
            lines.append(f"{freq}: {items}\n")
        return "".join(lines)

    def _touch(self, entry: _Entry) -> None:
        bucket = self._buckets[entry.freq]
        del bucket[entry.key]
        if not bucket:
            del self._buckets[entry.freq]
            if self._min_freq == entry.freq:
                self._min_freq += 1
        entry.freq += 1
        self._buckets.setdefault(entry.freq, OrderedDict())[entry.key] = entry

    def _evict(self) -> None:
        bucket = self._buckets[self._min_freq]
        key, _ = bucket.popitem(last=False)
        if not bucket:
            del self._buckets[self._min_freq]
        del self._entries[key]


class MapCache:
    """Unbounded cache backed by a dictionary."""

    def __init__(self) -> None:
        self._data: dict[Hashable, Any] = {}

    def put(self, key: Hashable, value: Any) -> None:
        self._data[key] = value

    def get(self, key: Hashable) -> Any:
        """Return the value for ``key``, or None if it is absent."""
        return self._data.get(key)

    def __len__(self) -> int:
        return len(self._data)
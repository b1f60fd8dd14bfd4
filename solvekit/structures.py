"""Small data structures: a versioned key-value store, an LRU cache and a min-tracking stack."""

from __future__ import annotations

from bisect import bisect_left
from collections import OrderedDict, defaultdict
from operator import itemgetter


class TimeMap:
    """Key-value store that keeps every value a key had, by timestamp.

    Values for a key are expected to be set with non-decreasing timestamps.
    """

    def __init__(self) -> None:
        self._history: defaultdict[str, list[tuple[int, str]]] = defaultdict(list)

    def set(self, key: str, value: str, timestamp: int) -> None:
        """Record ``value`` for ``key`` as of ``timestamp``."""
        self._history[key].append((timestamp, value))

    def get(self, key: str, timestamp: int) -> str:
        """Return the value ``key`` had at ``timestamp``, or ``""`` if it had none yet."""
        entries = self._history.get(key, [])
        index = bisect_left(entries, timestamp, key=itemgetter(0))
        if index < len(entries) and entries[index][0] == timestamp:
            return entries[index][1]
        return entries[index - 1][1] if index else ""


class LRUCache:
    """Fixed-size integer cache that evicts the least recently used key."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._entries: OrderedDict[int, int] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get(self, key: int) -> int:
        """Return the value for ``key`` and mark it most recently used, or -1 if absent."""
        if key not in self._entries:
            return -1
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key: int, value: int) -> None:
        """Store ``value`` under ``key``, evicting the least recently used key when full."""
        if key in self._entries:
            self._entries.move_to_end(key)
        elif len(self._entries) == self.capacity:
            self._entries.popitem(last=False)
        self._entries[key] = value


class MinStack:
    """Stack that reports its smallest value in constant time."""

    def __init__(self) -> None:
        self._items: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, val: int) -> None:
        """Push ``val`` onto the stack."""
        smallest = min(val, self._items[-1][1]) if self._items else val
        self._items.append((val, smallest))

    def pop(self) -> None:
        """Remove the top value; does nothing on an empty stack."""
        if self._items:
            self._items.pop()

    def top(self) -> int:
        """Return the top value."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1][0]

    def get_min(self) -> int:
        """Return the smallest value on the stack."""
        if not self._items:
            raise IndexError("minimum of an empty stack")
        return self._items[-1][1]
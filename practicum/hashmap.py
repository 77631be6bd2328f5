"""A hash table with open addressing and linear probing."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any

DEFAULT_CAPACITY = 101
MAX_LOAD = 0.75

_DELETED = object()


class HashMapError(LookupError):
    """Raised for a missing key, a duplicate key or a bad resize."""


class HashMap:
    """Maps keys to values in a fixed array of slots that grows when loaded.

    A key may be inserted only once. Before an insertion the table doubles
    its capacity when more than three quarters of the slots are taken.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._slots: list[Any] = [None] * capacity
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def hash_index(self, key: Hashable) -> int:
        """The slot where probing for ``key`` starts."""
        return hash(key) % self.capacity

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self.capacity

    def _probe(self, key: Hashable):
        start = self.hash_index(key)
        for step in range(self.capacity):
            yield (start + step) % self.capacity

    def _find(self, key: Hashable) -> int | None:
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None:
                return None
            if slot is not _DELETED and slot[0] == key:
                return index
        return None

    def resize(self, new_capacity: int) -> HashMap:
        """Grow the table to ``new_capacity`` slots, keeping every entry."""
        if new_capacity <= self.capacity:
            raise HashMapError("Resize: new size less or equal current size")
        entries = [s for s in self._slots if s is not None and s is not _DELETED]
        self._slots = [None] * new_capacity
        for key, value in entries:
            self._slots[self._free_index(key)] = (key, value)
        return self

    def _free_index(self, key: Hashable) -> int:
        free: int | None = None
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None:
                return index if free is None else free
            if slot is _DELETED:
                if free is None:
                    free = index
            elif slot[0] == key:
                raise HashMapError("Record with this key already exist")
        if free is None:
            raise HashMapError("table is full")
        return free

    def insert(self, key: Hashable, value: Any = None) -> None:
        if self._size / self.capacity > MAX_LOAD:
            self.resize(self.capacity * 2)
        self._slots[self._free_index(key)] = (key, value)
        self._size += 1

    def erase(self, key: Hashable) -> None:
        if self.is_empty():
            raise HashMapError("Erase from empty table")
        index = self._find(key)
        if index is None:
            raise HashMapError("Erase: Wrong key")
        self._slots[index] = _DELETED
        self._size -= 1

    def __getitem__(self, key: Hashable) -> Any:
        index = self._find(key)
        if index is None:
            raise HashMapError("Access: Wrong key")
        return self._slots[index][1]
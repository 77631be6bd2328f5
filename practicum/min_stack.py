"""A stack that reports its minimum element in constant time."""

from __future__ import annotations


class MinStack:
    """Integer stack that tracks the running minimum.

    The capacity doubles whenever a push finds the stack full.
    """

    def __init__(self, capacity: int = 10) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._items: list[tuple[int, int]] = []

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def push(self, value: int) -> None:
        if self.is_full():
            self._capacity *= 2
        current_min = value if self.is_empty() else min(value, self._items[-1][1])
        self._items.append((value, current_min))

    def top(self) -> int:
        if self.is_empty():
            raise IndexError("top of an empty stack")
        return self._items[-1][0]

    def pop(self) -> int:
        """Remove the top element and return it."""
        if self.is_empty():
            raise IndexError("pop from an empty stack")
        return self._items.pop()[0]

    def min(self) -> int:
        if self.is_empty():
            raise IndexError("minimum of an empty stack")
        return self._items[-1][1]

    def clear(self) -> None:
        self._items.clear()

    def copy(self) -> MinStack:
        duplicate = MinStack(self._capacity)
        duplicate._items = list(self._items)
        return duplicate

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MinStack):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]
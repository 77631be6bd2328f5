"""A stack with a fixed capacity."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class BoundedStack(Generic[T]):
    """A last-in first-out stack that refuses pushes beyond its capacity."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 0:
            raise ValueError("Negative stack size")
        self._capacity = capacity
        self._items: list[T] = []

    def push(self, value: T) -> None:
        if self.is_full():
            raise OverflowError("stack is full")
        self._items.append(value)

    def pop(self) -> T:
        if self.is_empty():
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top element without removing it."""
        if self.is_empty():
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def capacity(self) -> int:
        return self._capacity

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def copy(self) -> BoundedStack[T]:
        duplicate: BoundedStack[T] = BoundedStack(self._capacity)
        duplicate._items = list(self._items)
        return duplicate

    def __len__(self) -> int:
        return len(self._items)
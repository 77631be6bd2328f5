"""An unbalanced binary search tree of distinct integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass
class _Node:
    value: int
    left: _Node | None = None
    right: _Node | None = None


class BinaryTree:
    """A binary search tree; inserting a value already present does nothing."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def _locate(self, value: int) -> tuple[_Node | None, _Node | None]:
        parent = None
        node = self._root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
        return parent, node

    def find(self, value: int) -> bool:
        """Whether ``value`` is in the tree."""
        return self._locate(value)[1] is not None

    def insert(self, value: int) -> None:
        parent, node = self._locate(value)
        if node is not None:
            return
        new = _Node(value)
        if parent is None:
            self._root = new
        elif value < parent.value:
            parent.left = new
        else:
            parent.right = new
        self._size += 1

    def _relink(
        self, parent: _Node | None, node: _Node, child: _Node | None
    ) -> None:
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def delete(self, value: int) -> None:
        """Remove ``value`` if present; a missing value is ignored."""
        parent, node = self._locate(value)
        if node is None:
            return
        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.value = successor.value
            if successor_parent is node:
                node.right = successor.right
            else:
                successor_parent.left = successor.right
        else:
            child = node.left if node.left is not None else node.right
            self._relink(parent, node, child)
        self._size -= 1

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.find(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        """Yield the values in increasing order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right
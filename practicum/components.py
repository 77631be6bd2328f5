"""Counting connected components of a graph given as an adjacency matrix."""

from __future__ import annotations

import random
from collections.abc import Sequence


def random_edge() -> int:
    """Return 0 or 1 at random: whether an edge is present."""
    return random.randint(0, 1)


class AdjacencyMatrix:
    """A square adjacency matrix; a non-zero entry (i, j) is an edge i -> j."""

    def __init__(self, matrix: Sequence[Sequence[int]]) -> None:
        self._rows = [list(row) for row in matrix]

    @classmethod
    def random(cls, size: int) -> AdjacencyMatrix:
        """Build a symmetric matrix without loops and with random edges."""
        rows = [[0] * size for _ in range(size)]
        for i in range(size):
            for j in range(i + 1, size):
                edge = random_edge()
                rows[i][j] = edge
                rows[j][i] = edge
        return cls(rows)

    def __getitem__(self, index: tuple[int, int]) -> int:
        i, j = index
        return self._rows[i][j]

    def __len__(self) -> int:
        return len(self._rows)

    def reachable(self, start: int) -> set[int]:
        """Return the vertices reached by a depth-first search from ``start``."""
        return self._search(start, set())

    def _search(self, start: int, visited: set[int]) -> set[int]:
        stack = [start]
        while stack:
            vertex = stack.pop()
            if vertex in visited:
                continue
            visited.add(vertex)
            row = self._rows[vertex]
            stack.extend(
                neighbour
                for neighbour in reversed(range(len(row)))
                if row[neighbour] != 0 and neighbour not in visited
            )
        return visited

    def component_count(self) -> int:
        """Count the components found by searching from each unvisited vertex."""
        visited: set[int] = set()
        count = 0
        for vertex in range(len(self._rows)):
            if vertex not in visited:
                count += 1
                self._search(vertex, visited)
        return count
"""Single-source shortest paths on a weighted adjacency matrix."""

from __future__ import annotations

import random
from collections.abc import Sequence

UNREACHABLE = 10000
"""Distance reported for vertices that cannot be reached from the start."""

DEFAULT_GRAPH: tuple[tuple[int, ...], ...] = (
    (0, 7, 9, 0, 0, 14),
    (7, 0, 10, 15, 0, 0),
    (9, 10, 0, 11, 0, 2),
    (0, 15, 11, 0, 6, 0),
    (0, 0, 0, 6, 0, 9),
    (14, 0, 2, 0, 9, 0),
)


def random_graph(count: int = 2) -> list[list[int]]:
    """Build a deterministic symmetric graph with weights in [0, 100).

    The diagonal is zero; a zero weight elsewhere means "no edge".
    """
    generator = random.Random(0)
    graph = [[0] * count for _ in range(count)]
    for i in range(count):
        for j in range(i + 1, count):
            weight = generator.getrandbits(32) % 100
            graph[i][j] = weight
            graph[j][i] = weight
    return graph


def shortest_distances(
    graph: Sequence[Sequence[int]] = DEFAULT_GRAPH, top: int = 0
) -> list[int]:
    """Return the shortest distance from ``top`` to every vertex.

    A weight of zero means there is no edge. A start vertex past the end of
    the graph is clamped to the last vertex. Vertices that cannot be reached
    get :data:`UNREACHABLE`.
    """
    count = len(graph)
    if count == 0:
        return []
    top = min(top, count - 1)

    visited = [False] * count
    dist = [UNREACHABLE] * count
    dist[top] = 0
    current = top
    min_dist = 0

    while min_dist < UNREACHABLE:
        visited[current] = True
        row = graph[current]
        for j, weight in enumerate(row):
            if weight != 0 and dist[current] + weight < dist[j]:
                dist[j] = dist[current] + weight
        min_dist = UNREACHABLE
        for j, distance in enumerate(dist):
            if not visited[j] and distance < min_dist:
                min_dist = distance
                current = j

    return dist
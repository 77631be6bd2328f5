"""Points, triangles and the point-in-triangle test."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point on the plane."""

    x: float = 0.0
    y: float = 0.0


class TriangleError(ValueError):
    """Raised when three points do not form a triangle."""


def side_length(a: Point, b: Point) -> float:
    """Return the distance between two points."""
    return math.sqrt((b.x - a.x) ** 2 + (b.y - a.y) ** 2)


class Triangle:
    """A non-degenerate triangle given by its three vertices."""

    def __init__(
        self,
        a: Point = Point(-3.0, 0.0),
        b: Point = Point(3.0, 0.0),
        c: Point = Point(0.0, 3.0),
    ) -> None:
        self.a = a
        self.b = b
        self.c = c
        self.ab = side_length(a, b)
        self.bc = side_length(b, c)
        self.ac = side_length(a, c)
        if not self.exists():
            raise TriangleError("Triangle does not exist")

    def exists(self) -> bool:
        """Whether the sides satisfy the strict triangle inequality."""
        ab, bc, ac = self.ab, self.bc, self.ac
        return ab + bc > ac and ab + ac > bc and bc + ac > ab

    def contains(self, point: Point) -> bool:
        """Whether the point lies inside the triangle or on its border."""
        x0, y0 = point.x, point.y
        x1, y1 = self.a.x, self.a.y
        x2, y2 = self.b.x, self.b.y
        x3, y3 = self.c.x, self.c.y

        first = (x1 - x0) * (y2 - y1) - (x2 - x1) * (y1 - y0)
        second = (x2 - x0) * (y3 - y2) - (x3 - x2) * (y2 - y0)
        third = (x3 - x0) * (y1 - y3) - (x1 - x3) * (y3 - y0)

        return (first >= 0 and second >= 0 and third >= 0) or (
            first <= 0 and second <= 0 and third <= 0
        )
"""Intersection test for two line segments on the plane."""


def segments_intersect(
    x1_start: float,
    y1_start: float,
    x1_end: float,
    y1_end: float,
    x2_start: float,
    y2_start: float,
    x2_end: float,
    y2_end: float,
) -> bool:
    """Whether the two segments have a common point.

    Parallel segments count as intersecting only when they lie on the same line.
    """
    den = (y2_end - y2_start) * (x1_start - x1_end) - (x2_end - x2_start) * (
        y1_start - y1_end
    )
    if den == 0:
        cross1 = x1_start * y1_end - x1_end * y1_start
        cross2 = x2_start * y2_end - x2_end * y2_start
        return (
            cross1 * (x2_end - x2_start) - cross2 * (x1_end - x1_start) == 0
            and cross1 * (y2_end - y2_start) - cross2 * (y1_end - y1_start) == 0
        )

    num_a = (x2_end - x1_end) * (y2_end - y2_start) - (x2_end - x2_start) * (
        y2_end - y1_end
    )
    num_b = (x1_start - x1_end) * (y2_end - y1_end) - (x2_end - x1_end) * (
        y1_start - y1_end
    )
    ua = num_a / den
    ub = num_b / den
    return 0 <= ua <= 1 and 0 <= ub <= 1
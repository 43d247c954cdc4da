"""Circle geometry: point-in-circle tests and the circle through three points."""

from __future__ import annotations

import math
from dataclasses import dataclass

Point = tuple[int, int]


class CollinearPointsError(ValueError):
    """Raised when three points admit no circle through them."""


@dataclass(frozen=True)
class Circle:
    """A circle given by its centre and radius."""

    center_x: float
    center_y: float
    radius: float


def is_unbounded(x: float) -> bool:
    """Return True if ``x`` is infinite or NaN."""
    return not math.isfinite(x)


def is_in_circle(x: float, y: float, center_x: float, center_y: float, radius: float) -> bool:
    """Return True if (x, y) lies strictly inside the circle."""
    dx = x - center_x
    dy = y - center_y
    return dx * dx + dy * dy < radius * radius


def _midpoint(p: Point, q: Point) -> Point:
    # Midpoints land on the integer grid, truncated toward zero.
    return int(0.5 * (p[0] + q[0])), int(0.5 * (p[1] + q[1]))


def _perpendicular_slope(p: Point, q: Point) -> float:
    """Slope of the line perpendicular to pq; infinite or NaN when pq is horizontal."""
    dx = p[0] - q[0]
    dy = p[1] - q[1]
    if dy == 0:
        if dx == 0:
            return math.nan
        return -math.copysign(math.inf, dx)
    return -1.0 * dx / dy


def circumcircle(p1: Point, p2: Point, p3: Point) -> Circle:
    """Return the circle through three points, from the bisectors of p1p2 and p1p3.

    When p1 and p3 share a row, the centre is placed on the midpoint of p1p3.
    Raises CollinearPointsError when no circle can be formed.
    """
    mid1 = _midpoint(p1, p2)
    mid2 = _midpoint(p1, p3)
    a1 = _perpendicular_slope(p1, p2)
    a2 = _perpendicular_slope(p1, p3)

    if not is_unbounded(a1) and not is_unbounded(a2):
        if a1 == a2:
            raise CollinearPointsError(f"points {p1}, {p2}, {p3} lie on one line")
        b1 = mid1[1] - a1 * mid1[0]
        b2 = mid2[1] - a2 * mid2[0]
        center_x = (b2 - b1) / (a1 - a2)
        center_y = a1 * center_x + b1
    elif is_unbounded(a1) and not is_unbounded(a2):
        b2 = mid2[1] - a2 * mid2[0]
        center_x = float(mid1[0])
        center_y = a2 * center_x + b2
    elif not is_unbounded(a1):
        b1 = mid2[1] - a1 * mid2[0]
        center_x = float(mid2[0])
        center_y = a1 * center_x + b1
    else:
        raise CollinearPointsError(f"points {p1}, {p2}, {p3} lie on one line")

    radius = math.sqrt((center_x - p1[0]) ** 2 + (center_y - p1[1]) ** 2)
    return Circle(center_x, center_y, radius)
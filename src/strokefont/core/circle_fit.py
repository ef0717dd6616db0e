"""Algebraic least-squares circle fitting.

Implements the Kasa fit: the circle equation is linearised and the center
is solved from a 2x2 system built from power sums of the coordinates. The
radius is then taken as the mean distance of the points to that center.
"""

import math
from dataclasses import dataclass

from strokefont.domain import Point

# Below this determinant magnitude the points are treated as collinear
DETERMINANT_EPSILON = 1e-10


@dataclass(frozen=True)
class Circle:
    """A fitted circle.

    Attributes:
        center: Circle center
        radius: Mean distance from the fitted points to the center
    """

    center: Point
    radius: float

    def radial_error(self, point: Point) -> float:
        """Distance from a point to the circle outline."""
        return abs(math.hypot(point.x - self.center.x, point.y - self.center.y) - self.radius)


def fit_circle(points: list[Point]) -> Circle | None:
    """Fit a circle to a set of points.

    Args:
        points: At least 3 points

    Returns:
        The fitted circle, or None for fewer than 3 points or degenerate
        (collinear) input
    """
    n = len(points)
    if n < 3:
        return None

    sum_x = sum_y = 0.0
    sum_x2 = sum_y2 = sum_xy = 0.0
    sum_x3 = sum_y3 = sum_x2y = sum_xy2 = 0.0

    for p in points:
        x, y = p.x, p.y
        x2, y2 = x * x, y * y
        sum_x += x
        sum_y += y
        sum_x2 += x2
        sum_y2 += y2
        sum_xy += x * y
        sum_x3 += x2 * x
        sum_y3 += y2 * y
        sum_x2y += x2 * y
        sum_xy2 += x * y2

    a = n * sum_x2 - sum_x * sum_x
    b = n * sum_xy - sum_x * sum_y
    c = n * sum_y2 - sum_y * sum_y
    d = 0.5 * (n * sum_xy2 - sum_x * sum_y2 + n * sum_x3 - sum_x * sum_x2)
    e = 0.5 * (n * sum_y3 - sum_y * sum_y2 + n * sum_x2y - sum_y * sum_x2)

    det = a * c - b * b
    if abs(det) < DETERMINANT_EPSILON:
        return None

    cx = (d * c - b * e) / det
    cy = (a * e - b * d) / det

    radius = sum(math.hypot(p.x - cx, p.y - cy) for p in points) / n
    return Circle(center=Point(cx, cy), radius=radius)


def max_radial_error(points: list[Point], circle: Circle) -> float:
    """Worst distance of any point from the circle outline."""
    return max((circle.radial_error(p) for p in points), default=0.0)

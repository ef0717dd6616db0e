"""Geometric operations for stroke processing.

This module provides the small set of planar utilities shared by the
simplifier, the arc segmenter and the font converter:
- Point distances (to a point, to a chord)
- Angle normalization and direction turns
- Polyline length
- Bezier curve flattening

All functions are pure and stateless.
"""

import math

from strokefont.core._bezier import flatten_curve
from strokefont.domain import Point


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b.x - a.x, b.y - a.y)


def perpendicular_distance(point: Point, line_start: Point, line_end: Point) -> float:
    """Distance from a point to the infinite line through two points.

    When the two line points coincide the line is undefined and the plain
    point-to-point distance to `line_start` is returned instead.

    Args:
        point: The point to measure
        line_start: First point on the line
        line_end: Second point on the line

    Returns:
        Perpendicular distance (always non-negative)

    Examples:
        >>> perpendicular_distance(Point(1.0, 1.0), Point(0.0, 0.0), Point(2.0, 0.0))
        1.0
    """
    dx = line_end.x - line_start.x
    dy = line_end.y - line_start.y

    length = math.hypot(dx, dy)
    if length == 0.0:
        return distance(point, line_start)

    # |cross(end - start, point - start)| / |end - start|
    return abs(dy * point.x - dx * point.y + line_end.x * line_start.y - line_end.y * line_start.x) / length


def normalize_angle(angle: float) -> float:
    """Wrap an angle in radians into the interval (-pi, pi]."""
    while angle > math.pi:
        angle -= 2 * math.pi
    while angle <= -math.pi:
        angle += 2 * math.pi
    return angle


def angle_at(center: Point, point: Point) -> float:
    """Polar angle of `point` as seen from `center`."""
    return math.atan2(point.y - center.y, point.x - center.x)


def turn_angle(a: Point, b: Point, c: Point) -> float:
    """Absolute change of direction at `b` when walking a -> b -> c.

    Returns 0.0 when either leg has zero length.

    Returns:
        Turn in radians, in [0, pi]
    """
    ux, uy = b.x - a.x, b.y - a.y
    vx, vy = c.x - b.x, c.y - b.y
    if (ux == 0.0 and uy == 0.0) or (vx == 0.0 and vy == 0.0):
        return 0.0
    return abs(math.atan2(ux * vy - uy * vx, ux * vx + uy * vy))


def polyline_length(points: list[Point]) -> float:
    """Total length of an open polyline."""
    return sum(distance(points[i], points[i + 1]) for i in range(len(points) - 1))


def bezier_flatten(points: list[Point], tolerance: float = 1.0) -> list[Point]:
    """Convert a Bezier curve to line segments.

    Handles lines (2 points), quadratic (3 points) and cubic (4 points)
    curves by recursive subdivision until each piece is flat within tolerance.

    Args:
        points: Control points of the curve, endpoints included
        tolerance: Maximum distance from the true curve (in design units)

    Returns:
        Points approximating the curve, starting and ending on its endpoints

    Raises:
        ValueError: If points list is not of length 2 to 4
    """
    if len(points) == 2:
        return list(points)
    if len(points) in (3, 4):
        return flatten_curve(points, tolerance)
    raise ValueError(f"Expected 2-4 points for Bezier curve, got {len(points)}")

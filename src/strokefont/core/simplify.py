"""Stroke simplification.

Reduces a raw pointer-sampled polyline to a minimal point set within an
error tolerance using the Douglas-Peucker algorithm. The implementation walks
an explicit stack of index ranges and marks kept points in a mask, so no
sub-lists are copied and deep strokes cannot hit the recursion limit.
"""

import logging

from strokefont.config import SimplifyConfig
from strokefont.core.geometry import perpendicular_distance
from strokefont.domain import Point, Stroke

logger = logging.getLogger(__name__)


def douglas_peucker(points: list[Point], tolerance: float) -> list[Point]:
    """Simplify a polyline with the Douglas-Peucker algorithm.

    For every range the point farthest from the chord joining the range
    endpoints is found (the first one wins on ties). If its distance exceeds
    the tolerance the range is split there, otherwise every interior point
    of the range is dropped.

    Args:
        points: Ordered points of the polyline
        tolerance: Maximum allowed deviation (>= 0)

    Returns:
        Reduced point list. The first and last points are always kept;
        inputs with fewer than 3 points are returned unchanged.

    Raises:
        ValueError: If tolerance is negative

    Examples:
        >>> pts = [Point(0.0, 0.0), Point(1.0, 0.1), Point(2.0, 0.0)]
        >>> len(douglas_peucker(pts, 0.5))
        2
    """
    if tolerance < 0:
        raise ValueError(f"Tolerance must be >= 0, got {tolerance}")

    n = len(points)
    if n < 3:
        return list(points)

    keep = [False] * n
    keep[0] = keep[n - 1] = True

    stack: list[tuple[int, int]] = [(0, n - 1)]
    while stack:
        first, last = stack.pop()
        if last - first < 2:
            continue

        max_distance = 0.0
        split = first
        for k in range(first + 1, last):
            d = perpendicular_distance(points[k], points[first], points[last])
            if d > max_distance:
                max_distance = d
                split = k

        if max_distance > tolerance:
            keep[split] = True
            stack.append((split, last))
            stack.append((first, split))

    return [p for p, kept in zip(points, keep) if kept]


class StrokeSimplifier:
    """Simplifies finished strokes with a configured tolerance."""

    def __init__(self, config: SimplifyConfig | None = None) -> None:
        self.config = config or SimplifyConfig()

    def simplify(self, points: list[Point]) -> list[Point]:
        """Simplify a point sequence with the configured tolerance."""
        result = douglas_peucker(points, self.config.tolerance)
        logger.debug("Simplified stroke from %d to %d points", len(points), len(result))
        return result

    def simplify_stroke(self, stroke: Stroke) -> Stroke:
        """Return a simplified copy of a stroke."""
        return Stroke(points=self.simplify(stroke.points))

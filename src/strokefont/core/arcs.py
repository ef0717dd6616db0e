"""Arc detection for simplified strokes.

This module partitions a stroke into straight line runs and circular arcs:
- is_collinear: Rejects straight runs and corners before any circle fit
- ArcSegmenter: Walks a stroke and emits LineSegment/ArcSegment pieces

Only arcs that pass every geometric check are emitted; anything else falls
back to a two-point line so the walk always makes progress.
"""

import logging
import math
from dataclasses import dataclass, field

from strokefont.config import ArcConfig
from strokefont.core.circle_fit import Circle, fit_circle
from strokefont.core.geometry import (
    angle_at,
    distance,
    normalize_angle,
    perpendicular_distance,
    turn_angle,
)
from strokefont.domain import ArcSegment, LineSegment, PathSegment, Point

logger = logging.getLogger(__name__)

# Runs whose chord is shorter than this are treated as a single point
MIN_CHORD_LENGTH = 0.1

# Consecutive directions turning less than this are parallel
PARALLEL_TURN_DEG = 3.0


def is_collinear(points: list[Point], tolerance: float) -> bool:
    """Check whether a run of points should be drawn with straight lines.

    A run is collinear when its chord is negligibly short, when every
    interior point lies within `tolerance` of the chord, or when the run is
    a corner: at least half of the turns between consecutive directions are
    below 3 degrees and one joint carries more than half of all the turning.
    Two straight pieces meeting at an angle fit a circle surprisingly well
    but must never become an arc. A densely sampled arc also has small turns,
    but they are spread evenly, so it is still fitted.

    Args:
        points: Run of points (start and end included)
        tolerance: Maximum distance from the chord

    Returns:
        True if the run must not be fitted with an arc
    """
    if len(points) < 3:
        return True

    start, end = points[0], points[-1]
    if distance(start, end) < MIN_CHORD_LENGTH:
        return True

    if all(perpendicular_distance(p, start, end) <= tolerance for p in points[1:-1]):
        return True

    threshold = math.radians(PARALLEL_TURN_DEG)
    turns = [turn_angle(points[k - 1], points[k], points[k + 1]) for k in range(1, len(points) - 1)]
    parallel = sum(1 for t in turns if t < threshold)
    return parallel * 2 >= len(turns) and max(turns) * 2 > sum(turns)


def is_clockwise(points: list[Point], center: Point) -> bool:
    """Winding of a run around a center.

    The direction is read from the angle of the middle point relative to the
    start point; a negative angle means clockwise in the coordinate system
    of the points.
    """
    start = points[0]
    mid = points[len(points) // 2]
    return normalize_angle(angle_at(center, mid) - angle_at(center, start)) < 0


@dataclass
class ArcStats:
    """Counters describing one segmentation pass."""

    arcs: int = 0
    lines: int = 0
    rejected: dict[str, int] = field(default_factory=dict)

    def reject(self, reason: str) -> None:
        self.rejected[reason] = self.rejected.get(reason, 0) + 1


class ArcSegmenter:
    """Partitions strokes into line and arc segments.

    For every start index the segmenter tries the longest candidate run in
    its lookahead window first and shrinks it until a run passes all checks:

    1. not collinear (see is_collinear)
    2. a circle can be fitted
    3. the radius lies within the configured bounds
    4. every point lies within tolerance of the circle
    5. the angular span reaches the configured minimum
    6. the arc length to chord length ratio reaches the configured minimum

    Example:
        >>> segmenter = ArcSegmenter(ArcConfig(tolerance=0.5))
        >>> segments = segmenter.segment(stroke.points)
    """

    def __init__(self, config: ArcConfig | None = None) -> None:
        self.config = config or ArcConfig()
        self.stats = ArcStats()

    def segment(self, points: list[Point]) -> list[PathSegment]:
        """Split a stroke into segments.

        Args:
            points: Simplified stroke points

        Returns:
            Segments in stroke order. Consecutive segments share their
            joint point. Strokes shorter than the configured minimum are
            returned as a single line.
        """
        self.stats = ArcStats()
        n = len(points)
        if n == 0:
            return []
        if n < self.config.min_points:
            self.stats.lines += 1
            return [LineSegment(points=list(points))]

        segments: list[PathSegment] = []
        i = 0
        while i < n - 1:
            found = self._fit_arc(points, i)
            if found is not None:
                arc, end_index = found
                segments.append(arc)
                self.stats.arcs += 1
                i = end_index
            else:
                segments.append(LineSegment(points=list(points[i : i + 2])))
                self.stats.lines += 1
                i += 1

        logger.debug(
            "Segmented %d points into %d arcs and %d lines (rejected: %s)",
            n,
            self.stats.arcs,
            self.stats.lines,
            self.stats.rejected,
        )
        return segments

    def _fit_arc(self, points: list[Point], start: int) -> tuple[ArcSegment, int] | None:
        """Find the longest acceptable arc starting at `start`.

        Returns:
            The arc and the index of its last point, or None
        """
        cfg = self.config
        last = min(start + cfg.window, len(points)) - 1

        for end in range(last, start + 2, -1):
            run = points[start : end + 1]

            if is_collinear(run, cfg.tolerance):
                self.stats.reject("collinear")
                continue

            circle = fit_circle(run)
            if circle is None:
                self.stats.reject("degenerate")
                continue

            if not cfg.min_radius <= circle.radius <= cfg.max_radius:
                self.stats.reject("radius")
                continue

            if any(circle.radial_error(p) > cfg.tolerance for p in run):
                self.stats.reject("tolerance")
                continue

            if not self._spans_enough(run, circle):
                continue

            return self._make_arc(run, circle), end

        return None

    def _spans_enough(self, run: list[Point], circle: Circle) -> bool:
        """Apply the angular span and arc/chord ratio checks."""
        start, end = run[0], run[-1]
        span = abs(normalize_angle(angle_at(circle.center, end) - angle_at(circle.center, start)))
        if span < math.radians(self.config.min_angle_deg):
            self.stats.reject("angle")
            return False

        chord = distance(start, end)
        if chord == 0.0 or circle.radius * span / chord < self.config.min_arc_chord_ratio:
            self.stats.reject("flat")
            return False

        return True

    def _make_arc(self, run: list[Point], circle: Circle) -> ArcSegment:
        clockwise = is_clockwise(run, circle.center)
        logger.debug(
            "Arc fitted: radius=%.2f, points=%d, clockwise=%s",
            circle.radius,
            len(run),
            clockwise,
        )
        return ArcSegment(
            start=run[0],
            end=run[-1],
            center=circle.center,
            radius=circle.radius,
            clockwise=clockwise,
            points=list(run),
        )

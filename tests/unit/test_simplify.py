"""Unit tests for Douglas-Peucker stroke simplification."""

import math
import random

import pytest

from strokefont.config import SimplifyConfig
from strokefont.core.geometry import perpendicular_distance
from strokefont.core.simplify import StrokeSimplifier, douglas_peucker
from strokefont.domain import Point, Stroke


def wavy_stroke(n: int = 60) -> list[Point]:
    """A sampled sine wave, as a mouse drag would produce."""
    return [Point(i * 5.0, 40.0 * math.sin(i / 6.0)) for i in range(n)]


def random_polyline(seed: int, n: int = 40) -> list[Point]:
    """A jittery random walk; no three points are exactly collinear."""
    rng = random.Random(seed)
    x = y = 0.0
    points = []
    for _ in range(n):
        x += rng.uniform(1.0, 6.0)
        y += rng.uniform(-8.0, 8.0)
        points.append(Point(x, y))
    return points


class TestDouglasPeucker:
    """Tests for douglas_peucker."""

    @pytest.mark.parametrize("n", [0, 1, 2])
    def test_short_input_unchanged(self, n: int) -> None:
        """Test fewer than 3 points come back unchanged."""
        points = [Point(i, i * 2) for i in range(n)]
        assert douglas_peucker(points, 5.0) == points

    def test_straight_line_reduces_to_endpoints(self) -> None:
        """Test collinear samples collapse to the two endpoints."""
        points = [Point(i * 10.0, i * 5.0) for i in range(20)]
        assert douglas_peucker(points, 0.1) == [points[0], points[-1]]

    def test_small_wobble_removed(self) -> None:
        """Test deviations below the tolerance are dropped."""
        points = [Point(0.0, 0.0), Point(1.0, 0.1), Point(2.0, 0.0)]
        assert douglas_peucker(points, 0.5) == [Point(0.0, 0.0), Point(2.0, 0.0)]

    def test_corner_kept(self) -> None:
        """Test a corner far from the chord survives."""
        points = [Point(0, 0), Point(5, 0), Point(10, 0), Point(10, 5), Point(10, 10)]
        assert douglas_peucker(points, 1.0) == [Point(0, 0), Point(10, 0), Point(10, 10)]

    def test_endpoints_always_kept(self) -> None:
        """Test first and last points are always in the result."""
        points = wavy_stroke()
        result = douglas_peucker(points, 1000.0)
        assert result == [points[0], points[-1]]

    def test_result_is_ordered_subset(self) -> None:
        """Test the output keeps input order and only input points."""
        points = wavy_stroke()
        result = douglas_peucker(points, 2.0)
        indices = [points.index(p) for p in result]
        assert indices == sorted(indices)
        assert len(result) < len(points)

    def test_dropped_points_within_tolerance(self) -> None:
        """Test every dropped point lies within tolerance of its kept chord."""
        tolerance = 2.0
        points = wavy_stroke()
        result = douglas_peucker(points, tolerance)
        kept = [points.index(p) for p in result]
        for a, b in zip(kept, kept[1:]):
            for k in range(a + 1, b):
                assert perpendicular_distance(points[k], points[a], points[b]) <= tolerance

    def test_zero_tolerance_keeps_bends(self) -> None:
        """Test tolerance 0 only drops exactly collinear points."""
        points = [Point(0, 0), Point(1, 0), Point(2, 0), Point(3, 1)]
        assert douglas_peucker(points, 0.0) == [Point(0, 0), Point(2, 0), Point(3, 1)]

    def test_first_maximum_wins(self) -> None:
        """Test ties on the farthest point split at the earliest index."""
        points = [Point(0, 0), Point(1, 5), Point(2, 5), Point(3, 0)]
        # Both interior points are 5 from the chord; the split at index 1
        # leaves index 2 within tolerance of the chord (1, 5)-(3, 0).
        assert douglas_peucker(points, 1.0) == [Point(0, 0), Point(1, 5), Point(3, 0)]

    @pytest.mark.parametrize("seed", range(8))
    def test_larger_tolerance_never_keeps_more(self, seed: int) -> None:
        """Test each larger tolerance keeps a subset of the previous result."""
        points = random_polyline(seed)
        previous = points
        for tolerance in (0.0, 0.5, 1.0, 2.0, 4.0, 8.0, 16.0):
            result = douglas_peucker(points, tolerance)
            assert len(result) <= len(previous)
            assert set(result) <= set(previous)
            previous = result

    @pytest.mark.parametrize("seed", range(8))
    def test_zero_tolerance_is_identity(self, seed: int) -> None:
        points = random_polyline(seed)
        assert douglas_peucker(points, 0.0) == points

    def test_negative_tolerance_rejected(self) -> None:
        """Test negative tolerance raises ValueError."""
        with pytest.raises(ValueError, match="Tolerance"):
            douglas_peucker([Point(0, 0), Point(1, 1), Point(2, 0)], -1.0)

    def test_long_stroke_does_not_recurse(self) -> None:
        """Test very long strokes are handled without recursion limits."""
        points = [Point(i, (i % 2) * 10.0) for i in range(1200)]
        assert douglas_peucker(points, 1.0) == points


class TestStrokeSimplifier:
    """Tests for StrokeSimplifier."""

    def test_uses_configured_tolerance(self) -> None:
        """Test the configured tolerance decides what is dropped."""
        points = [Point(0, 0), Point(5, 1.5), Point(10, 0)]
        assert len(StrokeSimplifier(SimplifyConfig(tolerance=2.0)).simplify(points)) == 2
        assert len(StrokeSimplifier(SimplifyConfig(tolerance=1.0)).simplify(points)) == 3

    def test_simplify_stroke_returns_copy(self) -> None:
        """Test simplifying a stroke leaves the input untouched."""
        stroke = Stroke([Point(i, 0) for i in range(10)])
        simplified = StrokeSimplifier().simplify_stroke(stroke)
        assert len(simplified) == 2
        assert len(stroke) == 10

"""Unit tests for arc detection.

Tests for is_collinear, is_clockwise and ArcSegmenter.
"""

import math

import pytest

from strokefont.config import ArcConfig
from strokefont.core.arcs import ArcSegmenter, is_clockwise, is_collinear
from strokefont.domain import ArcSegment, LineSegment, Point, segments_to_polyline


def arc_points(
    cx: float, cy: float, r: float, start_deg: float, end_deg: float, n: int
) -> list[Point]:
    """Evenly spaced points on a circular arc."""
    step = (end_deg - start_deg) / (n - 1)
    return [
        Point(
            cx + r * math.cos(math.radians(start_deg + k * step)),
            cy + r * math.sin(math.radians(start_deg + k * step)),
        )
        for k in range(n)
    ]


@pytest.fixture
def segmenter() -> ArcSegmenter:
    return ArcSegmenter(ArcConfig())


class TestIsCollinear:
    """Tests for is_collinear."""

    def test_two_points(self) -> None:
        """Test runs shorter than three points are collinear."""
        assert is_collinear([Point(0, 0), Point(10, 10)], 0.5)

    def test_short_chord(self) -> None:
        """Test a run returning to its start is treated as collinear."""
        assert is_collinear([Point(0, 0), Point(5, 5), Point(0.05, 0)], 0.5)

    def test_points_near_chord(self) -> None:
        """Test points within tolerance of the chord are collinear."""
        points = [Point(0, 0), Point(5, 0.3), Point(10, -0.2), Point(15, 0)]
        assert is_collinear(points, 0.5)

    def test_corner_is_collinear(self) -> None:
        """Test two straight legs meeting at a corner are rejected."""
        points = [Point(0, 0), Point(10, 0), Point(20, 0), Point(30, 0), Point(30, 10), Point(30, 20)]
        assert is_collinear(points, 0.5)

    def test_arc_is_not_collinear(self) -> None:
        """Test a quarter circle is a candidate for fitting."""
        assert not is_collinear(arc_points(0, 0, 20, 0, 90, 8), 0.5)

    def test_dense_arc_is_not_a_corner(self) -> None:
        """Test an arc sampled every 2 degrees is not mistaken for a corner."""
        assert not is_collinear(arc_points(0, 0, 40, 0, 38, 20), 0.5)


class TestIsClockwise:
    """Tests for is_clockwise."""

    def test_increasing_angle(self) -> None:
        """Test increasing angles are counter-clockwise in the point frame."""
        assert not is_clockwise(arc_points(0, 0, 10, 0, 90, 5), Point(0, 0))

    def test_decreasing_angle(self) -> None:
        """Test decreasing angles are clockwise in the point frame."""
        assert is_clockwise(arc_points(0, 0, 10, 90, 0, 5), Point(0, 0))

    def test_across_the_branch_cut(self) -> None:
        """Test runs crossing 180 degrees keep their winding."""
        assert not is_clockwise(arc_points(0, 0, 10, 150, 210, 5), Point(0, 0))


class TestArcSegmenter:
    """Tests for ArcSegmenter."""

    def test_empty(self, segmenter: ArcSegmenter) -> None:
        """Test an empty stroke gives no segments."""
        assert segmenter.segment([]) == []

    def test_short_stroke_single_line(self, segmenter: ArcSegmenter) -> None:
        """Test strokes below the minimum point count become one line."""
        points = [Point(0, 0), Point(10, 5), Point(20, 0), Point(30, 5)]
        segments = segmenter.segment(points)
        assert len(segments) == 1
        assert isinstance(segments[0], LineSegment)
        assert segments[0].points == points

    def test_single_point(self, segmenter: ArcSegmenter) -> None:
        """Test a dot becomes a one-point line."""
        segments = segmenter.segment([Point(3, 3)])
        assert len(segments) == 1
        assert segments[0].points == [Point(3, 3)]

    def test_straight_stroke_is_lines(self, segmenter: ArcSegmenter) -> None:
        """Test a straight stroke never produces an arc."""
        points = [Point(i * 10.0, 0.0) for i in range(8)]
        segments = segmenter.segment(points)
        assert all(isinstance(s, LineSegment) for s in segments)
        assert len(segments) == 7

    def test_quarter_circle_is_one_arc(self, segmenter: ArcSegmenter) -> None:
        """Test a sampled quarter circle becomes a single arc."""
        points = arc_points(0, 0, 20, 0, 90, 8)
        segments = segmenter.segment(points)
        assert len(segments) == 1
        arc = segments[0]
        assert isinstance(arc, ArcSegment)
        assert arc.start == points[0]
        assert arc.end == points[-1]
        assert arc.radius == pytest.approx(20.0, abs=1e-6)
        assert arc.center.x == pytest.approx(0.0, abs=1e-6)
        assert arc.center.y == pytest.approx(0.0, abs=1e-6)
        assert arc.clockwise is False

    def test_radius_ten_quarter_circle(self, segmenter: ArcSegmenter) -> None:
        """Test 8 points on a 90 degree arc of radius 10 give exactly one arc."""
        points = arc_points(0, 0, 10, 0, 90, 8)
        segments = segmenter.segment(points)
        assert len(segments) == 1
        assert isinstance(segments[0], ArcSegment)
        assert segments[0].radius == pytest.approx(10.0, abs=1e-6)
        assert segments[0].clockwise is False

    def test_densely_sampled_arc(self) -> None:
        """Test a half circle sampled every 2 degrees becomes arcs only."""
        segmenter = ArcSegmenter(ArcConfig(min_arc_chord_ratio=1.0))
        segments = segmenter.segment(arc_points(0, 0, 40, 0, 180, 91))
        assert segments
        assert all(isinstance(s, ArcSegment) for s in segments)
        assert all(s.radius == pytest.approx(40.0, abs=1e-4) for s in segments)
        assert segmenter.stats.rejected.get("collinear", 0) == 0

    def test_reversed_arc_is_clockwise(self, segmenter: ArcSegmenter) -> None:
        """Test drawing the arc backwards flips the winding."""
        segments = segmenter.segment(arc_points(0, 0, 20, 90, 0, 8))
        assert len(segments) == 1
        assert segments[0].clockwise is True

    def test_corner_is_never_an_arc(self, segmenter: ArcSegmenter) -> None:
        """Test an L-shaped stroke stays straight."""
        points = [Point(0, 0), Point(10, 0), Point(20, 0), Point(30, 0), Point(30, 10), Point(30, 20), Point(30, 30)]
        segments = segmenter.segment(points)
        assert all(isinstance(s, LineSegment) for s in segments)

    def test_radius_above_bound_is_lines(self, segmenter: ArcSegmenter) -> None:
        """Test arcs larger than the maximum radius fall back to lines."""
        segments = segmenter.segment(arc_points(0, 0, 200, 0, 90, 8))
        assert all(isinstance(s, LineSegment) for s in segments)
        assert segmenter.stats.rejected.get("radius", 0) > 0

    def test_radius_bound_is_configurable(self) -> None:
        """Test raising the maximum radius accepts large arcs."""
        segmenter = ArcSegmenter(ArcConfig(max_radius=500.0))
        segments = segmenter.segment(arc_points(0, 0, 200, 0, 90, 8))
        assert len(segments) == 1
        assert isinstance(segments[0], ArcSegment)

    def test_shallow_arc_rejected(self) -> None:
        """Test arcs spanning less than the minimum angle stay lines."""
        segmenter = ArcSegmenter(ArcConfig(min_angle_deg=60.0, tolerance=0.01))
        segments = segmenter.segment(arc_points(0, 0, 40, 0, 45, 8))
        assert all(isinstance(s, LineSegment) for s in segments)

    def test_window_limits_arc_length(self) -> None:
        """Test a long arc is split into several window-sized arcs."""
        segmenter = ArcSegmenter(ArcConfig(window=6))
        points = arc_points(0, 0, 30, 0, 270, 16)
        segments = segmenter.segment(points)
        arcs = [s for s in segments if isinstance(s, ArcSegment)]
        assert len(arcs) >= 2
        assert all(len(a.points) <= 6 for a in arcs)

    def test_segments_cover_the_stroke(self, segmenter: ArcSegmenter) -> None:
        """Test segments are contiguous and reproduce every input point."""
        points = [Point(0, 0), Point(10, 0), Point(20, 0)]
        points += arc_points(20, 20, 20, -90, 90, 12)[1:]
        points += [Point(10, 40), Point(0, 40)]
        segments = segmenter.segment(points)

        for a, b in zip(segments, segments[1:]):
            assert a.points[-1] == b.points[0]
        assert segments_to_polyline(segments) == points
        assert any(isinstance(s, ArcSegment) for s in segments)

    def test_stats_counted(self, segmenter: ArcSegmenter) -> None:
        """Test the segmenter records arcs and lines of the last pass."""
        segmenter.segment(arc_points(0, 0, 20, 0, 90, 8))
        assert segmenter.stats.arcs == 1
        assert segmenter.stats.lines == 0

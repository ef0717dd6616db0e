"""Tests for domain models to verify they work correctly."""

import pytest

from strokefont.domain import (
    ArcSegment,
    BBox,
    Font,
    FontMetrics,
    Glyph,
    KernRule,
    LineSegment,
    Point,
    Stroke,
    calculate_bounds,
    segments_to_polyline,
)


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(100.0, 200.0).to_tuple() == (100.0, 200.0)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(12.5, -3.25)
        p2 = Point.from_dict(p1.to_dict())
        assert p2 == p1

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore

    def test_point_hashable(self) -> None:
        """Test that equal points collapse in a set."""
        assert len({Point(1, 2), Point(1, 2), Point(2, 1)}) == 2


class TestBBox:
    """Tests for BBox class."""

    def test_from_points(self) -> None:
        """Test bounding box of scattered points."""
        box = BBox.from_points([Point(10, 40), Point(-5, 20), Point(30, 0)])
        assert (box.min_x, box.min_y, box.max_x, box.max_y) == (-5, 0, 30, 40)
        assert box.width == 35
        assert box.height == 40

    def test_empty(self) -> None:
        """Test that no points give the all-zero box."""
        box = BBox.from_points([])
        assert box == BBox()
        assert box.width == 0.0

    def test_to_dict_includes_size(self) -> None:
        """Test serialized box carries width and height."""
        data = BBox(0, 0, 4, 2).to_dict()
        assert data["width"] == 4
        assert data["height"] == 2


class TestStroke:
    """Tests for Stroke class."""

    def test_append_and_len(self) -> None:
        """Test growing a stroke point by point."""
        stroke = Stroke()
        stroke.append(Point(0, 0))
        stroke.append(Point(1, 1))
        assert len(stroke) == 2
        assert stroke[1] == Point(1, 1)
        assert list(stroke) == [Point(0, 0), Point(1, 1)]

    def test_replace(self) -> None:
        """Test replacing points copies the list."""
        points = [Point(0, 0), Point(5, 5)]
        stroke = Stroke()
        stroke.replace(points)
        points.append(Point(9, 9))
        assert len(stroke) == 2

    def test_copy_is_independent(self) -> None:
        """Test that a copy does not share its point list."""
        stroke = Stroke([Point(0, 0)])
        copy = stroke.copy()
        copy.append(Point(1, 1))
        assert len(stroke) == 1

    def test_bounding_box(self) -> None:
        """Test stroke bounding box."""
        stroke = Stroke([Point(0, 10), Point(20, 0)])
        assert stroke.bounding_box() == BBox(0, 0, 20, 10)

    def test_serialization(self) -> None:
        """Test stroke serializes as a list of point dicts."""
        stroke = Stroke([Point(1, 2), Point(3, 4)])
        data = stroke.to_dict()
        assert data == [{"x": 1, "y": 2}, {"x": 3, "y": 4}]
        assert Stroke.from_dict(data) == stroke


class TestSegments:
    """Tests for line/arc segments and polyline joining."""

    def test_line_endpoints(self) -> None:
        """Test line segment start and end."""
        line = LineSegment([Point(0, 0), Point(1, 0), Point(2, 0)])
        assert line.start == Point(0, 0)
        assert line.end == Point(2, 0)

    def test_arc_to_dict(self) -> None:
        """Test arc serialization."""
        arc = ArcSegment(
            start=Point(10, 0),
            end=Point(0, 10),
            center=Point(0, 0),
            radius=10.0,
            clockwise=False,
            points=[Point(10, 0), Point(7.07, 7.07), Point(0, 10)],
        )
        data = arc.to_dict()
        assert data["type"] == "arc"
        assert data["radius"] == 10.0
        assert data["clockwise"] is False

    def test_joint_points_kept_once(self) -> None:
        """Test that shared joints between segments appear once."""
        segments = [
            LineSegment([Point(0, 0), Point(1, 0)]),
            LineSegment([Point(1, 0), Point(2, 0)]),
            LineSegment([Point(2, 0), Point(2, 1)]),
        ]
        assert segments_to_polyline(segments) == [Point(0, 0), Point(1, 0), Point(2, 0), Point(2, 1)]

    def test_empty(self) -> None:
        """Test joining no segments."""
        assert segments_to_polyline([]) == []


class TestGlyph:
    """Tests for Glyph class."""

    def test_bounds_computed_on_creation(self) -> None:
        """Test bounds follow the strokes."""
        glyph = Glyph(strokes=[Stroke([Point(10, 0), Point(50, 700)])])
        assert glyph.bounds == BBox(10, 0, 50, 700)

    def test_set_strokes_recomputes_bounds(self) -> None:
        """Test replacing strokes updates bounds but keeps the advance."""
        glyph = Glyph(strokes=[Stroke([Point(0, 0), Point(10, 10)])], advance_width=400)
        glyph.set_strokes([Stroke([Point(100, 100), Point(300, 200)])])
        assert glyph.bounds == BBox(100, 100, 300, 200)
        assert glyph.advance_width == 400

    def test_add_stroke(self) -> None:
        """Test adding a stroke grows the bounds."""
        glyph = Glyph(strokes=[Stroke([Point(0, 0), Point(10, 10)])])
        glyph.add_stroke(Stroke([Point(20, 20), Point(30, 5)]))
        assert len(glyph.strokes) == 2
        assert glyph.bounds.max_x == 30

    def test_is_empty(self) -> None:
        """Test glyphs without points are empty."""
        assert Glyph().is_empty()
        assert Glyph(strokes=[Stroke()]).is_empty()
        assert not Glyph(strokes=[Stroke([Point(0, 0)])]).is_empty()

    def test_effective_advance(self) -> None:
        """Test advance falls back to the ink width."""
        strokes = [Stroke([Point(100, 0), Point(300, 0)])]
        assert Glyph(strokes=strokes).effective_advance == 200
        assert Glyph(strokes=strokes, advance_width=500).effective_advance == 500

    def test_serialization_recomputes_bounds(self) -> None:
        """Test that stored bounds are ignored when loading."""
        glyph = Glyph(strokes=[Stroke([Point(0, 0), Point(10, 20)])], advance_width=250)
        data = glyph.to_dict()
        data["bounds"] = {"min_x": 999}
        loaded = Glyph.from_dict(data)
        assert loaded.bounds == BBox(0, 0, 10, 20)
        assert loaded.advance_width == 250

    @pytest.mark.parametrize("advance", [0, -40])
    def test_from_dict_rejects_non_positive_advance(self, advance: float) -> None:
        with pytest.raises(ValueError, match="advance_width"):
            Glyph.from_dict({"strokes": [], "advance_width": advance})

    def test_from_dict_missing_advance(self) -> None:
        assert Glyph.from_dict({"strokes": []}).advance_width is None

    def test_calculate_bounds(self) -> None:
        """Test bounds across several strokes."""
        strokes = [Stroke([Point(0, 5)]), Stroke([Point(-2, 1), Point(8, 3)])]
        assert calculate_bounds(strokes) == BBox(-2, 1, 8, 5)


class TestFontMetrics:
    """Tests for FontMetrics class."""

    def test_defaults(self) -> None:
        """Test default metrics describe a 1000-unit em."""
        metrics = FontMetrics()
        assert metrics.units_per_em == 1000
        assert metrics.baseline_y == metrics.ascent == 800

    def test_rejects_non_positive_em(self) -> None:
        """Test units_per_em must be positive."""
        with pytest.raises(ValueError):
            FontMetrics(units_per_em=0)

    @pytest.mark.parametrize("ascent,descent", [(0, -200), (800, 0), (-10, -200), (800, 50)])
    def test_rejects_bad_vertical_metrics(self, ascent: float, descent: float) -> None:
        """Test ascent must be positive and descent negative."""
        with pytest.raises(ValueError):
            FontMetrics(ascent=ascent, descent=descent)

    def test_from_dict_fills_defaults(self) -> None:
        """Test missing fields fall back to defaults."""
        metrics = FontMetrics.from_dict({"units_per_em": 2048})
        assert metrics.units_per_em == 2048
        assert metrics.ascent == 800


class TestFont:
    """Tests for Font and KernRule."""

    def test_is_empty(self) -> None:
        """Test a font with only blank glyphs is empty."""
        font = Font(glyphs={" ": Glyph(advance_width=300)})
        assert font.is_empty()
        font.glyphs["A"] = Glyph(strokes=[Stroke([Point(0, 0), Point(1, 1)])])
        assert not font.is_empty()

    def test_kern_rule_immutable(self) -> None:
        """Test that kerning rules are frozen."""
        rule = KernRule("A", "V", 40)
        with pytest.raises(AttributeError):
            rule.adjustment = 10  # type: ignore

    def test_serialization(self) -> None:
        """Test font serialization keeps glyphs, metrics and kerning."""
        font = Font(
            name="Hand",
            glyphs={"A": Glyph(strokes=[Stroke([Point(0, 800), Point(250, 0)])], advance_width=500)},
            metrics=FontMetrics(units_per_em=1000, ascent=750, descent=-250),
            kerning=[KernRule("A", "V,W", 40.0)],
        )
        loaded = Font.from_dict(font.to_dict())
        assert loaded.name == "Hand"
        assert loaded.metrics == font.metrics
        assert loaded.kerning == font.kerning
        assert loaded.glyphs["A"].strokes == font.glyphs["A"].strokes
        assert loaded.glyphs["A"].advance_width == 500

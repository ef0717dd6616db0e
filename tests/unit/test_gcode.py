"""Unit tests for the G-code exporter."""

import logging
import math

import pytest

from strokefont.config import ExportConfig, GCodeConfig, StrokeFontSettings
from strokefont.core.glyph_store import GlyphStore
from strokefont.domain import Font, Point, Stroke
from strokefont.export import GCodeExporter, ToolpathCompiler, format_number
from strokefont.export.gcode import GCodeWriter


def quarter_arc(cx: float, cy: float, r: float, n: int = 8) -> list[Point]:
    return [
        Point(cx + r * math.cos(math.radians(90 * k / (n - 1))), cy + r * math.sin(math.radians(90 * k / (n - 1))))
        for k in range(n)
    ]


@pytest.fixture
def store() -> GlyphStore:
    store = GlyphStore(Font(name="Test"))
    store.set_stroke("I", [Stroke([Point(100, 0), Point(100, 800)])])
    store.advance("I", 200)
    store.set_stroke("C", [Stroke(quarter_arc(100, 100, 20))])
    return store


@pytest.fixture
def settings() -> StrokeFontSettings:
    return StrokeFontSettings(export=ExportConfig(gcode=GCodeConfig(include_timestamp=False)))


def program(store: GlyphStore, settings: StrokeFontSettings, text: str) -> list[str]:
    compiled = ToolpathCompiler(store, settings).compile(text)
    return GCodeExporter(settings.export).generate(compiled).split("\n")


class TestFormatNumber:
    """Tests for format_number."""

    @pytest.mark.parametrize(
        "value,decimals,expected",
        [(2.5, 3, "2.500"), (-0.0001, 3, "0.000"), (-0.0, 3, "0.000"), (-1.25, 2, "-1.25"), (7, 0, "7")],
    )
    def test_format(self, value: float, decimals: int, expected: str) -> None:
        assert format_number(value, decimals) == expected


class TestGCodeWriter:
    """Tests for GCodeWriter line handling."""

    def test_duplicate_moves_dropped(self) -> None:
        out = GCodeWriter(3)
        out.move("G0 X1.000 Y1.000")
        out.move("G0 X1.000 Y1.000")
        assert out.lines == ["G0 X1.000 Y1.000"]

    def test_comments_do_not_break_dedup(self) -> None:
        out = GCodeWriter(3)
        out.move("G0 X1.000 Y1.000")
        out.comment("note")
        out.move("G0 X1.000 Y1.000")
        assert out.lines == ["G0 X1.000 Y1.000", "; note"]

    def test_feed_only_on_change(self) -> None:
        out = GCodeWriter(3)
        out.move("G1 X1.000 Y0.000", feed=1000)
        out.move("G1 X2.000 Y0.000", feed=1000)
        out.move("G1 Z-0.500", feed=300)
        assert out.lines == ["G1 X1.000 Y0.000 F1000", "G1 X2.000 Y0.000", "G1 Z-0.500 F300"]

    def test_text_ends_with_newline(self) -> None:
        out = GCodeWriter(3)
        out.raw("M2")
        assert out.text() == "M2\n"


class TestGCodeExporter:
    """Tests for GCodeExporter.generate."""

    def test_full_program(self, store: GlyphStore, settings: StrokeFontSettings) -> None:
        """Test the complete program for a single straight stroke."""
        assert program(store, settings, "I") == [
            "; strokefont output",
            "; Font: Test",
            "; Text: I",
            "; Size: 10.000 mm",
            "",
            "G21 ; mm mode",
            "G90 ; Absolute positioning",
            "G17 ; XY plane",
            "G0 Z5.000 ; Move to safe Z",
            "",
            '; Line 1: "I"',
            "; Character: 'I'",
            "G0 X0.000 Y10.000",
            "G1 Z-0.500 F300",
            "G1 X0.000 Y2.000 F1000",
            "G0 Z5.000",
            "",
            "G0 Z5.000 ; Return to safe Z",
            "G0 X0 Y0 ; Return to origin",
            "M2 ; End program",
            "",
        ]

    def test_arc_move(self, store: GlyphStore, settings: StrokeFontSettings) -> None:
        """Test a drawn arc becomes a single G2 move with I/J offsets."""
        lines = program(store, settings, "C")
        assert "G0 X0.200 Y9.000" in lines
        arcs = [line for line in lines if line.startswith(("G2", "G3"))]
        assert arcs == ["G2 X0.000 Y8.800 I-0.200 J0.000 F1000"]

    def test_multiline_text(self, store: GlyphStore, settings: StrokeFontSettings) -> None:
        """Test line comments and the multi-line header."""
        lines = program(store, settings, "I\n\nI")
        assert lines[2:5] == ["; Text:", ";   I", ";   "]
        assert '; Line 1: "I"' in lines
        assert '; Line 3: "I"' in lines
        assert '; Line 2: ""' not in lines
        # The first line sits at the top of the Y-up frame
        assert "G0 X0.000 Y27.000" in lines
        assert "G0 X0.000 Y10.000" in lines

    def test_plunge_feed_repeated_per_stroke(self, store: GlyphStore, settings: StrokeFontSettings) -> None:
        lines = program(store, settings, "II")
        assert lines.count("G1 Z-0.500 F300") == 2
        assert lines.count("G0 Z5.000") == 2

    def test_custom_heights(self, store: GlyphStore) -> None:
        settings = StrokeFontSettings(
            export=ExportConfig(
                gcode=GCodeConfig(safe_z=3, engrave_depth=-0.2, plunge_rate=100, include_timestamp=False)
            )
        )
        lines = program(store, settings, "I")
        assert "G0 Z3.000 ; Move to safe Z" in lines
        assert "G1 Z-0.200 F100" in lines

    def test_timestamp(self, store: GlyphStore) -> None:
        lines = program(store, StrokeFontSettings(), "I")
        assert any(line.startswith("; Generated: ") for line in lines)

    def test_radius_mismatch_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="strokefont.export.gcode"):
            GCodeExporter._check_radius(Point(1, 0), Point(0, 2), Point(0, 0))
        assert "Arc radius mismatch" in caplog.text

"""Motion-code (G-code) exporter.

Emits a millimetre, absolute-positioning program that engraves each stroke:
rapid travel to the stroke start, plunge to the engraving depth, linear and
arc cuts, and a lift to the safe height after the stroke.

Arcs are written as G2/G3 moves with I/J center offsets. The output frame is
Y-up while strokes are drawn Y-down, so an arc that is clockwise in design
space runs counter-clockwise on the machine (G3) and vice versa.
"""

import logging
from datetime import datetime, timezone

from strokefont.domain import ArcSegment, PathSegment, Point
from strokefont.export.base import Exporter
from strokefont.export.pipeline import CompiledText, OutputFrame

logger = logging.getLogger(__name__)

# Start/end radius difference (mm) above which an arc is reported
ARC_RADIUS_EPSILON = 0.01


def format_number(value: float, decimals: int) -> str:
    """Fixed-point formatting that never emits a negative zero.

    Examples:
        >>> format_number(-0.0001, 3)
        '0.000'
        >>> format_number(2.5, 3)
        '2.500'
    """
    text = f"{value:.{decimals}f}"
    if text.startswith("-") and float(text) == 0.0:
        return text[1:]
    return text


class GCodeWriter:
    """Accumulates program lines, dropping consecutive duplicate moves.

    Comment and blank lines are always written and do not affect duplicate
    detection. The feed rate is only written when it changes.
    """

    def __init__(self, decimals: int) -> None:
        self.decimals = decimals
        self.lines: list[str] = []
        self._last_move: str | None = None
        self._feed: float | None = None

    def num(self, value: float) -> str:
        return format_number(value, self.decimals)

    def comment(self, text: str = "") -> None:
        self.lines.append(f"; {text}" if text else "")

    def raw(self, line: str) -> None:
        """Write a line unconditionally (preamble and footer)."""
        self.lines.append(line)
        self._last_move = line

    def move(self, line: str, feed: float | None = None) -> None:
        """Write a motion line unless it repeats the previous one."""
        if feed is not None and feed != self._feed:
            line = f"{line} F{feed:g}"
            self._feed = feed
        if line == self._last_move:
            return
        self.lines.append(line)
        self._last_move = line

    def text(self) -> str:
        return "\n".join(self.lines) + "\n"


class GCodeExporter(Exporter):
    """Writes compiled text as an engraving program."""

    name = "gcode"
    suffixes = (".gcode", ".nc", ".ngc", ".gc")

    def render(self, compiled: CompiledText) -> bytes:
        return self.generate(compiled).encode("utf-8")

    def generate(self, compiled: CompiledText) -> str:
        """Build the program text."""
        cfg = self.config.gcode
        out = GCodeWriter(cfg.decimals)
        safe_z = out.num(cfg.safe_z)

        self._write_header(out, compiled)

        out.raw("G21 ; mm mode")
        out.raw("G90 ; Absolute positioning")
        out.raw("G17 ; XY plane")
        out.raw(f"G0 Z{safe_z} ; Move to safe Z")

        placed = compiled.place(OutputFrame(y_up=True))
        line_index = -1
        for glyph in placed:
            if glyph.line != line_index:
                line_index = glyph.line
                out.comment()
                out.comment(f'Line {line_index + 1}: "{compiled.layout.lines[line_index]}"')
            out.comment(f"Character: '{glyph.char}'")

            for segments in glyph.strokes:
                if not segments:
                    continue
                self._write_stroke(out, segments)
                out.move(f"G0 Z{safe_z}")

        out.comment()
        out.raw(f"G0 Z{safe_z} ; Return to safe Z")
        out.raw("G0 X0 Y0 ; Return to origin")
        out.raw("M2 ; End program")
        return out.text()

    def _write_header(self, out: GCodeWriter, compiled: CompiledText) -> None:
        out.comment("strokefont output")
        out.comment(f"Font: {compiled.font_name}")
        text_lines = compiled.text.split("\n")
        if len(text_lines) == 1:
            out.comment(f"Text: {compiled.text}")
        else:
            out.comment("Text:")
            for line in text_lines:
                out.comment(f"  {line}")
        out.comment(f"Size: {out.num(compiled.layout.size)} mm")
        if self.config.gcode.include_timestamp:
            out.comment(f"Generated: {datetime.now(timezone.utc).isoformat(timespec='seconds')}")
        out.comment()

    def _write_stroke(self, out: GCodeWriter, segments: list[PathSegment]) -> None:
        cfg = self.config.gcode
        start = segments[0].points[0]

        out.move(f"G0 X{out.num(start.x)} Y{out.num(start.y)}")
        out.move(f"G1 Z{out.num(cfg.engrave_depth)}", feed=cfg.plunge_rate)

        for segment in segments:
            if isinstance(segment, ArcSegment):
                self._write_arc(out, segment)
            else:
                for point in segment.points[1:]:
                    out.move(f"G1 X{out.num(point.x)} Y{out.num(point.y)}", feed=cfg.feed_rate)

    def _write_arc(self, out: GCodeWriter, arc: ArcSegment) -> None:
        i = arc.center.x - arc.start.x
        j = arc.center.y - arc.start.y
        self._check_radius(arc.start, arc.end, arc.center)

        command = "G3" if arc.clockwise else "G2"
        out.move(
            f"{command} X{out.num(arc.end.x)} Y{out.num(arc.end.y)} I{out.num(i)} J{out.num(j)}",
            feed=self.config.gcode.feed_rate,
        )

    @staticmethod
    def _check_radius(start: Point, end: Point, center: Point) -> None:
        start_radius = ((start.x - center.x) ** 2 + (start.y - center.y) ** 2) ** 0.5
        end_radius = ((end.x - center.x) ** 2 + (end.y - center.y) ** 2) ** 0.5
        if abs(start_radius - end_radius) > ARC_RADIUS_EPSILON:
            logger.warning(
                "Arc radius mismatch: start radius %.3f != end radius %.3f",
                start_radius,
                end_radius,
            )

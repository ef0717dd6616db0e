"""Vector-drawing (SVG) exporter.

The document is sized in millimetres with a viewBox in the same units, so
one user unit is one millimetre. Each stroke becomes one open path with
absolute move/line commands.
"""

import io

import svgwrite

from strokefont.domain import Point
from strokefont.export.base import Exporter
from strokefont.export.pipeline import CompiledText, OutputFrame


def path_data(points: list[Point]) -> str:
    """Absolute M/L path data for a polyline.

    Examples:
        >>> path_data([Point(0, 0), Point(1.5, 2)])
        'M 0.00 0.00 L 1.50 2.00'
    """
    commands = [f"M {points[0].x:.2f} {points[0].y:.2f}"]
    commands.extend(f"L {p.x:.2f} {p.y:.2f}" for p in points[1:])
    return " ".join(commands)


class SvgExporter(Exporter):
    """Writes compiled text as an SVG drawing."""

    name = "svg"
    suffixes = (".svg",)

    def build_drawing(self, compiled: CompiledText) -> svgwrite.Drawing:
        """Assemble the drawing for compiled text."""
        render = self.config.render
        pad = render.padding
        width_mm = compiled.width + 2 * pad
        height_mm = compiled.height + 2 * pad

        # profile="full" to support numbers with more than 4 decimal digits
        drawing = svgwrite.Drawing(
            size=(f"{width_mm:.2f}mm", f"{height_mm:.2f}mm"),
            viewBox=f"0 0 {width_mm:.2f} {height_mm:.2f}",
            profile="full",
        )
        drawing.add(drawing.rect(insert=(0, 0), size=("100%", "100%"), fill="white"))
        group = drawing.add(
            drawing.g(
                id="text",
                stroke="black",
                stroke_width=render.svg_stroke_width,
                stroke_linecap="round",
                stroke_linejoin="round",
                fill="none",
            )
        )

        for glyph in compiled.place(OutputFrame(y_up=False, offset_x=pad, offset_y=pad)):
            for polyline in glyph.polylines():
                if len(polyline) < 2:
                    continue
                group.add(drawing.path(d=path_data(polyline)))

        return drawing

    def render(self, compiled: CompiledText) -> bytes:
        buffer = io.StringIO()
        self.build_drawing(compiled).write(buffer, pretty=True, indent=2)
        return buffer.getvalue().encode("utf-8")

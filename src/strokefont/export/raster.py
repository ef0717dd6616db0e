"""Raster-image (PNG) exporter.

Draws the strokes black on white with Pillow. The image is supersampled:
each output unit (mm) maps to `supersample` pixels, so the same geometry
prints crisply at three times the nominal resolution by default.
"""

import io
import math

from PIL import Image, ImageDraw

from strokefont.export.base import Exporter
from strokefont.export.pipeline import CompiledText, OutputFrame


class RasterExporter(Exporter):
    """Writes compiled text as a PNG image."""

    name = "png"
    suffixes = (".png",)

    def build_image(self, compiled: CompiledText) -> Image.Image:
        """Draw compiled text into an RGB image."""
        render = self.config.render
        pad = render.padding
        factor = render.supersample

        width = math.ceil(compiled.width + 2 * pad) * factor
        height = math.ceil(compiled.height + 2 * pad) * factor
        image = Image.new("RGB", (width, height), (255, 255, 255))
        draw = ImageDraw.Draw(image)

        line_px = max(1, round(render.raster_line_width * factor))
        for glyph in compiled.place(OutputFrame(y_up=False, offset_x=pad, offset_y=pad)):
            for polyline in glyph.polylines():
                if len(polyline) < 2:
                    continue
                xy = [(p.x * factor, p.y * factor) for p in polyline]
                draw.line(xy, fill=(0, 0, 0), width=line_px, joint="curve")

        return image

    def render(self, compiled: CompiledText) -> bytes:
        buffer = io.BytesIO()
        self.build_image(compiled).save(buffer, format="PNG")
        return buffer.getvalue()

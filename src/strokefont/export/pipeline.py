"""Shared toolpath pipeline for all exporters.

ToolpathCompiler lays the text out once and splits every glyph stroke into
line/arc segments once. Exporters then ask the resulting CompiledText for
geometry placed in their own output frame, so every output format sees the
same wrapping, size, kerning and advances.

Output frames differ only by vertical orientation:
- Y-up frames (motion code, CAD) put the first line at the top of the text
  block: ``y' = offset_y + total_height - line_offset - y * scale``
- Y-down frames (vector and raster images) keep the canvas orientation:
  ``y' = offset_y + line_offset + y * scale``
"""

from dataclasses import dataclass, field

import structlog

from strokefont.config import StrokeFontSettings, get_default_settings
from strokefont.core.arcs import ArcSegmenter
from strokefont.core.glyph_store import GlyphStore
from strokefont.core.layout import GlyphPlacement, TextLayout, TextLayoutEngine
from strokefont.domain import ArcSegment, Glyph, LineSegment, PathSegment, Point, segments_to_polyline
from strokefont.exceptions import EmptyFontError, EmptyTextError
from strokefont.utils.logging import CompileLogger, CompileStats


@dataclass(frozen=True)
class OutputFrame:
    """Orientation and offset of an output coordinate system.

    Attributes:
        y_up: True if the output y axis points up
        offset_x: Added to every x coordinate (e.g. padding)
        offset_y: Added to every y coordinate (e.g. padding)
    """

    y_up: bool
    offset_x: float = 0.0
    offset_y: float = 0.0


@dataclass(frozen=True)
class GlyphTransform:
    """Affine map from a glyph's design space to an output frame."""

    scale: float
    min_x: float
    origin_x: float
    origin_y: float
    sign: float

    @classmethod
    def for_placement(
        cls,
        placement: GlyphPlacement,
        glyph: Glyph,
        scale: float,
        total_height: float,
        frame: OutputFrame,
    ) -> "GlyphTransform":
        if frame.y_up:
            origin_y = frame.offset_y + total_height - placement.line_offset
            sign = -1.0
        else:
            origin_y = frame.offset_y + placement.line_offset
            sign = 1.0
        return cls(
            scale=scale,
            min_x=glyph.bounds.min_x,
            origin_x=frame.offset_x + placement.x,
            origin_y=origin_y,
            sign=sign,
        )

    def apply(self, point: Point) -> Point:
        return Point(
            (point.x - self.min_x) * self.scale + self.origin_x,
            self.origin_y + self.sign * point.y * self.scale,
        )

    def apply_segment(self, segment: PathSegment) -> PathSegment:
        """Map a segment; arc winding keeps its design-space meaning."""
        if isinstance(segment, ArcSegment):
            return ArcSegment(
                start=self.apply(segment.start),
                end=self.apply(segment.end),
                center=self.apply(segment.center),
                radius=segment.radius * self.scale,
                clockwise=segment.clockwise,
                points=[self.apply(p) for p in segment.points],
            )
        return LineSegment(points=[self.apply(p) for p in segment.points])


@dataclass
class CompiledGlyph:
    """A drawn character of the text with its segmented strokes.

    Attributes:
        placement: Layout position of the character
        glyph: The drawn glyph
        strokes: Segments per stroke, in design units
    """

    placement: GlyphPlacement
    glyph: Glyph
    strokes: list[list[PathSegment]]


@dataclass
class PlacedGlyph:
    """A compiled glyph mapped into an output frame."""

    char: str
    line: int
    strokes: list[list[PathSegment]]

    def polylines(self) -> list[list[Point]]:
        """Every stroke as a plain point list."""
        return [segments_to_polyline(segments) for segments in self.strokes]


@dataclass
class CompiledText:
    """Layout plus segmented geometry, ready for any exporter.

    Attributes:
        text: Source text
        font_name: Name of the font used
        layout: Text layout
        glyphs: Drawn glyphs in reading order
    """

    text: str
    font_name: str
    layout: TextLayout
    glyphs: list[CompiledGlyph] = field(default_factory=list)

    @property
    def width(self) -> float:
        return self.layout.width

    @property
    def height(self) -> float:
        return self.layout.height

    def place(self, frame: OutputFrame) -> list[PlacedGlyph]:
        """Map every glyph into an output frame.

        Args:
            frame: Target frame

        Returns:
            One PlacedGlyph per drawn character
        """
        placed: list[PlacedGlyph] = []
        for compiled in self.glyphs:
            transform = GlyphTransform.for_placement(
                compiled.placement, compiled.glyph, self.layout.scale, self.layout.height, frame
            )
            placed.append(
                PlacedGlyph(
                    char=compiled.placement.char,
                    line=compiled.placement.line,
                    strokes=[[transform.apply_segment(s) for s in segments] for segments in compiled.strokes],
                )
            )
        return placed


class ToolpathCompiler:
    """Compiles text into segmented, positioned glyph geometry.

    Example:
        >>> compiler = ToolpathCompiler(store, settings)
        >>> compiled = compiler.compile("Hello")
        >>> GCodeExporter(settings.export).save(compiled, Path("hello.gcode"))
    """

    def __init__(self, store: GlyphStore, settings: StrokeFontSettings | None = None) -> None:
        self.store = store
        self.settings = settings or get_default_settings()
        self.layout_engine = TextLayoutEngine(store, self.settings.layout)
        self.segmenter = ArcSegmenter(self.settings.arcs)
        self._compile_logger = CompileLogger(structlog.get_logger("strokefont"))

    @property
    def stats(self) -> CompileStats:
        """Statistics of the last compilation."""
        return self._compile_logger.stats

    def compile(self, text: str) -> CompiledText:
        """Lay out and segment a text.

        Raises:
            EmptyTextError: If the text has nothing but whitespace
            EmptyFontError: If the font has no drawn glyphs
        """
        if not text or not text.strip():
            raise EmptyTextError()
        if self.store.font.is_empty():
            raise EmptyFontError()

        self._compile_logger.log_compile_start(text, self.settings.layout.output_size)
        layout = self.layout_engine.layout(text)
        self._compile_logger.log_missing(layout.missing)

        # Each distinct glyph is segmented once, however often it occurs
        cache: dict[int, list[list[PathSegment]]] = {}
        glyphs: list[CompiledGlyph] = []
        for placement in layout.placements:
            glyph = placement.glyph
            if glyph is None or glyph.is_empty():
                continue
            key = id(glyph)
            if key not in cache:
                cache[key] = [self.segmenter.segment(stroke.points) for stroke in glyph.strokes if len(stroke)]
            strokes = cache[key]
            glyphs.append(CompiledGlyph(placement=placement, glyph=glyph, strokes=strokes))

            arcs = sum(isinstance(s, ArcSegment) for segments in strokes for s in segments)
            lines = sum(isinstance(s, LineSegment) for segments in strokes for s in segments)
            self._compile_logger.log_glyph_placed(placement.char, len(strokes), lines, arcs)

        self._compile_logger.log_compile_complete(layout.width, layout.height)
        return CompiledText(
            text=text,
            font_name=self.store.font.name,
            layout=layout,
            glyphs=glyphs,
        )

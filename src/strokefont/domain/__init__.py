"""Domain models for strokefont.

This module contains the core domain models representing stroke fonts:
points, strokes, path segments, glyphs, metrics and kerning rules. All
models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable to plain dictionaries (for the JSON font format)
- Independent of any export format

Key classes:
- Point: A 2D point in design units
- BBox: Axis-aligned bounding box
- Stroke: An open polyline drawn in one gesture
- LineSegment / ArcSegment: Classified pieces of a stroke
- Glyph: The strokes of a single character
- FontMetrics, KernRule, Font: Font-wide data
"""

from strokefont.domain.font import Font, FontMetrics, KernRule
from strokefont.domain.glyph import Glyph, calculate_bounds
from strokefont.domain.segment import (
    ArcSegment,
    LineSegment,
    PathSegment,
    segments_to_polyline,
)
from strokefont.domain.stroke import BBox, Point, Stroke

__all__: list[str] = [
    # Geometry
    "Point",
    "BBox",
    "Stroke",
    # Segments
    "ArcSegment",
    "LineSegment",
    "PathSegment",
    "segments_to_polyline",
    # Glyphs and fonts
    "Glyph",
    "calculate_bounds",
    "Font",
    "FontMetrics",
    "KernRule",
]

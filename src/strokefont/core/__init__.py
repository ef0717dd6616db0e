"""Core processing algorithms for strokefont.

This module contains the core algorithms for:

- Geometry operations (distances, angles, curve flattening)
- Stroke simplification (Douglas-Peucker)
- Circle fitting and arc detection
- Glyph storage and kerning
- Text layout (word wrap, auto-fit)

All algorithms are synchronous and operate on the domain models; the
GlyphStore is the only component that mutates a Font.

Key functions:
- douglas_peucker: Simplify a polyline within a tolerance
- fit_circle: Algebraic least-squares circle fit
- is_collinear: Reject straight runs and corners before arc fitting
- normalize: Map typographic punctuation to ASCII for lookups

Key classes:
- StrokeSimplifier: Configured stroke simplification
- ArcSegmenter: Splits strokes into line and arc segments
- GlyphStore: Mutable access to a Font
- EditorSession: Drawing session with undo/redo
- TextLayoutEngine: Lays out text into placed glyphs
"""

from strokefont.core.arcs import ArcSegmenter, ArcStats, is_clockwise, is_collinear
from strokefont.core.circle_fit import Circle, fit_circle, max_radial_error
from strokefont.core.geometry import (
    bezier_flatten,
    distance,
    normalize_angle,
    perpendicular_distance,
    polyline_length,
    turn_angle,
)
from strokefont.core.glyph_store import GlyphStore, normalize
from strokefont.core.kerning import parse_selector, selector_matches, validate_rule
from strokefont.core.layout import GlyphPlacement, TextLayout, TextLayoutEngine
from strokefont.core.session import CHARACTER_SET, EditorSession
from strokefont.core.simplify import StrokeSimplifier, douglas_peucker

__all__ = [
    # Arc detection
    "ArcSegmenter",
    "ArcStats",
    "Circle",
    "fit_circle",
    "is_clockwise",
    "is_collinear",
    "max_radial_error",
    # Geometry functions
    "bezier_flatten",
    "distance",
    "normalize_angle",
    "perpendicular_distance",
    "polyline_length",
    "turn_angle",
    # Simplification
    "StrokeSimplifier",
    "douglas_peucker",
    # Glyph storage and editing
    "CHARACTER_SET",
    "EditorSession",
    "GlyphStore",
    "normalize",
    "parse_selector",
    "selector_matches",
    "validate_rule",
    # Layout
    "GlyphPlacement",
    "TextLayout",
    "TextLayoutEngine",
]

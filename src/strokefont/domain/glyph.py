"""Glyph representation.

This module defines the glyph domain model: the strokes drawn for a single
character, their derived bounding box, and the horizontal advance used by
text layout.
"""

from dataclasses import dataclass, field
from typing import Any

from strokefont.domain.stroke import BBox, Stroke


def calculate_bounds(strokes: list[Stroke]) -> BBox:
    """Calculate the bounding box of a list of strokes.

    Args:
        strokes: Strokes to enclose

    Returns:
        Bounding box, or the empty box when no stroke has points
    """
    return BBox.from_points(p for stroke in strokes for p in stroke.points)


@dataclass
class Glyph:
    """A single character drawn as open strokes.

    The bounding box is derived from the strokes and recomputed whenever they
    change. The advance width is independent of the visual bounds; when it is
    None, layout falls back to the bounds width.

    Attributes:
        strokes: Strokes forming the glyph
        advance_width: Horizontal advance in design units (None = use bounds)
    """

    strokes: list[Stroke] = field(default_factory=list)
    advance_width: float | None = None
    bounds: BBox = field(init=False)

    def __post_init__(self) -> None:
        self.bounds = calculate_bounds(self.strokes)

    def set_strokes(self, strokes: list[Stroke]) -> None:
        """Replace all strokes and recompute the bounds.

        Args:
            strokes: New strokes (copied)
        """
        self.strokes = [s.copy() for s in strokes]
        self.bounds = calculate_bounds(self.strokes)

    def add_stroke(self, stroke: Stroke) -> None:
        """Append a stroke and recompute the bounds."""
        self.strokes.append(stroke.copy())
        self.bounds = calculate_bounds(self.strokes)

    def is_empty(self) -> bool:
        """Check if glyph has no drawn points.

        Empty glyphs include spaces and freshly selected characters.

        Returns:
            True if no stroke has any points
        """
        return all(len(stroke) == 0 for stroke in self.strokes)

    @property
    def effective_advance(self) -> float:
        """Advance width in design units, falling back to the ink width."""
        if self.advance_width is not None:
            return self.advance_width
        return self.bounds.width

    def copy(self) -> "Glyph":
        """Return an independent copy of this glyph."""
        return Glyph(strokes=[s.copy() for s in self.strokes], advance_width=self.advance_width)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with strokes, bounds and advance width
        """
        return {
            "strokes": [s.to_dict() for s in self.strokes],
            "bounds": self.bounds.to_dict(),
            "advance_width": self.advance_width,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Glyph":
        """Deserialize from dictionary.

        Stored bounds are ignored and recomputed from the strokes.

        Args:
            data: Dictionary representation of a glyph

        Returns:
            Glyph instance

        Raises:
            ValueError: If the advance width is not positive
        """
        strokes = [Stroke.from_dict(s) for s in data.get("strokes", [])]
        advance = data.get("advance_width")
        if advance is None:
            return cls(strokes=strokes)
        width = float(advance)
        if not width > 0:
            raise ValueError(f"advance_width must be > 0, got {advance}")
        return cls(strokes=strokes, advance_width=width)

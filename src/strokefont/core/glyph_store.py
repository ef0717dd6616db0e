"""In-memory glyph storage.

GlyphStore owns a Font and is the only place that mutates it: strokes,
advance widths, metrics and kerning rules all change through its methods.
Layout and export read from it without modifying anything.
"""

import logging
from typing import Any

from strokefont.core.kerning import total_adjustment, validate_rule
from strokefont.domain import Font, FontMetrics, Glyph, KernRule, Stroke
from strokefont.exceptions import GlyphNotFoundError, InvalidAdvanceError, KerningRuleError

logger = logging.getLogger(__name__)

# Lookup-only equivalents for typographic punctuation
_NORMALIZED = {
    "‘": "'",
    "’": "'",
    "“": '"',
    "”": '"',
    "–": "-",
    "—": "-",
    "…": ".",
}


def normalize(char: str) -> str:
    """Map curly quotes, dashes and the ellipsis to ASCII for lookups.

    Examples:
        >>> normalize("’")
        "'"
        >>> normalize("A")
        'A'
    """
    return _NORMALIZED.get(char, char)


class GlyphStore:
    """Mutable access to a font's glyphs, metrics and kerning.

    Example:
        >>> store = GlyphStore()
        >>> store.set_stroke("A", [Stroke([Point(0, 0), Point(10, 10)])])
        >>> store.advance("A", 500)
        >>> store.add_kern_rule("A", "V", 40)
    """

    def __init__(self, font: Font | None = None) -> None:
        self.font = font or Font()

    @property
    def metrics(self) -> FontMetrics:
        return self.font.metrics

    @property
    def kerning(self) -> list[KernRule]:
        return self.font.kerning

    @property
    def default_advance(self) -> float:
        """Advance given to freshly created glyphs (half the em square)."""
        return self.font.metrics.units_per_em * 0.5

    def characters(self) -> list[str]:
        """Characters with a glyph entry, in insertion order."""
        return list(self.font.glyphs)

    def defined_characters(self) -> list[str]:
        """Characters whose glyph has drawn strokes."""
        return [char for char, glyph in self.font.glyphs.items() if not glyph.is_empty()]

    def glyph(self, char: str) -> Glyph | None:
        """Look up a glyph, trying the normalized character second.

        Args:
            char: Character to look up

        Returns:
            The glyph, or None if neither key is present
        """
        glyph = self.font.glyphs.get(char)
        if glyph is None:
            glyph = self.font.glyphs.get(normalize(char))
        return glyph

    def require_glyph(self, char: str) -> Glyph:
        """Like `glyph` but raising GlyphNotFoundError when missing."""
        glyph = self.glyph(char)
        if glyph is None:
            raise GlyphNotFoundError(char)
        return glyph

    def ensure_glyph(self, char: str) -> Glyph:
        """Return the glyph for `char`, creating an empty one if needed.

        New glyphs get the default advance so they take part in layout
        before anything is drawn.
        """
        glyph = self.font.glyphs.get(char)
        if glyph is None:
            glyph = Glyph(advance_width=self.default_advance)
            self.font.glyphs[char] = glyph
            logger.debug("Created glyph %r with advance %.1f", char, self.default_advance)
        return glyph

    def set_stroke(self, char: str, strokes: list[Stroke]) -> Glyph:
        """Replace all strokes of a glyph.

        Bounds are recomputed; a previously set advance width is kept.

        Args:
            char: Character to edit
            strokes: New strokes

        Returns:
            The updated glyph
        """
        glyph = self.ensure_glyph(char)
        glyph.set_strokes(strokes)
        return glyph

    def add_stroke(self, char: str, stroke: Stroke) -> Glyph:
        """Append one stroke to a glyph."""
        glyph = self.ensure_glyph(char)
        glyph.add_stroke(stroke)
        return glyph

    def clear_glyph(self, char: str) -> None:
        """Remove every stroke of a glyph, keeping its advance width."""
        self.require_glyph(char).set_strokes([])

    def remove_glyph(self, char: str) -> None:
        if char not in self.font.glyphs:
            raise GlyphNotFoundError(char)
        del self.font.glyphs[char]

    def advance(self, char: str, width: float) -> None:
        """Set the advance width of a glyph.

        Raises:
            InvalidAdvanceError: If width is not positive
        """
        if not width > 0:
            raise InvalidAdvanceError(char, width)
        self.ensure_glyph(char).advance_width = float(width)

    def set_metrics(self, **fields: Any) -> FontMetrics:
        """Replace selected metric fields.

        The new metrics are validated as a whole before being stored.

        Returns:
            The new metrics
        """
        values = self.font.metrics.to_dict()
        unknown = set(fields) - set(values)
        if unknown:
            raise ValueError(f"Unknown metric fields: {sorted(unknown)}")
        values.update({name: float(value) for name, value in fields.items()})
        self.font.metrics = FontMetrics(**values)
        return self.font.metrics

    def kern(self, first: str, second: str) -> float:
        """Total kerning adjustment for a pair, in design units.

        Every matching rule contributes; a positive result tightens spacing.
        """
        return total_adjustment(self.font.kerning, first, second)

    def add_kern_rule(self, left: str, right: str, adjustment: float | int | str) -> KernRule:
        """Validate and append a kerning rule.

        Raises:
            KerningRuleError: If the rule is invalid; nothing is stored then
        """
        rule = validate_rule(left, right, adjustment)
        self.font.kerning.append(rule)
        logger.debug("Added kerning rule %s / %s = %s", rule.left, rule.right, rule.adjustment)
        return rule

    def remove_kern_rule(self, index: int) -> KernRule:
        """Remove the kerning rule at `index`."""
        if not 0 <= index < len(self.font.kerning):
            raise KerningRuleError(f"no kerning rule at index {index}")
        return self.font.kerning.pop(index)

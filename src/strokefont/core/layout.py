"""Text layout.

TextLayoutEngine turns a string into positioned glyphs:
- horizontal advance per character (advance width, spacing, kerning)
- greedy word wrap within a maximum width
- auto-fit search for the largest size satisfying the width/height bounds
- vertical line offsets, with blank lines taking half the output size

All lengths produced here are in output units (millimetres); glyph data is
read from the GlyphStore in design units and scaled by
``output_size / units_per_em``.
"""

import logging
from dataclasses import dataclass, field

from strokefont.config import LayoutConfig
from strokefont.core.glyph_store import GlyphStore
from strokefont.domain import Glyph

logger = logging.getLogger(__name__)

# Auto-fit candidate sizes are spaced this far apart
AUTO_FIT_STEP = 0.5


@dataclass
class GlyphPlacement:
    """Position of one character of the laid-out text.

    Attributes:
        char: The character
        line: Index of the wrapped line
        x: Left edge of the character cell
        line_offset: Distance of the line's top from the top of the text
        advance: Horizontal advance taken by the character
        glyph: Glyph to draw, or None for an undefined character
    """

    char: str
    line: int
    x: float
    line_offset: float
    advance: float
    glyph: Glyph | None


@dataclass
class TextLayout:
    """Result of laying out a text.

    Attributes:
        lines: Wrapped lines, blank lines included
        size: Effective output size (after auto-fit)
        scale: Design unit to output unit factor
        line_offsets: Top offset of each line, measured downwards
        width: Width of the widest line
        height: Total height of all lines
        placements: One entry per character of every line
        missing: Characters without a glyph, in order of first use
    """

    lines: list[str]
    size: float
    scale: float
    line_offsets: list[float]
    width: float
    height: float
    placements: list[GlyphPlacement] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)


class TextLayoutEngine:
    """Lays out text with the glyphs of a GlyphStore.

    Example:
        >>> engine = TextLayoutEngine(store, LayoutConfig(output_size=10, max_width=100))
        >>> layout = engine.layout("Hello world")
        >>> layout.lines
        ['Hello world']
    """

    def __init__(self, store: GlyphStore, config: LayoutConfig | None = None) -> None:
        self.store = store
        self.config = config or LayoutConfig()

    def scale_for(self, size: float) -> float:
        """Design unit to output unit factor for an output size."""
        return size / self.store.metrics.units_per_em

    def char_advance(self, char: str, next_char: str | None, size: float) -> float:
        """Horizontal advance of one character.

        Defined glyphs advance by their advance width (or ink width) scaled
        to the output size. A space without an advance width advances by the
        configured space width, any other character without an advance or
        ink by half the output size. Character spacing is added and the
        kerning with the next character subtracted.
        """
        scale = self.scale_for(size)
        glyph = self.store.glyph(char)
        if glyph is not None and glyph.advance_width is None and glyph.is_empty():
            glyph = None

        if glyph is not None:
            advance = glyph.effective_advance * scale
        elif char == " ":
            advance = self.config.space_width
        else:
            advance = size * 0.5

        advance += self.config.char_spacing
        if next_char is not None:
            advance -= self.store.kern(char, next_char) * scale
        return advance

    def measure(self, text: str, size: float) -> float:
        """Width of a single line of text."""
        width = 0.0
        for i, char in enumerate(text):
            next_char = text[i + 1] if i + 1 < len(text) else None
            width += self.char_advance(char, next_char, size)
        return width

    def wrap(self, text: str, size: float) -> list[str]:
        """Split text into lines, word-wrapping when a max width is set.

        Explicit newlines always break. Words are added greedily; a word that
        would push the line past the max width starts a new line, and a word
        wider than the max width gets a line of its own.

        Args:
            text: Text to wrap
            size: Output size used for measuring

        Returns:
            Wrapped lines; blank input lines are kept as empty strings
        """
        input_lines = text.replace("\r\n", "\n").split("\n")
        max_width = self.config.max_width
        if max_width <= 0:
            return input_lines

        lines: list[str] = []
        for input_line in input_lines:
            current = ""
            for word in input_line.split(" "):
                if not current:
                    current = word
                    continue
                candidate = f"{current} {word}"
                if self.measure(candidate, size) > max_width:
                    lines.append(current)
                    current = word
                else:
                    current = candidate
            lines.append(current)
        return lines

    def line_offsets(self, lines: list[str], size: float) -> list[float]:
        """Top offset of every line.

        The line after a non-blank line starts ``size + line_gap`` lower, the
        line after a blank line ``size * 0.5`` lower.
        """
        offsets: list[float] = []
        y = 0.0
        for line in lines:
            offsets.append(y)
            y += size * 0.5 if not line else size + self.config.line_gap
        return offsets

    def dimensions(self, lines: list[str], size: float) -> tuple[float, float]:
        """Width of the widest line and total height of the text."""
        if not lines:
            return 0.0, 0.0
        width = max(self.measure(line, size) for line in lines)
        height = self.line_offsets(lines, size)[-1] + size
        return width, height

    def fits(self, text: str, size: float) -> bool:
        """Check whether text at `size` satisfies the width/height bounds."""
        width, height = self.dimensions(self.wrap(text, size), size)
        fits_width = self.config.max_width <= 0 or width <= self.config.max_width
        fits_height = self.config.max_height <= 0 or height <= self.config.max_height
        return fits_width and fits_height

    def fit(self, text: str) -> float:
        """Choose the output size for a text.

        With auto-fit enabled and a width or height bound set, candidate
        sizes from the configured output size upwards in steps of 0.5 are
        tried until one fails or the maximum text size is passed; the last
        candidate that fitted wins. If even the starting size fails, it is
        kept. Larger sizes never shrink the text, so the first failure ends
        the search.

        Returns:
            The effective output size
        """
        cfg = self.config
        start = cfg.output_size
        if not cfg.auto_fit or (cfg.max_width <= 0 and cfg.max_height <= 0):
            return start

        best = start
        k = 0
        while True:
            size = start + k * AUTO_FIT_STEP
            if size > cfg.max_text_size or not self.fits(text, size):
                break
            best = size
            k += 1

        logger.debug("Auto-fit chose size %.1f (tried %d candidates)", best, k + 1)
        return best

    def layout(self, text: str) -> TextLayout:
        """Lay out a text completely.

        Returns:
            Lines, effective size, offsets, dimensions and one placement per
            character
        """
        size = self.fit(text)
        scale = self.scale_for(size)
        lines = self.wrap(text, size)
        offsets = self.line_offsets(lines, size)
        width, height = self.dimensions(lines, size)

        placements: list[GlyphPlacement] = []
        missing: list[str] = []
        for line_index, line in enumerate(lines):
            x = 0.0
            for i, char in enumerate(line):
                next_char = line[i + 1] if i + 1 < len(line) else None
                advance = self.char_advance(char, next_char, size)
                glyph = self.store.glyph(char)
                if glyph is None and char != " " and char not in missing:
                    missing.append(char)
                placements.append(
                    GlyphPlacement(
                        char=char,
                        line=line_index,
                        x=x,
                        line_offset=offsets[line_index],
                        advance=advance,
                        glyph=glyph,
                    )
                )
                x += advance

        if missing:
            logger.warning("Characters not in font: %s", "".join(missing))

        return TextLayout(
            lines=lines,
            size=size,
            scale=scale,
            line_offsets=offsets,
            width=width,
            height=height,
            placements=placements,
            missing=missing,
        )

"""Font-wide models: metrics, kerning rules and the font itself."""

from dataclasses import dataclass, field
from typing import Any

from strokefont.domain.glyph import Glyph


@dataclass
class FontMetrics:
    """Vertical font metrics in design units.

    Ascent and descent are measured from the baseline, upwards positive, as in
    OpenType. The design canvas is a square of side `units_per_em`.

    Attributes:
        units_per_em: Size of the em square (the reference canvas)
        ascent: Distance from baseline to the top of the em square
        descent: Distance from baseline to the bottom (negative)
        cap_height: Height of capital letters
        x_height: Height of lowercase letters
    """

    units_per_em: float = 1000.0
    ascent: float = 800.0
    descent: float = -200.0
    cap_height: float = 700.0
    x_height: float = 500.0

    def __post_init__(self) -> None:
        if self.units_per_em <= 0:
            raise ValueError(f"units_per_em must be positive, got {self.units_per_em}")
        if not self.ascent > 0 > self.descent:
            raise ValueError(
                f"Metrics require ascent > 0 > descent, got ascent={self.ascent}, "
                f"descent={self.descent}"
            )

    @property
    def baseline_y(self) -> float:
        """Baseline position on the y-down design canvas."""
        return self.ascent

    def to_dict(self) -> dict[str, float]:
        return {
            "units_per_em": self.units_per_em,
            "ascent": self.ascent,
            "descent": self.descent,
            "cap_height": self.cap_height,
            "x_height": self.x_height,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FontMetrics":
        defaults = cls()
        return cls(
            units_per_em=float(data.get("units_per_em", defaults.units_per_em)),
            ascent=float(data.get("ascent", defaults.ascent)),
            descent=float(data.get("descent", defaults.descent)),
            cap_height=float(data.get("cap_height", defaults.cap_height)),
            x_height=float(data.get("x_height", defaults.x_height)),
        )


@dataclass(frozen=True)
class KernRule:
    """A spacing adjustment between two character selectors.

    Selectors are a single character, a comma-separated list, or an inclusive
    code-point range such as "A-Z". A positive adjustment tightens spacing.

    Attributes:
        left: Selector for the first character of the pair
        right: Selector for the second character of the pair
        adjustment: Tightening in design units
    """

    left: str
    right: str
    adjustment: float

    def to_dict(self) -> dict[str, Any]:
        return {"left": self.left, "right": self.right, "adjustment": self.adjustment}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "KernRule":
        return cls(left=data["left"], right=data["right"], adjustment=float(data["adjustment"]))


@dataclass
class Font:
    """A stroke font.

    Attributes:
        name: Font family name
        glyphs: Glyph per character (keys are unique characters)
        metrics: Font-wide metrics
        kerning: Kerning rules, evaluated in insertion order
    """

    name: str = "Untitled"
    glyphs: dict[str, Glyph] = field(default_factory=dict)
    metrics: FontMetrics = field(default_factory=FontMetrics)
    kerning: list[KernRule] = field(default_factory=list)

    def is_empty(self) -> bool:
        """Check if no glyph has any drawn points."""
        return all(glyph.is_empty() for glyph in self.glyphs.values())

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "metrics": self.metrics.to_dict(),
            "glyphs": {char: glyph.to_dict() for char, glyph in self.glyphs.items()},
            "kerning": [rule.to_dict() for rule in self.kerning],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Font":
        return cls(
            name=data.get("name", "Untitled"),
            glyphs={char: Glyph.from_dict(g) for char, g in data.get("glyphs", {}).items()},
            metrics=FontMetrics.from_dict(data.get("metrics", {})),
            kerning=[KernRule.from_dict(r) for r in data.get("kerning", [])],
        )

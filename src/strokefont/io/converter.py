"""Converters between font containers and domain models.

This module handles two persisted forms of a Font:

- JSON documents mirroring the domain model (``Font.to_dict``)
- SVG fonts: ``<font>`` with one ``<glyph>`` per character, a
  ``<font-face>`` carrying the metrics, and ``<hkern>`` kerning pairs

SVG font glyph outlines are Y-up with the baseline at 0, while strokes are
stored Y-down on the design canvas with the baseline at ``ascent``. Path
data is parsed with fontTools and curves are flattened to points.
"""

import logging
import xml.etree.ElementTree as ET
from collections.abc import Callable
from typing import Any

from fontTools.agl import AGL2UV, UV2AGL
from fontTools.pens.basePen import decomposeQuadraticSegment, decomposeSuperBezierSegment
from fontTools.pens.recordingPen import RecordingPen
from fontTools.svgLib.path import parse_path

from strokefont.core.geometry import bezier_flatten
from strokefont.core.kerning import CharRange, parse_selector, validate_rule
from strokefont.domain import Font, FontMetrics, Glyph, KernRule, Point, Stroke
from strokefont.exceptions import KerningRuleError

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
JSON_FORMAT_VERSION = 1

# Flattening tolerance for curves in SVG font outlines, in design units
CURVE_TOLERANCE = 0.5

PointMap = Callable[[float, float], Point]


# JSON


def font_to_json_dict(font: Font) -> dict[str, Any]:
    """Serialize a font to the JSON container layout."""
    data = font.to_dict()
    data["version"] = JSON_FORMAT_VERSION
    return data


def font_from_json_dict(data: dict[str, Any]) -> Font:
    """Deserialize a font from the JSON container layout.

    Kerning rules are validated the same way as rules added to a GlyphStore,
    so a loaded font never holds a rule that layout cannot evaluate.

    Raises:
        ValueError: If the document is not a strokefont JSON font, or holds
            an invalid kerning rule or advance width
    """
    if not isinstance(data, dict) or not isinstance(data.get("glyphs", {}), dict):
        raise ValueError("expected an object with a 'glyphs' mapping")
    version = data.get("version", JSON_FORMAT_VERSION)
    if version > JSON_FORMAT_VERSION:
        raise ValueError(f"unsupported version {version}")
    font = Font.from_dict(data)
    font.kerning = [
        _checked_rule(k, rule.left, rule.right, rule.adjustment) for k, rule in enumerate(font.kerning)
    ]
    return font


def _checked_rule(index: int, left: str, right: str, adjustment: float) -> KernRule:
    try:
        return validate_rule(left, right, adjustment)
    except KerningRuleError as e:
        raise ValueError(f"kerning rule {index}: {e}") from e


# Path data


def recording_to_strokes(
    recording: list[tuple[str, tuple[Any, ...]]],
    to_design: PointMap,
    tolerance: float = CURVE_TOLERANCE,
) -> list[Stroke]:
    """Convert RecordingPen commands to open strokes.

    Every subpath becomes one stroke. Closed subpaths repeat their first
    point at the end so the outline stays closed when drawn. Curves are
    flattened after mapping their control points to design space.

    Args:
        recording: Commands from a RecordingPen
        to_design: Maps path (x, y) to a design-space Point
        tolerance: Curve flattening tolerance in design units

    Returns:
        Strokes with at least one point
    """
    strokes: list[Stroke] = []
    current: list[Point] = []

    def finish(close: bool) -> None:
        nonlocal current
        if current:
            if close and len(current) > 1 and current[-1] != current[0]:
                current.append(current[0])
            strokes.append(Stroke(points=current))
        current = []

    for command, args in recording:
        if command == "moveTo":
            finish(close=False)
            current = [to_design(*args[0])]

        elif command == "lineTo":
            current.append(to_design(*args[0]))

        elif command == "qCurveTo":
            for off, on in decomposeQuadraticSegment(args):
                control = [current[-1], to_design(*off), to_design(*on)]
                current.extend(bezier_flatten(control, tolerance)[1:])

        elif command == "curveTo":
            for c1, c2, on in decomposeSuperBezierSegment(args):
                control = [current[-1], to_design(*c1), to_design(*c2), to_design(*on)]
                current.extend(bezier_flatten(control, tolerance)[1:])

        elif command == "closePath":
            finish(close=True)

        elif command == "endPath":
            finish(close=False)

    finish(close=False)
    return strokes


def parse_path_data(d: str, to_design: PointMap, tolerance: float = CURVE_TOLERANCE) -> list[Stroke]:
    """Parse SVG path data into strokes."""
    pen = RecordingPen()
    parse_path(d, pen)
    return recording_to_strokes(pen.value, to_design, tolerance)


def _num(value: float) -> str:
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def strokes_to_path_data(strokes: list[Stroke], metrics: FontMetrics) -> str:
    """Build SVG font path data (Y-up, baseline at 0) for strokes."""
    parts: list[str] = []
    for stroke in strokes:
        if not stroke.points:
            continue
        for k, p in enumerate(stroke.points):
            parts.append(f"{'M' if k == 0 else 'L'} {_num(p.x)} {_num(metrics.ascent - p.y)}")
    return " ".join(parts)


# Glyph names and kerning classes


def glyph_name_for(char: str) -> str:
    """AGL glyph name for a character, falling back to uniXXXX."""
    if len(char) != 1:
        return "_".join(glyph_name_for(c) for c in char)
    code = ord(char)
    return UV2AGL.get(code, f"uni{code:04X}" if code <= 0xFFFF else f"u{code:05X}")


def selector_chars(selector: str) -> list[str]:
    """Expand a selector into the characters it covers."""
    chars: list[str] = []
    for item in parse_selector(selector):
        if isinstance(item, CharRange):
            chars.extend(chr(code) for code in range(ord(item.first), ord(item.last) + 1))
        else:
            chars.append(item)
    return chars


def chars_to_selector(chars: list[str]) -> str | None:
    """Build a comma-list selector; characters a list cannot hold are dropped."""
    if len(chars) == 1:
        return chars[0]
    usable = [c for c in chars if c not in (",", " ")]
    if len(usable) < len(chars):
        logger.warning("Dropped characters %r from kerning class", sorted(set(chars) - set(usable)))
    return ",".join(usable) if usable else None


def parse_unicode_list(value: str) -> list[str]:
    """Parse an hkern u1/u2 value: characters and U+XXXX[-YYYY] ranges."""
    if len(value) == 1:
        return [value]
    chars: list[str] = []
    for item in value.split(","):
        item = item.strip()
        if item.upper().startswith("U+"):
            first, _, last = item[2:].partition("-")
            start = int(first, 16)
            end = int(last, 16) if last else start
            chars.extend(chr(code) for code in range(start, end + 1))
        elif len(item) == 1:
            chars.append(item)
        elif item:
            logger.warning("Ignoring kerning sequence %r", item)
    return chars


# SVG font


def font_to_svg(font: Font) -> ET.Element:
    """Build an SVG font document for a font.

    Every glyph entry is written; empty glyphs carry only their advance.
    Single-character kerning selectors are written as u1/u2, lists and
    ranges as g1/g2 glyph-name classes.
    """
    metrics = font.metrics
    default_advance = metrics.units_per_em * 0.5

    root = ET.Element("svg", {"xmlns": SVG_NS, "version": "1.1"})
    defs = ET.SubElement(root, "defs")
    font_el = ET.SubElement(
        defs,
        "font",
        {"id": font.name.replace(" ", "_") or "strokefont", "horiz-adv-x": _num(default_advance)},
    )
    ET.SubElement(
        font_el,
        "font-face",
        {
            "font-family": font.name,
            "units-per-em": _num(metrics.units_per_em),
            "ascent": _num(metrics.ascent),
            "descent": _num(metrics.descent),
            "cap-height": _num(metrics.cap_height),
            "x-height": _num(metrics.x_height),
        },
    )
    ET.SubElement(font_el, "missing-glyph", {"horiz-adv-x": _num(default_advance)})

    for char, glyph in font.glyphs.items():
        attrs = {
            "unicode": char,
            "glyph-name": glyph_name_for(char),
            "horiz-adv-x": _num(glyph.effective_advance),
        }
        d = strokes_to_path_data(glyph.strokes, metrics)
        if d:
            attrs["d"] = d
        ET.SubElement(font_el, "glyph", attrs)

    for rule in font.kerning:
        attrs = {}
        for side, selector in (("1", rule.left), ("2", rule.right)):
            if len(selector) == 1:
                attrs[f"u{side}"] = selector
            else:
                attrs[f"g{side}"] = ",".join(glyph_name_for(c) for c in selector_chars(selector))
        attrs["k"] = _num(rule.adjustment)
        ET.SubElement(font_el, "hkern", attrs)

    ET.indent(root, space="  ")
    return root


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _find(element: ET.Element, name: str) -> ET.Element | None:
    for child in element.iter():
        if _local(child.tag) == name:
            return child
    return None


def font_from_svg(root: ET.Element, units_per_em: float | None = None) -> Font:
    """Read a font from a parsed SVG font document.

    Args:
        root: Root element of the SVG document
        units_per_em: Rescale to this em size (None keeps the file's)

    Returns:
        Font with glyphs, metrics and kerning

    Raises:
        ValueError: If the document has no <font> element or no glyphs
    """
    font_el = _find(root, "font")
    if font_el is None:
        raise ValueError("no <font> element found")

    face = _find(font_el, "font-face")
    face_attrs = face.attrib if face is not None else {}
    file_upm = float(face_attrs.get("units-per-em", "1000"))
    target_upm = units_per_em or file_upm
    ratio = target_upm / file_upm

    file_ascent = float(face_attrs.get("ascent", file_upm * 0.8))
    file_descent = float(face_attrs.get("descent", -(file_upm - file_ascent)))
    metrics = FontMetrics(
        units_per_em=target_upm,
        ascent=file_ascent * ratio,
        descent=file_descent * ratio,
        cap_height=float(face_attrs.get("cap-height", file_ascent * 0.875)) * ratio,
        x_height=float(face_attrs.get("x-height", file_ascent * 0.625)) * ratio,
    )

    def to_design(x: float, y: float) -> Point:
        return Point(x * ratio, metrics.ascent - y * ratio)

    font_advance = font_el.get("horiz-adv-x")
    glyphs: dict[str, Glyph] = {}
    names: dict[str, str] = {}

    for el in font_el:
        if _local(el.tag) != "glyph":
            continue
        char = el.get("unicode")
        if not char:
            continue
        advance = el.get("horiz-adv-x", font_advance)
        width = float(advance) * ratio if advance is not None else target_upm * 0.5
        if not width > 0:
            raise ValueError(f"glyph {char!r} has advance width {advance}, must be > 0")
        strokes = parse_path_data(el.get("d", ""), to_design) if el.get("d") else []
        glyphs[char] = Glyph(strokes=strokes, advance_width=width)
        if el.get("glyph-name"):
            names[el.get("glyph-name", "")] = char

    if not glyphs:
        raise ValueError("no glyphs with a unicode attribute found")

    kerning: list[KernRule] = []
    for el in font_el:
        if _local(el.tag) != "hkern":
            continue
        left = _kern_side(el, "1", names)
        right = _kern_side(el, "2", names)
        if left is None or right is None:
            logger.warning("Skipping hkern without usable selectors: %s", el.attrib)
            continue
        kerning.append(_checked_rule(len(kerning), left, right, float(el.get("k", "0")) * ratio))

    family = face_attrs.get("font-family") or font_el.get("id") or "Imported SVG Font"
    return Font(name=family, glyphs=glyphs, metrics=metrics, kerning=kerning)


def _kern_side(el: ET.Element, side: str, names: dict[str, str]) -> str | None:
    chars: list[str] = []
    if el.get(f"u{side}"):
        chars.extend(parse_unicode_list(el.get(f"u{side}", "")))
    if el.get(f"g{side}"):
        for name in el.get(f"g{side}", "").split(","):
            name = name.strip()
            if name in names:
                chars.append(names[name])
            elif name in AGL2UV:
                chars.append(chr(AGL2UV[name]))
            elif name.startswith("uni") and len(name) == 7:
                chars.append(chr(int(name[3:], 16)))
            elif name:
                logger.warning("Unknown glyph name %r in kerning class", name)
    if not chars:
        return None
    return chars_to_selector(list(dict.fromkeys(chars)))

"""Font reader for loading stroke fonts.

This module provides the FontReader class for loading JSON and SVG font
files into the Font domain model.
"""

import json
import xml.etree.ElementTree as ET
from pathlib import Path

from strokefont.domain import Font
from strokefont.exceptions import FontFormatError, FontLoadError
from strokefont.io.converter import font_from_json_dict, font_from_svg

FONT_SUFFIXES = (".json", ".svg")


class FontReader:
    """Loads stroke fonts from JSON or SVG font files.

    The container is chosen by file suffix.

    Example:
        reader = FontReader(Path("font.svg"))
        font = reader.load()
        print(font.metrics.units_per_em)
    """

    def __init__(self, font_path: Path, units_per_em: float | None = None) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to a .json or .svg font
            units_per_em: Rescale SVG fonts to this em size (None keeps the file's)
        """
        self._font_path = Path(font_path)
        self._units_per_em = units_per_em
        self._font: Font | None = None

    @property
    def format(self) -> str:
        """Return the container format ('json' or 'svg')."""
        suffix = self._font_path.suffix.lower()
        if suffix not in FONT_SUFFIXES:
            raise FontFormatError(str(self._font_path), f"unsupported font suffix '{suffix}'")
        return suffix[1:]

    @property
    def font(self) -> Font:
        """Return the loaded font.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    def load(self) -> Font:
        """Load the font file.

        Returns:
            The loaded Font

        Raises:
            FontLoadError: If the file is missing or unreadable
            FontFormatError: If the file content is not a valid font
        """
        fmt = self.format
        if not self._font_path.exists():
            raise FontLoadError(str(self._font_path), "file not found")

        try:
            raw = self._font_path.read_bytes()
        except OSError as e:
            raise FontLoadError(str(self._font_path), str(e)) from e

        try:
            if fmt == "json":
                self._font = font_from_json_dict(json.loads(raw.decode("utf-8")))
            else:
                self._font = font_from_svg(ET.fromstring(raw), self._units_per_em)
        except (ValueError, KeyError, TypeError, ET.ParseError) as e:
            raise FontFormatError(str(self._font_path), str(e)) from e

        return self._font

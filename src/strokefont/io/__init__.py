"""Font I/O layer for strokefont.

This module handles reading and writing stroke fonts. It provides a clean
abstraction layer between file containers and the domain models.

Key responsibilities:
- Load JSON and SVG fonts
- Convert SVG font outlines (via fontTools) to strokes
- Write fonts back to either container

Key classes:
- FontReader: Load fonts
- FontWriter: Save fonts
"""

from strokefont.io.reader import FONT_SUFFIXES, FontReader
from strokefont.io.writer import FontWriter

__all__ = [
    "FONT_SUFFIXES",
    "FontReader",
    "FontWriter",
]

"""Strokefont - Turn hand-drawn stroke fonts into toolpaths.

Strokefont simplifies freehand strokes into compact single-line glyphs, detects
circular arcs in them, and compiles text set in such a font into G-code, SVG,
DXF or PNG output with word wrap, kerning and auto-fit sizing.

Example:
    $ strokefont compile "Hello" --font handwriting.json -o hello.gcode

This will lay out "Hello" at the default size and write an engraving program
with G2/G3 arcs wherever the strokes are circular enough.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]

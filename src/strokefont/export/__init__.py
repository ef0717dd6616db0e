"""Exporters for compiled text.

All exporters consume the same CompiledText produced by ToolpathCompiler
and differ only in encoding:

- GCodeExporter: engraving program (G-code)
- SvgExporter: SVG drawing
- DxfExporter: DXF polylines
- RasterExporter: PNG image
"""

from pathlib import Path

from strokefont.config import ExportConfig
from strokefont.exceptions import UnsupportedFormatError
from strokefont.export.base import Exporter
from strokefont.export.dxf import DxfExporter
from strokefont.export.gcode import GCodeExporter, format_number
from strokefont.export.pipeline import (
    CompiledGlyph,
    CompiledText,
    GlyphTransform,
    OutputFrame,
    PlacedGlyph,
    ToolpathCompiler,
)
from strokefont.export.raster import RasterExporter
from strokefont.export.svg import SvgExporter

EXPORTERS: list[type[Exporter]] = [GCodeExporter, SvgExporter, DxfExporter, RasterExporter]


def exporter_for(path: Path, config: ExportConfig | None = None) -> Exporter:
    """Pick the exporter matching a file suffix.

    Raises:
        UnsupportedFormatError: If no exporter handles the suffix
    """
    suffix = path.suffix.lower()
    for exporter_cls in EXPORTERS:
        if suffix in exporter_cls.suffixes:
            return exporter_cls(config)
    raise UnsupportedFormatError(suffix or str(path))


__all__ = [
    "EXPORTERS",
    "CompiledGlyph",
    "CompiledText",
    "DxfExporter",
    "Exporter",
    "GCodeExporter",
    "GlyphTransform",
    "OutputFrame",
    "PlacedGlyph",
    "RasterExporter",
    "SvgExporter",
    "ToolpathCompiler",
    "exporter_for",
    "format_number",
]

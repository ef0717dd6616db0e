"""CAD-polyline (DXF) exporter.

Writes an R2010 drawing in millimetres with one open LWPOLYLINE per stroke
on layer 0. DXF is Y-up, so strokes are placed in a Y-up frame.
"""

import io

import ezdxf
from ezdxf import units
from ezdxf.document import Drawing

from strokefont.export.base import Exporter
from strokefont.export.pipeline import CompiledText, OutputFrame


class DxfExporter(Exporter):
    """Writes compiled text as DXF polylines."""

    name = "dxf"
    suffixes = (".dxf",)

    def build_document(self, compiled: CompiledText) -> Drawing:
        """Create the DXF document for compiled text."""
        doc = ezdxf.new("R2010")
        doc.units = units.MM
        msp = doc.modelspace()

        for glyph in compiled.place(OutputFrame(y_up=True)):
            for polyline in glyph.polylines():
                if len(polyline) < 2:
                    continue
                msp.add_lwpolyline(
                    [p.to_tuple() for p in polyline],
                    close=False,
                    dxfattribs={"layer": "0"},
                )

        return doc

    def render(self, compiled: CompiledText) -> bytes:
        buffer = io.StringIO()
        self.build_document(compiled).write(buffer)
        return buffer.getvalue().encode("utf-8")

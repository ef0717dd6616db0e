"""Font writer for saving stroke fonts."""

import json
import xml.etree.ElementTree as ET
from pathlib import Path

from strokefont.domain import Font
from strokefont.exceptions import FontSaveError
from strokefont.io.converter import font_to_json_dict, font_to_svg
from strokefont.io.reader import FONT_SUFFIXES


class FontWriter:
    """Writes a Font as JSON or as an SVG font, by output suffix.

    The document is rendered in memory first so a failed conversion never
    leaves a partial file behind.

    Example:
        writer = FontWriter(font, Path("font.svg"))
        writer.save()
    """

    def __init__(self, font: Font, output_path: Path) -> None:
        self._font = font
        self._output_path = Path(output_path)

    def render(self) -> bytes:
        """Serialize the font for the output suffix.

        Raises:
            FontSaveError: If the suffix is not a font container
        """
        suffix = self._output_path.suffix.lower()
        if suffix not in FONT_SUFFIXES:
            raise FontSaveError(str(self._output_path), f"unsupported font suffix '{suffix}'")

        if suffix == ".json":
            text = json.dumps(font_to_json_dict(self._font), indent=2, ensure_ascii=False)
            return (text + "\n").encode("utf-8")

        root = font_to_svg(self._font)
        return ET.tostring(root, encoding="utf-8", xml_declaration=True)

    def save(self) -> int:
        """Save the font to the output path.

        Returns:
            Number of bytes written

        Raises:
            FontSaveError: If the file cannot be written
        """
        data = self.render()
        try:
            self._output_path.write_bytes(data)
        except OSError as e:
            raise FontSaveError(str(self._output_path), str(e)) from e
        return len(data)

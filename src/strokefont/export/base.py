"""Exporter base class and output format lookup."""

from abc import ABC, abstractmethod
from pathlib import Path

import structlog

from strokefont.config import ExportConfig
from strokefont.export.pipeline import CompiledText

logger = structlog.get_logger("strokefont")


class Exporter(ABC):
    """Base class for output encoders.

    Subclasses implement `render`, which produces the complete file content
    in memory; `save` only writes once rendering has succeeded, so a failed
    export never leaves a partial file behind.
    """

    name: str = "exporter"
    suffixes: tuple[str, ...] = ()

    def __init__(self, config: ExportConfig | None = None) -> None:
        self.config = config or ExportConfig()

    @abstractmethod
    def render(self, compiled: CompiledText) -> bytes:
        """Encode compiled text into the file content."""

    def save(self, compiled: CompiledText, path: Path) -> int:
        """Render and write the output file.

        Args:
            compiled: Compiled text
            path: Output file path

        Returns:
            Number of bytes written
        """
        data = self.render(compiled)
        path.write_bytes(data)
        logger.info("Output written", path=str(path), exporter=self.name, bytes=len(data))
        return len(data)

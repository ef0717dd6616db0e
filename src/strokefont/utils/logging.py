"""Logging utilities for Strokefont."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Handlers installed by configure_logging, replaced on reconfiguration
_installed_handlers: list[logging.Handler] = []


@dataclass
class CompileStats:
    """Statistics from one text compilation."""

    glyphs_placed: int = 0
    strokes: int = 0
    line_segments: int = 0
    arc_segments: int = 0
    missing_chars: list[str] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate compilation duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Records from structlog and from stdlib loggers (the algorithm modules)
    go through the same handlers: JSON lines to the log file, plain
    key=value lines to the console.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    pre_chain = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processor=structlog.processors.JSONRenderer(),
                foreign_pre_chain=pre_chain,
            )
        )
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(colors=False),
            foreign_pre_chain=pre_chain,
        )
    )
    _installed_handlers.append(console_handler)

    root_logger.setLevel(logging.DEBUG)
    for handler in _installed_handlers:
        root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *pre_chain,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("strokefont")
    logger.debug("Logging initialized", log_file=str(log_file) if log_file else None, level=file_level)

    return logger


class CompileLogger:
    """Logger for tracking compilation progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger or structlog.get_logger("strokefont")
        self._stats = CompileStats()

    def log_compile_start(self, text: str, size: float) -> None:
        """Log start of a compilation."""
        self._stats = CompileStats(start_time=time.perf_counter())
        self._logger.debug("Compiling text", chars=len(text), size=size)

    def log_glyph_placed(self, char: str, strokes: int, lines: int, arcs: int) -> None:
        """Log one drawn glyph and its segment counts."""
        self._logger.debug("Glyph placed", char=char, strokes=strokes, lines=lines, arcs=arcs)
        self._stats.glyphs_placed += 1
        self._stats.strokes += strokes
        self._stats.line_segments += lines
        self._stats.arc_segments += arcs

    def log_missing(self, chars: list[str]) -> None:
        """Record characters that have no glyph."""
        if chars:
            self._logger.debug("Characters not in font", chars="".join(chars))
        self._stats.missing_chars = list(chars)

    def log_compile_complete(self, width: float, height: float) -> None:
        """Log the end of a compilation."""
        self._stats.end_time = time.perf_counter()
        self._logger.info(
            "Text compiled",
            glyphs=self._stats.glyphs_placed,
            arcs=self._stats.arc_segments,
            lines=self._stats.line_segments,
            width=round(width, 3),
            height=round(height, 3),
            duration_ms=round(self._stats.duration_seconds * 1000, 2),
        )

    @property
    def stats(self) -> CompileStats:
        """Get current compilation statistics."""
        return self._stats

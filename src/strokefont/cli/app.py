"""CLI application entry point for strokefont.

This module provides the main CLI interface using Typer.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import structlog
import typer
from pydantic import ValidationError

from strokefont import __version__
from strokefont.cli.output import (
    console,
    print_characters,
    print_error,
    print_font_info,
    print_header,
    print_kerning,
    print_layout_info,
    print_metrics,
    print_missing,
    print_saved,
    print_step,
    print_success,
)
from strokefont.config import (
    ArcConfig,
    ExportConfig,
    GCodeConfig,
    LayoutConfig,
    LoggingConfig,
    StrokeFontSettings,
)
from strokefont.core import GlyphStore
from strokefont.domain import Font
from strokefont.exceptions import FontLoadError, FontSaveError, StrokeFontError
from strokefont.export import ToolpathCompiler, exporter_for
from strokefont.io import FontReader, FontWriter
from strokefont.utils import configure_logging

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

logger = structlog.get_logger("strokefont")

# Create the Typer app
app = typer.Typer(
    name="strokefont",
    help="Compile text set in hand-drawn stroke fonts into G-code, SVG, DXF or PNG.",
    add_completion=False,
    no_args_is_help=True,
)


@dataclass
class CliState:
    """Options shared by all commands."""

    quiet: bool = False
    verbose: bool = False
    logging: LoggingConfig | None = None


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Strokefont[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Compile text set in hand-drawn stroke fonts into toolpaths and drawings."""
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if log_level.upper() not in LOG_LEVELS:
        print_error(f"Invalid log level: {log_level}", details=f"Valid values: {', '.join(LOG_LEVELS)}")
        raise typer.Exit(code=1)

    logging_config = LoggingConfig(
        log_file=log_file,
        log_level="INFO" if verbose else log_level.upper(),
    )
    configure_logging(
        log_file=logging_config.log_file,
        console_level=logging_config.log_level,
        file_level=logging_config.file_log_level,
        quiet=quiet,
    )
    ctx.obj = CliState(quiet=quiet, verbose=verbose, logging=logging_config)


def _state(ctx: typer.Context) -> CliState:
    return ctx.obj if isinstance(ctx.obj, CliState) else CliState()


def _load_font(path: Path, units_per_em: float | None = None) -> Font:
    """Load a font, rejecting paths that are not regular files."""
    if not path.exists():
        raise FontLoadError(str(path), "file not found")
    if not path.is_file():
        raise FontLoadError(str(path), "not a file")
    return FontReader(path, units_per_em=units_per_em).load()


@app.command("compile")
def compile_text(
    ctx: typer.Context,
    text: Annotated[
        str,
        typer.Argument(
            help="Text to compile (use \\n for line breaks)",
            show_default=False,
        ),
    ],
    font_path: Annotated[
        Path,
        typer.Option(
            "--font",
            "-f",
            help="Stroke font (.json or .svg)",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Output file (.gcode/.nc/.ngc/.gc, .svg, .dxf or .png)",
            show_default=False,
        ),
    ],
    size: Annotated[
        float,
        typer.Option("--size", "-s", help="Text size in mm", min=0.01),
    ] = 10.0,
    char_spacing: Annotated[
        float,
        typer.Option("--char-spacing", help="Extra gap after every character (mm)"),
    ] = 0.0,
    space_width: Annotated[
        float,
        typer.Option("--space-width", help="Width of an undefined space (mm)", min=0.0),
    ] = 3.0,
    line_gap: Annotated[
        float,
        typer.Option("--line-gap", help="Gap between lines (mm)"),
    ] = 2.0,
    max_width: Annotated[
        float,
        typer.Option("--max-width", help="Wrap width in mm (0 disables)", min=0.0),
    ] = 0.0,
    max_height: Annotated[
        float,
        typer.Option("--max-height", help="Height bound for --auto-fit in mm (0 disables)", min=0.0),
    ] = 0.0,
    auto_fit: Annotated[
        bool,
        typer.Option("--auto-fit", help="Grow the size to the largest that fits the bounds"),
    ] = False,
    max_text_size: Annotated[
        float,
        typer.Option("--max-text-size", help="Upper bound for --auto-fit (mm)", min=0.01),
    ] = 50.0,
    arc_tolerance: Annotated[
        float,
        typer.Option("--arc-tolerance", help="Arc fit tolerance in design units", min=0.001),
    ] = 0.5,
    feed_rate: Annotated[
        float,
        typer.Option("--feed-rate", help="Cutting feed (mm/min)", min=0.001),
    ] = 1000.0,
    plunge_rate: Annotated[
        float,
        typer.Option("--plunge-rate", help="Plunge feed (mm/min)", min=0.001),
    ] = 300.0,
    safe_z: Annotated[
        float,
        typer.Option("--safe-z", help="Travel height between strokes (mm)"),
    ] = 5.0,
    depth: Annotated[
        float,
        typer.Option("--depth", help="Engraving depth, Z while cutting (mm)"),
    ] = -0.5,
    no_timestamp: Annotated[
        bool,
        typer.Option("--no-timestamp", help="Omit the generation timestamp from G-code"),
    ] = False,
) -> None:
    """Compile TEXT with a stroke font and write G-code, SVG, DXF or PNG.

    The output format follows the file suffix.

    Example:
        strokefont compile "Hello" --font hand.json -o hello.gcode
    """
    state = _state(ctx)

    try:
        settings = StrokeFontSettings(
            arcs=ArcConfig(tolerance=arc_tolerance),
            layout=LayoutConfig(
                output_size=size,
                char_spacing=char_spacing,
                space_width=space_width,
                line_gap=line_gap,
                max_width=max_width,
                max_height=max_height,
                auto_fit=auto_fit,
                max_text_size=max_text_size,
            ),
            export=ExportConfig(
                gcode=GCodeConfig(
                    feed_rate=feed_rate,
                    plunge_rate=plunge_rate,
                    safe_z=safe_z,
                    engrave_depth=depth,
                    include_timestamp=not no_timestamp,
                ),
            ),
        )
    except ValidationError as e:
        print_error("Invalid options", details=str(e))
        raise typer.Exit(code=1)

    if not state.quiet:
        print_header(__version__)

    try:
        # Fail on an unknown suffix before doing any work
        exporter = exporter_for(output, settings.export)

        if not state.quiet:
            print_step("Loading font")
        font = _load_font(font_path)
        if not state.quiet:
            print_font_info(str(font_path), font)

        if not state.quiet:
            print_step("Compiling")
        compiler = ToolpathCompiler(GlyphStore(font), settings)
        compiled = compiler.compile(text.replace("\\n", "\n"))
        layout = compiled.layout
        if not state.quiet:
            print_layout_info(len(layout.lines), layout.size, layout.width, layout.height)
            print_missing(layout.missing)

        try:
            size_bytes = exporter.save(compiled, output)
        except OSError as e:
            print_error(f"Could not write {output}: {e.strerror or e}")
            raise typer.Exit(code=1)

        stats = compiler.stats
        if not state.quiet:
            print_success(
                output_path=output,
                size_bytes=size_bytes,
                total_time_s=stats.duration_seconds,
                glyphs=stats.glyphs_placed,
                lines=stats.line_segments,
                arcs=stats.arc_segments,
            )

    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except StrokeFontError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def info(
    font_path: Annotated[
        Path,
        typer.Argument(help="Stroke font (.json or .svg)", show_default=False),
    ],
) -> None:
    """Show metrics, drawn characters and kerning rules of a font."""
    try:
        font = _load_font(font_path)
    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except StrokeFontError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_font_info(str(font_path), font)
    console.print()
    print_metrics(font)
    print_characters(font)
    print_kerning(font.kerning)


@app.command()
def convert(
    ctx: typer.Context,
    input_font: Annotated[
        Path,
        typer.Argument(help="Font to read (.json or .svg)", show_default=False),
    ],
    output_font: Annotated[
        Path,
        typer.Argument(help="Font to write (.json or .svg)", show_default=False),
    ],
    units_per_em: Annotated[
        float | None,
        typer.Option(
            "--units-per-em",
            help="Rescale an SVG font to this em size while reading",
            min=1.0,
        ),
    ] = None,
) -> None:
    """Convert a font between the JSON and SVG font containers."""
    state = _state(ctx)
    try:
        font = _load_font(input_font, units_per_em=units_per_em)
        size_bytes = FontWriter(font, output_font).save()
    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except FontSaveError as e:
        print_error(f"Could not save font: {e.reason}")
        raise typer.Exit(code=1)
    except StrokeFontError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    logger.info("Font converted", source=str(input_font), target=str(output_font), glyphs=len(font.glyphs))
    if not state.quiet:
        print_saved(output_font, size_bytes)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()

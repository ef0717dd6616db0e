"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from strokefont.domain import Font, KernRule

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_WARN = "!"  # Warning
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Strokefont[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(font_path: str, font: Font) -> None:
    """Print font information.

    Args:
        font_path: Path to the font file
        font: The loaded font
    """
    drawn = sum(1 for glyph in font.glyphs.values() if not glyph.is_empty())
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(font_path)
    line1.append(f" ({font.name})")
    console.print(line1)
    console.print(
        f"  {drawn} drawn glyphs {SYM_DOT} {len(font.kerning)} kerning rules "
        f"{SYM_DOT} {font.metrics.units_per_em:g} UPM"
    )


def print_layout_info(lines: int, size: float, width: float, height: float) -> None:
    """Print the laid-out text dimensions."""
    plural = "line" if lines == 1 else "lines"
    console.print(f"  {lines} {plural} {SYM_DOT} size {size:g} {SYM_DOT} {width:.2f} x {height:.2f} mm")


def print_missing(chars: list[str]) -> None:
    """Print characters that are not in the font.

    Args:
        chars: Missing characters, in order of first use
    """
    if not chars:
        return
    listed = " ".join(repr(c) for c in chars[:20])
    if len(chars) > 20:
        listed += f" {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{len(chars) - 20} more)"
    console.print(f"  [yellow]{SYM_WARN} Not in font:[/yellow] {escape(listed)}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def format_file_size(size_bytes: int) -> str:
    """Format a byte count in human-readable form (e.g., "428 KB")."""
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def print_success(
    output_path: Path,
    size_bytes: int,
    total_time_s: float,
    glyphs: int,
    lines: int,
    arcs: int,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        size_bytes: Size of the written file
        total_time_s: Total compile time in seconds
        glyphs: Number of glyphs drawn
        lines: Number of line segments
        arcs: Number of arc segments
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    line = Text("  ")
    line.append(str(output_path), style="bold")
    line.append(f" ({format_file_size(size_bytes)})")
    console.print(line)

    console.print(f"  {glyphs} glyphs {SYM_DOT} {lines} lines {SYM_DOT} {arcs} arcs")


def print_saved(output_path: Path, size_bytes: int) -> None:
    """Print a short confirmation for a written font file."""
    line = Text(f"\n{SYM_OK} Saved ", style="bold green")
    line.append(str(output_path), style="bold")
    line.append(f" ({format_file_size(size_bytes)})", style="default")
    console.print(line)


def print_metrics(font: Font) -> None:
    """Print font metrics as a table."""
    table = Table(title="Metrics", title_justify="left", show_header=False, box=None, padding=(0, 2))
    metrics = font.metrics
    table.add_row("Units per em", f"{metrics.units_per_em:g}")
    table.add_row("Ascent", f"{metrics.ascent:g}")
    table.add_row("Descent", f"{metrics.descent:g}")
    table.add_row("Cap height", f"{metrics.cap_height:g}")
    table.add_row("x-height", f"{metrics.x_height:g}")
    console.print(table)


def print_characters(font: Font) -> None:
    """Print the characters that have drawn strokes."""
    drawn = sorted(c for c, glyph in font.glyphs.items() if not glyph.is_empty())
    console.print("\n[bold]Characters[/bold]")
    console.print(Text("  " + (" ".join(drawn) if drawn else "(none)")))


def print_kerning(rules: list[KernRule]) -> None:
    """Print kerning rules as a table."""
    if not rules:
        console.print("\n[bold]Kerning[/bold]\n  (none)")
        return
    table = Table(title="Kerning", title_justify="left")
    table.add_column("#", justify="right")
    table.add_column("Left")
    table.add_column("Right")
    table.add_column("Adjustment", justify="right")
    for index, rule in enumerate(rules):
        table.add_row(str(index), Text(rule.left), Text(rule.right), f"{rule.adjustment:g}")
    console.print()
    console.print(table)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")

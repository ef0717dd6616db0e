"""Command-line interface for strokefont.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- compile: text to G-code, SVG, DXF or PNG
- info: font metrics, characters and kerning
- convert: JSON and SVG font containers
- Verbose/quiet output modes and file logging
"""

from strokefont.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]

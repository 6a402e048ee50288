"""Command-line interface for rasterfont.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Per-face summary of styles and glyph counts
- ASCII preview of a single glyph bitmap
- Verbose/quiet output modes
- Detailed error reporting
"""

from rasterfont.cli.app import cli, main

__all__ = ["cli", "main"]

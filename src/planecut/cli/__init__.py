"""Command-line interface for planecut.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Progress bars for batch crops
- Verbose/quiet output modes
- Point location queries
- Detailed error reporting
"""

from planecut.cli.app import cli, main

__all__ = ["cli", "main"]

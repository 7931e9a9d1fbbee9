"""Command-line interface for tracksvg.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- CSV or interactive waypoint input
- Configurable radius, padding and canvas size
- Verbose/quiet output modes
- Detailed error reporting
"""

from tracksvg.cli.app import cli

__all__ = ["cli"]

"""Command-line interface for bsptree.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Painter's-order tables for any viewpoint
- Tree structure diagrams
- Tree statistics
- Sample and random scene generation
"""

from bsptree.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]

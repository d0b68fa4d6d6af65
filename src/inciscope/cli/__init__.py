"""CLI package for inciscope.

This package provides the command-line interface using Typer.
The CLI is a thin wrapper around the session layer.
"""

from inciscope.cli.app import app, console

__all__ = ["app", "console"]

"""inciscope TUI screens."""

from inciscope.tui.screens.main import MainScreen

__all__ = ["MainScreen"]

"""inciscope TUI - Interactive terminal interface for inciscope."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from inciscope.settings import Settings

__all__ = ["InciscopeTUI", "main"]


def __getattr__(name: str) -> Any:
    """Lazy import InciscopeTUI to avoid importing textual at module load."""
    if name == "InciscopeTUI":
        from inciscope.tui.app import InciscopeTUI

        return InciscopeTUI
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def main(settings: Settings | None = None) -> None:
    """Entry point for the inciscope-tui command."""
    from inciscope.tui.app import main as _main

    _main(settings)

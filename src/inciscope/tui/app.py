"""Main TUI application for inciscope."""

from __future__ import annotations

import sys
from typing import Any

from textual.app import App
from textual.binding import Binding

from inciscope.client import InciClient
from inciscope.config import load_settings
from inciscope.exceptions import ConfigError
from inciscope.logging_config import setup_logging
from inciscope.settings import Settings
from inciscope.theme import CSS_VARS
from inciscope.tui.screens.main import MainScreen

APP_CSS = (
    CSS_VARS
    + """
Screen {
    background: $bg-dark;
}

#status-bar {
    height: 1;
    background: $bg-surface;
}

#panels {
    height: 1fr;
}

#search-panel, #validate-panel {
    width: 1fr;
    padding: 0 1;
}

.panel-title {
    color: $inci-emerald;
    text-style: bold;
    margin: 1 0 0 0;
}

.hint {
    color: $text-muted;
}

#search-notice {
    height: auto;
    margin: 0 0 1 0;
}

#result-list {
    height: 1fr;
    background: $bg-surface;
}

#ingredients-input {
    height: 8;
}

#validate-button {
    margin: 1 0;
}

#progress-overlay {
    display: none;
    height: auto;
    border: round $inci-pine;
    padding: 0 1;
}

#progress-overlay.-visible {
    display: block;
}

#validation-report {
    height: auto;
}
"""
)


class InciscopeTUI(App[None]):
    """inciscope TUI - INCI ingredient search and compliance validation."""

    TITLE = "inciscope"
    CSS = APP_CSS

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", show=True),
        Binding("ctrl+l", "collapse", "Collapse all", show=True),
    ]

    def __init__(
        self,
        settings: Settings | None = None,
        client: InciClient | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self._client = client or InciClient(settings)

    @property
    def client(self) -> InciClient:
        return self._client

    def on_mount(self) -> None:
        """Set up the initial screen."""
        self.push_screen(MainScreen(self._client))

    async def action_quit(self) -> None:
        """Quit the application."""
        await self._client.aclose()
        self.exit()

    def action_collapse(self) -> None:
        """Collapse every expanded result."""
        self._client.expansion.clear()


def main(settings: Settings | None = None) -> None:
    """Entry point for the TUI."""
    if settings is None:
        try:
            settings = load_settings()
        except ConfigError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

    # The TUI owns the terminal, so logs only go to a file
    setup_logging(settings.log_level, settings.log_file, console=False)
    app = InciscopeTUI(settings=settings)
    app.run()


if __name__ == "__main__":
    main()

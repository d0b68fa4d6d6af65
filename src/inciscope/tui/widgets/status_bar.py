"""Status bar widget showing backend liveness."""

from __future__ import annotations

from typing import Any

from rich.text import Text
from textual.reactive import reactive
from textual.widgets import Static

from inciscope.rendering import render_health
from inciscope.view import HealthView, compose_health


class StatusBar(Static):
    """Status bar showing whether the backend answered its health probe."""

    healthy: reactive[bool] = reactive(False)
    checked: reactive[bool] = reactive(False)
    backend_url: reactive[str] = reactive("")

    def __init__(self, backend_url: str = "", **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.backend_url = backend_url

    def render(self) -> Text:
        """Render the status bar content."""
        if not self.checked:
            text = Text()
            text.append(" ● ", style="dim")
            text.append("Checking backend...", style="dim")
            return text
        return render_health(compose_health(self.healthy), self.backend_url)

    def show_health(self, view: HealthView, checked: bool = True) -> None:
        """Update the displayed health snapshot."""
        self.healthy = view.healthy
        self.checked = checked

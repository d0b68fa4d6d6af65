"""Progress overlay shown while a validation call is pending."""

from __future__ import annotations

from rich.text import Text
from textual.reactive import reactive
from textual.widgets import Static

from inciscope.rendering import render_progress
from inciscope.view import ProgressView


class ProgressOverlay(Static):
    """Timed status phases of the running validation."""

    phases: reactive[tuple[str, ...]] = reactive(())
    is_visible: reactive[bool] = reactive(False)

    def render(self) -> Text:
        """Render the revealed phases."""
        return render_progress(ProgressView(visible=self.is_visible, phases=self.phases))

    def watch_is_visible(self, is_visible: bool) -> None:
        """React to visibility changes."""
        self.set_class(is_visible, "-visible")

    def show_progress(self, view: ProgressView) -> None:
        """Mirror the narrator state."""
        if view.visible:
            self.phases = view.phases
            self.is_visible = True
        else:
            self.hide()

    def hide(self) -> None:
        """Hide the overlay."""
        self.is_visible = False
        self.phases = ()

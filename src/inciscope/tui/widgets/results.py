"""Search result list and its status line."""

from __future__ import annotations

from rich.text import Text
from textual.widgets import OptionList, Static
from textual.widgets.option_list import Option

from inciscope.rendering import render_error, render_result_row
from inciscope.view import SearchView


class ResultList(OptionList):
    """Selectable result rows. Selecting a row toggles its details."""

    def show_results(self, view: SearchView) -> None:
        """Replace the rows, keeping the highlighted position."""
        highlighted = self.highlighted
        self.clear_options()
        self.add_options([Option(render_result_row(row), id=row.key) for row in view.rows])
        if highlighted is not None and view.rows:
            self.highlighted = min(highlighted, len(view.rows) - 1)


class SearchNotice(Static):
    """Loading, error, or placeholder line above the result list."""

    def show_notice(self, view: SearchView) -> None:
        if view.loading:
            self.update(Text(f"Searching for {view.query!r}...", style="dim"))
        elif view.error:
            self.update(render_error(view.error))
        elif view.empty_message:
            self.update(Text(view.empty_message, style="dim"))
        else:
            self.update(Text(f"{len(view.rows)} results for {view.query!r}", style="dim"))

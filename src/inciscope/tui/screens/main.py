"""Main screen: search panel on the left, validation panel on the right."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Coroutine
from typing import Any

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.widgets import Button, Footer, Input, Label, OptionList, TextArea

from inciscope.client import InciClient
from inciscope.tui.widgets import (
    ProgressOverlay,
    ResultList,
    SearchInput,
    SearchNotice,
    StatusBar,
    ValidationReport,
)

logger = logging.getLogger(__name__)

INGREDIENTS_PLACEHOLDER = '{"Aqua": "40%", "Glycerin": "5%"}'


class MainScreen(Screen[None]):
    """Interactive screen driving the search and validation sessions."""

    BINDINGS = [
        Binding("ctrl+r", "probe_health", "Re-check backend", show=True),
        Binding("ctrl+s", "validate", "Validate", show=True),
    ]

    def __init__(self, client: InciClient, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._client = client
        self._tasks: set[asyncio.Task[Any]] = set()
        self._unsubscribe: Callable[[], None] | None = None

    def compose(self) -> ComposeResult:
        """Compose the main screen layout."""
        yield StatusBar(backend_url=self._client.backend.base_url, id="status-bar")
        with Horizontal(id="panels"):
            with Vertical(id="search-panel"):
                yield Label("Ingredient search", classes="panel-title")
                yield SearchInput(id="search-input")
                yield SearchNotice(id="search-notice")
                yield ResultList(id="result-list")
            with VerticalScroll(id="validate-panel"):
                yield Label("Formulation compliance", classes="panel-title")
                yield Input(placeholder="Formulation name", id="formulation-name")
                yield Label(f"Ingredients (JSON), e.g. {INGREDIENTS_PLACEHOLDER}", classes="hint")
                yield TextArea(id="ingredients-input")
                yield Button("Validate", id="validate-button", variant="success")
                yield ProgressOverlay(id="progress-overlay")
                yield ValidationReport(id="validation-report")
        yield Footer()

    async def on_mount(self) -> None:
        """Subscribe to state changes and take the startup health snapshot."""
        self._unsubscribe = self._client.subscribe(self._refresh_view)
        self._refresh_view()
        self._spawn(self._client.health.probe())
        self.call_after_refresh(self._focus_input)

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _focus_input(self) -> None:
        """Focus the search input."""
        try:
            self.query_one(SearchInput).focus()
        except NoMatches:
            # Retry with timer if not ready
            self.set_timer(0.1, self._focus_input)

    def _spawn(self, operation: Coroutine[Any, Any, Any]) -> None:
        # Keep a reference so the task is not garbage collected mid-flight
        task = asyncio.create_task(operation)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def _refresh_view(self) -> None:
        """Re-derive the display from session state."""
        view = self._client.view()
        self.query_one("#status-bar", StatusBar).show_health(
            view.health, checked=self._client.health.checked
        )
        self.query_one("#search-notice", SearchNotice).show_notice(view.search)
        self.query_one("#result-list", ResultList).show_results(view.search)
        self.query_one("#progress-overlay", ProgressOverlay).show_progress(view.progress)
        self.query_one("#validation-report", ValidationReport).show_report(view.validation)
        button = self.query_one("#validate-button", Button)
        button.label = "Validating..." if view.validation.loading else "Validate"

    async def on_search_input_query_submitted(self, event: SearchInput.QuerySubmitted) -> None:
        """Start a search; an older pending search is superseded, not cancelled."""
        self._spawn(self._client.search.run_search(event.value))

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        """Toggle details of the selected result."""
        if event.option_id is not None:
            self._client.expansion.toggle(event.option_id)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "validate-button":
            self.action_validate()

    def action_validate(self) -> None:
        """Submit the formulation form."""
        name = self.query_one("#formulation-name", Input).value
        ingredients = self.query_one("#ingredients-input", TextArea).text
        self._spawn(self._client.validation.run_validate(name, ingredients))

    def action_probe_health(self) -> None:
        """Take a fresh health snapshot."""
        self._spawn(self._client.health.probe())

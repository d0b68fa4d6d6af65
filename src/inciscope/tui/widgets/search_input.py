"""Search input with query history."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from textual.message import Message
from textual.widgets import Input

if TYPE_CHECKING:
    from textual.events import Key

# Oldest queries are forgotten past this many entries
HISTORY_SIZE = 50


class SearchInput(Input):
    """Input widget for ingredient queries.

    Up/Down walk through earlier queries, newest first. Re-submitting a query
    moves it to the front of the history instead of adding a second copy.
    Walking past the newest entry restores whatever was being typed.
    """

    BINDINGS = [
        ("up", "recall(1)", "Previous query"),
        ("down", "recall(-1)", "Next query"),
    ]

    class QuerySubmitted(Message):
        """Posted when a query is submitted."""

        def __init__(self, value: str) -> None:
            self.value = value
            super().__init__()

    def __init__(
        self,
        placeholder: str = "Search ingredients, e.g. Aqua...",
        *,
        id: str | None = None,
    ) -> None:
        super().__init__(placeholder=placeholder, id=id)
        self._history: deque[str] = deque(maxlen=HISTORY_SIZE)
        # Steps back from the newest query; 0 means editing the draft
        self._depth = 0
        self._draft = ""

    @property
    def history(self) -> list[str]:
        """Submitted queries, oldest first."""
        return list(self._history)

    def add_to_history(self, query: str) -> None:
        query = query.strip()
        if query:
            if query in self._history:
                self._history.remove(query)
            self._history.append(query)
        self._depth = 0
        self._draft = ""

    def recalled(self, step: int) -> str | None:
        """Move ``step`` entries back (positive) or forward (negative).

        Returns:
            The text to show, or None if the move falls outside the history.
        """
        depth = self._depth + step
        if depth < 0 or depth > len(self._history) or depth == self._depth:
            return None
        if self._depth == 0:
            self._draft = self.value
        self._depth = depth
        return self._draft if depth == 0 else self._history[-depth]

    def action_recall(self, step: int) -> None:
        text = self.recalled(step)
        if text is not None:
            self.value = text
            self.cursor_position = len(text)

    async def _on_key(self, event: Key) -> None:
        if event.key == "enter":
            # Blank queries are dropped here; the session ignores them anyway
            if self.value.strip():
                self.post_message(self.QuerySubmitted(self.value))
                self.add_to_history(self.value)
            event.stop()
            event.prevent_default()

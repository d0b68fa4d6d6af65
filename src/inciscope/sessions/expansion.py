# src/inciscope/sessions/expansion.py
"""Tracks which search results are expanded."""

from __future__ import annotations

from inciscope.sessions.base import Observable


class ExpansionTracker(Observable):
    """Set of expanded result keys.

    Absent keys are collapsed. The state survives new searches:
    a key whose item is no longer displayed simply has no visible effect.
    """

    def __init__(self) -> None:
        super().__init__()
        self._expanded: set[str] = set()

    def toggle(self, key: str) -> None:
        """Flip the expanded flag for a key."""
        if key in self._expanded:
            self._expanded.discard(key)
        else:
            self._expanded.add(key)
        self._notify()

    def is_expanded(self, key: str) -> bool:
        return key in self._expanded

    def expanded_keys(self) -> frozenset[str]:
        return frozenset(self._expanded)

    def clear(self) -> None:
        """Collapse everything."""
        self._expanded.clear()
        self._notify()

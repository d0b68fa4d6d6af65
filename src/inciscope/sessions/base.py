# src/inciscope/sessions/base.py
"""Shared building blocks for the session layer.

This module defines:
- The lifecycle status shared by the search and validation sessions
- ``Observable``, the change-notification hook the UIs re-render from
- ``Session``, which tracks request sequence numbers so that only the most
  recently issued request may commit its response
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

logger = logging.getLogger(__name__)

# Fallback when a failure carries no usable message
GENERIC_ERROR = "Something went wrong."

# Callback invoked after every state change
Listener = Callable[[], None]


class SessionStatus(Enum):
    """Lifecycle of an async workflow."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class Observable:
    """Minimal listener registry."""

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener.

        Returns:
            A callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                # A broken view must not abort the state transition
                logger.exception("Listener %r failed", listener)


class Session(Observable):
    """Owned state for one async workflow.

    Attributes:
        status: Current lifecycle status
        error_message: Set only while status is ERROR
    """

    def __init__(self) -> None:
        super().__init__()
        self.status = SessionStatus.IDLE
        self.error_message: str | None = None
        self._latest_request = 0

    @property
    def is_loading(self) -> bool:
        return self.status is SessionStatus.LOADING

    @property
    def latest_request(self) -> int:
        """Sequence number of the most recently issued request (0 = none yet)."""
        return self._latest_request

    def _next_request(self) -> int:
        self._latest_request += 1
        return self._latest_request

    def _is_latest(self, request_id: int) -> bool:
        return request_id == self._latest_request

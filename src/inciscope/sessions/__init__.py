# src/inciscope/sessions/__init__.py
"""UI-agnostic session layer.

Each session owns the state of one workflow and exposes the operations that
mutate it. Both the CLI and the TUI drive these objects and re-render from
them; nothing here knows how it is displayed.

Usage:
    from inciscope.sessions import SearchSession

    session = SearchSession(backend)
    await session.run_search("Aqua")
    print(session.status, session.results)
"""

from inciscope.sessions.base import GENERIC_ERROR, Listener, Observable, Session, SessionStatus
from inciscope.sessions.expansion import ExpansionTracker
from inciscope.sessions.health import HealthMonitor
from inciscope.sessions.narrator import Cancellable, ProgressNarrator, Scheduler, asyncio_scheduler
from inciscope.sessions.search import SearchSession
from inciscope.sessions.validation import ValidationSession, parse_ingredients

__all__ = [
    # Base types
    "GENERIC_ERROR",
    "Listener",
    "Observable",
    "Session",
    "SessionStatus",
    # Sessions
    "SearchSession",
    "ValidationSession",
    "parse_ingredients",
    "ExpansionTracker",
    "HealthMonitor",
    # Progress narrator
    "Cancellable",
    "ProgressNarrator",
    "Scheduler",
    "asyncio_scheduler",
]

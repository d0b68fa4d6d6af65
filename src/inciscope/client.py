# src/inciscope/client.py
"""Central object wiring the backend adapter to every session.

Example:
    async with InciClient(Settings(backend_url="http://localhost:8000")) as client:
        await client.health.probe()
        await client.search.run_search("Aqua")
        view = client.view()
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from inciscope.sessions import (
    ExpansionTracker,
    HealthMonitor,
    Listener,
    ProgressNarrator,
    Scheduler,
    SearchSession,
    ValidationSession,
)
from inciscope.settings import Settings
from inciscope.transport import BackendClient
from inciscope.view import ViewModel, compose_view


class InciClient:
    """Owns one backend adapter plus the search, validation, expansion,
    narrator, and health state of a single user session.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        backend: BackendClient | None = None,
        scheduler: Scheduler | None = None,
    ) -> None:
        """Create a client.

        Args:
            settings: Client settings (default: read from the environment)
            backend: Backend adapter (default: built from settings)
            scheduler: Timer scheduler for the progress narrator (default: asyncio)
        """
        self.settings = settings or Settings()
        self.backend = backend or BackendClient.from_settings(self.settings)
        self.search = SearchSession(self.backend)
        self.expansion = ExpansionTracker()
        self.narrator = ProgressNarrator(self.settings.narrator_phases, scheduler=scheduler)
        self.validation = ValidationSession(self.backend, narrator=self.narrator)
        self.health = HealthMonitor(self.backend)

    async def __aenter__(self) -> InciClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        self.narrator.stop()
        await self.backend.aclose()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Listen for changes in any of the owned state objects.

        Returns:
            A callable that removes the listener from all of them.
        """
        unsubscribers = [
            observable.subscribe(listener)
            for observable in (
                self.search,
                self.expansion,
                self.validation,
                self.narrator,
                self.health,
            )
        ]

        def unsubscribe() -> None:
            for remove in unsubscribers:
                remove()

        return unsubscribe

    def view(self) -> ViewModel:
        """Derive the current display."""
        return compose_view(
            self.search,
            self.expansion,
            self.validation,
            self.narrator,
            self.health.healthy,
            self.backend.base_url,
        )

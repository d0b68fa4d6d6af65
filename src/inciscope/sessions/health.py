# src/inciscope/sessions/health.py
"""Backend liveness snapshot."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from inciscope.sessions.base import Observable

if TYPE_CHECKING:
    from inciscope.transport import BackendClient

logger = logging.getLogger(__name__)


class HealthMonitor(Observable):
    """Single health probe result for advisory display.

    There is no polling loop. ``probe()`` runs once at startup and again only
    when explicitly requested.

    Attributes:
        healthy: True once a probe returned ``ok: true``
        checked: True once any probe has resolved
    """

    def __init__(self, backend: BackendClient) -> None:
        super().__init__()
        self._backend = backend
        self._latest_probe = 0
        self.healthy = False
        self.checked = False

    async def probe(self) -> bool:
        """Probe the backend. Never raises.

        Returns:
            The resulting health status
        """
        self._latest_probe += 1
        probe_id = self._latest_probe
        try:
            result = await self._backend.health()
            healthy = bool(result.success and result.value is not None and result.value.ok)
            if not result.success:
                logger.info("Health probe failed: %s", result.error)
        except Exception:
            logger.exception("Health probe raised")
            healthy = False

        if probe_id != self._latest_probe:
            return self.healthy

        self.healthy = healthy
        self.checked = True
        self._notify()
        return healthy

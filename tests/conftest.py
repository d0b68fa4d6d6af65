"""Shared pytest fixtures."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from inciscope.exceptions import TransportError
from inciscope.models import HealthPayload, SearchPayload, ValidationPayload
from inciscope.settings import NarratorPhase
from inciscope.transport import BackendClient, TransportResult

BASE_URL = "http://backend.test"

WATER = {
    "source_id": "1",
    "incinamefull": "Water",
    "functions": ["solvent"],
    "textScore": 0.9,
    "vectorScore": 0.8,
    "combinedScore": 0.85,
}

GLYCERIN = {
    "source_id": "2",
    "incinamefull": "Glycerin",
    "functions": ["humectant", "skin conditioning"],
    "textScore": 0.4,
    "vectorScore": 0.7,
    "combinedScore": 0.55,
}


def ok(payload: Any) -> TransportResult[Any]:
    return TransportResult.ok(payload)


def fail(message: str = "Backend error: 500 Internal Server Error", status: int | None = 500):
    return TransportResult.fail(TransportError(message, status_code=status))


def search_payload(*items: dict[str, Any]) -> SearchPayload:
    return SearchPayload.model_validate({"results": list(items)})


def validation_payload(**body: Any) -> ValidationPayload:
    return ValidationPayload.model_validate(body)


class FakeBackend:
    """Stand-in for BackendClient that records calls.

    By default each call returns the next queued result for its endpoint.
    With ``hold = True`` calls block on a future the test resolves, which
    lets tests control the order in which responses arrive.
    """

    base_url = BASE_URL

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.queued: dict[str, list[TransportResult[Any]]] = {
            "health": [],
            "search": [],
            "validate": [],
        }
        self.hold = False
        self.pending: list[asyncio.Future[TransportResult[Any]]] = []
        self.closed = False

    def queue(self, endpoint: str, result: TransportResult[Any]) -> None:
        self.queued[endpoint].append(result)

    def count(self, endpoint: str) -> int:
        return sum(1 for name, _ in self.calls if name == endpoint)

    async def _call(self, endpoint: str, *args: Any) -> TransportResult[Any]:
        self.calls.append((endpoint, args))
        if self.hold:
            future: asyncio.Future[TransportResult[Any]] = (
                asyncio.get_running_loop().create_future()
            )
            self.pending.append(future)
            return await future
        if self.queued[endpoint]:
            return self.queued[endpoint].pop(0)
        return fail("No response queued", None)

    async def health(self) -> TransportResult[HealthPayload]:
        return await self._call("health")

    async def search(self, query: str) -> TransportResult[SearchPayload]:
        return await self._call("search", query)

    async def validate(self, name: str, ingredients: dict[str, str]):
        return await self._call("validate", name, ingredients)

    def report_url(self, report_ref: str | None) -> str | None:
        return f"{BASE_URL}{report_ref}" if report_ref else None

    async def aclose(self) -> None:
        self.closed = True


class FakeHandle:
    def __init__(self) -> None:
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """Manually driven scheduler for the progress narrator."""

    def __init__(self) -> None:
        self.scheduled: list[tuple[float, Callable[[], None], FakeHandle]] = []

    def __call__(self, delay: float, callback: Callable[[], None]) -> FakeHandle:
        handle = FakeHandle()
        self.scheduled.append((delay, callback, handle))
        return handle

    def advance_to(self, elapsed: float) -> None:
        """Fire every live callback due at or before ``elapsed`` seconds."""
        for delay, callback, handle in list(self.scheduled):
            if delay <= elapsed and not handle.cancelled and not handle.fired:
                handle.fired = True
                callback()

    @property
    def live(self) -> list[FakeHandle]:
        return [h for _, _, h in self.scheduled if not h.cancelled and not h.fired]


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def phases() -> list[NarratorPhase]:
    return [
        NarratorPhase(message="Parsing", offset=0.0),
        NarratorPhase(message="Matching", offset=1.2),
        NarratorPhase(message="Checking", offset=2.4),
        NarratorPhase(message="Compiling", offset=3.6),
    ]


@pytest.fixture
def mock_backend():
    """Build a real BackendClient over an httpx.MockTransport handler."""

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> BackendClient:
        return BackendClient(BASE_URL, timeout=5.0, transport=httpx.MockTransport(handler))

    return factory

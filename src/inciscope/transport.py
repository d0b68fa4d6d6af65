# src/inciscope/transport.py
"""HTTP adapter for the INCI backend.

Every call returns a ``TransportResult`` instead of raising, so sessions can
treat success and failure uniformly:

    async with BackendClient("http://localhost:8000") as backend:
        result = await backend.search("Aqua")
        if result.success:
            print(result.value.results)
        else:
            print(result.error)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from inciscope.exceptions import DecodeError, TransportError
from inciscope.models import HealthPayload, SearchPayload, ValidationPayload
from inciscope.settings import DEFAULT_BACKEND_URL

if TYPE_CHECKING:
    from inciscope.settings import Settings

logger = logging.getLogger(__name__)

HEALTH_PATH = "/health"
SEARCH_PATH = "/search"
VALIDATE_PATH = "/validate"

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


@dataclass
class TransportResult(Generic[T]):
    """Outcome of a single backend call.

    Attributes:
        success: True if the call returned a decodable 2xx response
        value: Decoded payload (only on success)
        error: What went wrong (only on failure)
    """

    success: bool
    value: T | None = None
    error: TransportError | None = None

    @classmethod
    def ok(cls, value: T) -> TransportResult[T]:
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: TransportError) -> TransportResult[T]:
        return cls(success=False, error=error)


def resolve_report_url(base_url: str, report_ref: str | None) -> str | None:
    """Turn a report reference from the backend into a download link.

    Relative references are appended to the backend address; absolute URLs are
    returned unchanged.
    """
    if not report_ref:
        return None
    if report_ref.startswith(("http://", "https://")):
        return report_ref
    return f"{base_url.rstrip('/')}/{report_ref.lstrip('/')}"


class BackendClient:
    """Async client for the health, search, and validate endpoints.

    The client holds no session state. It is safe to have several calls in
    flight at once, e.g. a search while a validation is pending.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BACKEND_URL,
        timeout: float | None = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Create a backend client.

        Args:
            base_url: Backend address, e.g. "http://localhost:8000"
            timeout: Seconds before a call fails (None = no timeout)
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> BackendClient:
        return cls(base_url=settings.backend_url, timeout=settings.request_timeout)

    async def __aenter__(self) -> BackendClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close pooled connections."""
        await self._client.aclose()

    def report_url(self, report_ref: str | None) -> str | None:
        return resolve_report_url(self.base_url, report_ref)

    async def health(self) -> TransportResult[HealthPayload]:
        """Probe backend liveness."""
        return await self._call("GET", HEALTH_PATH, HealthPayload)

    async def search(self, query: str) -> TransportResult[SearchPayload]:
        """Search the ingredient database with a free-text query."""
        return await self._call("GET", SEARCH_PATH, SearchPayload, params={"query": query})

    async def validate(
        self, name: str, ingredients: Mapping[str, str]
    ) -> TransportResult[ValidationPayload]:
        """Submit a formulation for compliance validation.

        Args:
            name: Formulation name
            ingredients: Ingredient name to concentration (e.g. {"Aqua": "40%"})
        """
        body = {"name": name, "ingredients": dict(ingredients)}
        return await self._call("POST", VALIDATE_PATH, ValidationPayload, json=body)

    async def _call(
        self, method: str, path: str, model: type[M], **kwargs: Any
    ) -> TransportResult[M]:
        logger.debug("%s %s%s", method, self.base_url, path)
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.TimeoutException:
            logger.warning("%s %s timed out", method, path)
            return TransportResult.fail(TransportError(f"Request to {path} timed out"))
        except httpx.HTTPError as e:
            detail = str(e) or type(e).__name__
            logger.warning("%s %s failed: %s", method, path, detail)
            return TransportResult.fail(
                TransportError(f"Could not reach backend at {self.base_url}: {detail}")
            )

        if not response.is_success:
            logger.warning("%s %s returned HTTP %d", method, path, response.status_code)
            message = f"Backend error: {response.status_code} {response.reason_phrase}".strip()
            return TransportResult.fail(TransportError(message, status_code=response.status_code))

        try:
            payload = model.model_validate_json(response.content)
        except ValidationError as e:
            logger.warning("%s %s returned an unexpected body: %s", method, path, e)
            return TransportResult.fail(
                DecodeError(
                    f"Unexpected response from {path}", status_code=response.status_code
                )
            )
        return TransportResult.ok(payload)

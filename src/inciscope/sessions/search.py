# src/inciscope/sessions/search.py
"""Search session - query text, loading flag, last error, and current results."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from inciscope.exceptions import TransportError
from inciscope.models import SearchResultItem, assign_expansion_keys
from inciscope.sessions.base import GENERIC_ERROR, Session, SessionStatus
from inciscope.transport import TransportResult

if TYPE_CHECKING:
    from inciscope.transport import BackendClient

logger = logging.getLogger(__name__)


class SearchSession(Session):
    """Owns the state of the ingredient search panel.

    Attributes:
        query: Text of the most recently submitted search
        results: Items of the last successful search (empty otherwise)
    """

    def __init__(self, backend: BackendClient) -> None:
        super().__init__()
        self._backend = backend
        self.query = ""
        self.results: list[SearchResultItem] = []

    async def run_search(self, query: str) -> None:
        """Run a search and commit its outcome.

        A blank query is ignored. Several searches may be in flight at once;
        only the response to the latest one is committed.

        Args:
            query: Free-text query
        """
        if not query.strip():
            return

        request_id = self._next_request()
        self.query = query
        self.status = SessionStatus.LOADING
        self.results = []
        self.error_message = None
        self._notify()

        logger.debug("Search #%d issued: %r", request_id, query)
        try:
            result = await self._backend.search(query)
        except Exception:
            logger.exception("Search #%d failed unexpectedly", request_id)
            result = TransportResult.fail(TransportError(GENERIC_ERROR))

        if not self._is_latest(request_id):
            logger.debug(
                "Discarding stale search #%d (latest is #%d)", request_id, self.latest_request
            )
            return

        if result.success and result.value is not None:
            self.results = assign_expansion_keys(result.value.results)
            self.status = SessionStatus.SUCCESS
            logger.info("Search #%d returned %d results", request_id, len(self.results))
        else:
            self.error_message = (str(result.error) if result.error else "") or GENERIC_ERROR
            self.status = SessionStatus.ERROR
        self._notify()

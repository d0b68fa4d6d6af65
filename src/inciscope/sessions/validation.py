# src/inciscope/sessions/validation.py
"""Validation session - formulation input, loading flag, last error, and outcome."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import TypeAdapter, ValidationError

from inciscope.exceptions import InputError, TransportError
from inciscope.models import ValidationOutcome
from inciscope.sessions.base import GENERIC_ERROR, Session, SessionStatus
from inciscope.transport import TransportResult

if TYPE_CHECKING:
    from inciscope.sessions.narrator import ProgressNarrator
    from inciscope.transport import BackendClient

logger = logging.getLogger(__name__)

_INGREDIENTS = TypeAdapter(dict[str, str])


def parse_ingredients(raw: str) -> dict[str, str]:
    """Parse ingredient text into an ingredient -> concentration mapping.

    The text must be a JSON object whose values are strings, e.g.
    ``{"Aqua": "40%", "Glycerin": "5%"}``.

    Args:
        raw: Text entered by the user

    Returns:
        The parsed mapping, in input order

    Raises:
        InputError: If the text is not such an object
    """
    try:
        return _INGREDIENTS.validate_json(raw, strict=True)
    except ValidationError as e:
        error = e.errors()[0]
        location = ".".join(str(part) for part in error.get("loc", ()))
        detail = f"{location}: {error['msg']}" if location else error["msg"]
        raise InputError(f"Invalid ingredients: {detail}") from e


class ValidationSession(Session):
    """Owns the state of the formulation validation panel.

    Attributes:
        formulation_name: Name of the last submitted formulation
        ingredients_raw: Ingredient text of the last submission
        outcome: Result of the last successful validation (None otherwise)
    """

    def __init__(self, backend: BackendClient, narrator: ProgressNarrator | None = None) -> None:
        super().__init__()
        self._backend = backend
        self._narrator = narrator
        self.formulation_name = ""
        self.ingredients_raw = ""
        self.outcome: ValidationOutcome | None = None

    async def run_validate(self, name: str, ingredients_raw: str) -> None:
        """Validate a formulation and commit its outcome.

        Blank ingredient text is ignored. Text that does not parse moves the
        session to ERROR without contacting the backend. Only the response to
        the latest submission is committed.

        Args:
            name: Formulation name
            ingredients_raw: JSON object of ingredient -> concentration
        """
        if not ingredients_raw.strip():
            return

        # Claim a sequence number first so an older in-flight call can't commit
        request_id = self._next_request()
        self.formulation_name = name
        self.ingredients_raw = ingredients_raw

        try:
            ingredients = parse_ingredients(ingredients_raw)
        except InputError as e:
            logger.info("Validation #%d rejected locally: %s", request_id, e)
            self._stop_narrator()
            self.outcome = None
            self.error_message = str(e)
            self.status = SessionStatus.ERROR
            self._notify()
            return

        self.status = SessionStatus.LOADING
        self.outcome = None
        self.error_message = None
        if self._narrator is not None:
            self._narrator.start()
        self._notify()

        logger.debug(
            "Validation #%d issued for %r (%d ingredients)", request_id, name, len(ingredients)
        )
        try:
            result = await self._backend.validate(name, ingredients)
        except Exception:
            logger.exception("Validation #%d failed unexpectedly", request_id)
            result = TransportResult.fail(TransportError(GENERIC_ERROR))

        if not self._is_latest(request_id):
            logger.debug(
                "Discarding stale validation #%d (latest is #%d)", request_id, self.latest_request
            )
            return

        self._stop_narrator()
        if result.success and result.value is not None:
            self.outcome = ValidationOutcome.from_payload(result.value)
            self.status = SessionStatus.SUCCESS
            logger.info(
                "Validation #%d: %d passed, %d need attention",
                request_id,
                self.outcome.passed_count,
                self.outcome.attention_count,
            )
        else:
            self.error_message = (str(result.error) if result.error else "") or GENERIC_ERROR
            self.status = SessionStatus.ERROR
        self._notify()

    def _stop_narrator(self) -> None:
        if self._narrator is not None:
            self._narrator.stop()

# src/inciscope/models.py
"""Data models for backend payloads and session outcomes."""

from __future__ import annotations

from collections import Counter
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator

# A verdict containing this marker counts as passing; anything else needs attention
SUCCESS_MARKER = "✅"


class SearchResultItem(BaseModel):
    """One ranked ingredient record returned by the search backend.

    Attributes:
        source_id: Backend identifier of the record
        display_name: Full INCI name
        functions: Cosmetic functions of the ingredient
        text_score: Lexical relevance signal
        vector_score: Semantic relevance signal
        combined_score: Final ranking score
        expansion_key: Key used to track whether the row is expanded. Unique
            within a result set even when the backend repeats a source_id.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    source_id: str = ""
    display_name: str = Field(default="", alias="incinamefull")
    functions: list[str] = Field(default_factory=list)
    text_score: float = Field(default=0.0, alias="textScore")
    vector_score: float = Field(default=0.0, alias="vectorScore")
    combined_score: float = Field(default=0.0, alias="combinedScore")
    expansion_key: str = ""

    @field_validator("source_id", "display_name", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> Any:
        if v is None:
            return ""
        if isinstance(v, int | float) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("functions", mode="before")
    @classmethod
    def coerce_functions(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("text_score", "vector_score", "combined_score", mode="before")
    @classmethod
    def missing_score_is_zero(cls, v: Any) -> Any:
        return 0.0 if v is None else v


def assign_expansion_keys(items: list[SearchResultItem]) -> list[SearchResultItem]:
    """Give every item an expansion key that is unique within the list.

    The first occurrence of a source_id keeps it as its key; later duplicates
    get the first free ``#n`` suffix, skipping any key already issued (a real
    source_id may itself look like ``1#1``). Items without a source_id are
    keyed by position.
    """
    suffixes: Counter[str] = Counter()
    issued: set[str] = set()
    keyed = []
    for index, item in enumerate(items):
        base = item.source_id or f"#{index}"
        key = base
        while key in issued:
            suffixes[base] += 1
            key = f"{base}#{suffixes[base]}"
        issued.add(key)
        keyed.append(item.model_copy(update={"expansion_key": key}))
    return keyed


class IngredientVerdict(BaseModel):
    """Compliance verdict for one ingredient of a formulation."""

    model_config = ConfigDict(frozen=True)

    ingredient: str
    concentration: str = ""
    status: str = ""

    @field_validator("concentration", "status", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> Any:
        if v is None:
            return ""
        if isinstance(v, int | float) and not isinstance(v, bool):
            return str(v)
        return v

    @property
    def passed(self) -> bool:
        """True if the verdict carries the success marker."""
        return SUCCESS_MARKER in self.status


class HealthPayload(BaseModel):
    """Body of the health endpoint."""

    ok: StrictBool = False


class SearchPayload(BaseModel):
    """Body of the search endpoint."""

    results: list[SearchResultItem] = Field(default_factory=list)

    @field_validator("results", mode="before")
    @classmethod
    def none_is_empty(cls, v: Any) -> Any:
        return [] if v is None else v


class ValidationPayload(BaseModel):
    """Body of the validate endpoint."""

    results: list[IngredientVerdict] = Field(default_factory=list)
    summary: str | None = None
    pdf_url: str | None = None

    @field_validator("results", mode="before")
    @classmethod
    def none_is_empty(cls, v: Any) -> Any:
        return [] if v is None else v


class ValidationOutcome(BaseModel):
    """Structured result of a completed validation.

    Attributes:
        per_ingredient: Verdicts in the order the backend returned them
        narrative_summary: Markdown summary, rendered verbatim
        report_ref: Reference to a downloadable report, relative to the backend
    """

    model_config = ConfigDict(frozen=True)

    per_ingredient: list[IngredientVerdict] = Field(default_factory=list)
    narrative_summary: str | None = None
    report_ref: str | None = None

    @classmethod
    def from_payload(cls, payload: ValidationPayload) -> ValidationOutcome:
        # Empty strings mean the field was not provided
        return cls(
            per_ingredient=list(payload.results),
            narrative_summary=payload.summary or None,
            report_ref=payload.pdf_url or None,
        )

    @property
    def passed_count(self) -> int:
        return sum(1 for verdict in self.per_ingredient if verdict.passed)

    @property
    def attention_count(self) -> int:
        return len(self.per_ingredient) - self.passed_count

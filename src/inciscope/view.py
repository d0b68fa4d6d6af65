# src/inciscope/view.py
"""Pure derivation of what to display from the session objects.

``compose_view`` reads state and returns an immutable tree. It performs no
I/O and keeps nothing between calls, so UIs can call it after every change
notification and tests can check display logic without rendering anything.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from inciscope.sessions.base import SessionStatus
from inciscope.transport import resolve_report_url

if TYPE_CHECKING:
    from inciscope.models import IngredientVerdict, SearchResultItem
    from inciscope.sessions import (
        ExpansionTracker,
        ProgressNarrator,
        SearchSession,
        ValidationSession,
    )

SEARCH_PROMPT = "Type a query and hit search to see results."
NO_RESULTS = "No ingredients matched your query."


def format_score(value: float) -> str:
    """Format a text or vector relevance score."""
    return f"{value:g}"


def format_combined_score(value: float) -> str:
    """Format the combined score with fixed 3-decimal precision."""
    return f"{value:.3f}"


@dataclass(frozen=True)
class HealthView:
    healthy: bool
    label: str


@dataclass(frozen=True)
class ResultRow:
    """One search result as displayed."""

    key: str
    display_name: str
    expanded: bool
    source_id: str
    functions: str
    text_score: str
    vector_score: str
    combined_score: str


@dataclass(frozen=True)
class SearchView:
    """Search panel.

    Attributes:
        query: Last submitted query
        loading: True while a search is pending
        error: Error text to show inline, if any
        rows: Result rows in ranking order
        empty_message: Placeholder when there is nothing else to show
    """

    query: str
    loading: bool
    error: str | None
    rows: tuple[ResultRow, ...]
    empty_message: str | None


@dataclass(frozen=True)
class VerdictRow:
    ingredient: str
    concentration: str
    status: str
    passed: bool


@dataclass(frozen=True)
class ValidationView:
    """Validation panel.

    Attributes:
        formulation_name: Name of the submitted formulation
        loading: True while a validation is pending
        error: Error text to show inline, if any
        rows: Per-ingredient verdicts
        summary: Markdown summary, verbatim
        report_url: Download link for the report, if the backend produced one
        passed_count: Verdicts carrying the success marker
        attention_count: All other verdicts
        has_outcome: True once a validation completed, even with no verdicts
    """

    formulation_name: str
    loading: bool
    error: str | None
    rows: tuple[VerdictRow, ...]
    summary: str | None
    report_url: str | None
    passed_count: int
    attention_count: int
    has_outcome: bool = False


@dataclass(frozen=True)
class ProgressView:
    """Progress overlay. ``phases`` lists the messages revealed so far."""

    visible: bool
    phases: tuple[str, ...]


@dataclass(frozen=True)
class ViewModel:
    health: HealthView
    search: SearchView
    validation: ValidationView
    progress: ProgressView


def compose_result_row(item: SearchResultItem, expanded: bool) -> ResultRow:
    key = item.expansion_key or item.source_id
    return ResultRow(
        key=key,
        display_name=item.display_name,
        expanded=expanded,
        source_id=item.source_id,
        functions=", ".join(item.functions),
        text_score=format_score(item.text_score),
        vector_score=format_score(item.vector_score),
        combined_score=format_combined_score(item.combined_score),
    )


def compose_search(search: SearchSession, expansion: ExpansionTracker) -> SearchView:
    rows: tuple[ResultRow, ...] = ()
    if search.status is SessionStatus.SUCCESS:
        rows = tuple(
            compose_result_row(item, expansion.is_expanded(item.expansion_key or item.source_id))
            for item in search.results
        )

    empty_message = None
    if not rows and search.status is SessionStatus.IDLE:
        empty_message = SEARCH_PROMPT
    elif not rows and search.status is SessionStatus.SUCCESS:
        empty_message = NO_RESULTS

    return SearchView(
        query=search.query,
        loading=search.is_loading,
        error=search.error_message if search.status is SessionStatus.ERROR else None,
        rows=rows,
        empty_message=empty_message,
    )


def compose_verdict_row(verdict: IngredientVerdict) -> VerdictRow:
    return VerdictRow(
        ingredient=verdict.ingredient,
        concentration=verdict.concentration,
        status=verdict.status,
        passed=verdict.passed,
    )


def compose_validation(validation: ValidationSession, base_url: str) -> ValidationView:
    outcome = validation.outcome if validation.status is SessionStatus.SUCCESS else None
    if outcome is None:
        return ValidationView(
            formulation_name=validation.formulation_name,
            loading=validation.is_loading,
            error=validation.error_message if validation.status is SessionStatus.ERROR else None,
            rows=(),
            summary=None,
            report_url=None,
            passed_count=0,
            attention_count=0,
        )

    return ValidationView(
        formulation_name=validation.formulation_name,
        loading=False,
        error=None,
        rows=tuple(compose_verdict_row(v) for v in outcome.per_ingredient),
        summary=outcome.narrative_summary,
        report_url=resolve_report_url(base_url, outcome.report_ref),
        passed_count=outcome.passed_count,
        attention_count=outcome.attention_count,
        has_outcome=True,
    )


def compose_progress(narrator: ProgressNarrator | None) -> ProgressView:
    if narrator is None or not narrator.is_active:
        return ProgressView(visible=False, phases=())
    return ProgressView(visible=True, phases=tuple(narrator.visible_messages))


def compose_health(healthy: bool) -> HealthView:
    return HealthView(healthy=healthy, label="Backend online" if healthy else "Backend offline")


def compose_view(
    search: SearchSession,
    expansion: ExpansionTracker,
    validation: ValidationSession,
    narrator: ProgressNarrator | None,
    healthy: bool,
    base_url: str,
) -> ViewModel:
    """Derive the complete display from current state.

    Args:
        search: Search session
        expansion: Expanded result keys
        validation: Validation session
        narrator: Progress narrator (None hides the overlay)
        healthy: Last health snapshot
        base_url: Backend address, used to resolve report links

    Returns:
        Immutable view model
    """
    return ViewModel(
        health=compose_health(healthy),
        search=compose_search(search, expansion),
        validation=compose_validation(validation, base_url),
        progress=compose_progress(narrator),
    )

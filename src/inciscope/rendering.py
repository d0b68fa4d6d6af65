# src/inciscope/rendering.py
"""Rich renderables for view models.

Both the CLI and the TUI display through these functions, so a panel looks
the same whichever surface shows it.
"""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.markdown import Markdown
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from inciscope.theme import (
    ERROR,
    INCI_EMERALD,
    INCI_MINT,
    INCI_SLATE,
    SUCCESS,
    WARNING,
)
from inciscope.view import (
    HealthView,
    ProgressView,
    ResultRow,
    SearchView,
    ValidationView,
)


def render_health(view: HealthView, backend_url: str = "") -> Text:
    """Status line for backend liveness."""
    text = Text()
    if view.healthy:
        text.append(" ● ", style=f"bold {SUCCESS}")
        text.append(view.label, style=SUCCESS)
    else:
        text.append(" ● ", style=f"bold {ERROR}")
        text.append(view.label, style=ERROR)
        text.append("  results may be unavailable", style="dim")
    if backend_url:
        text.append("  |  ", style="dim")
        text.append(backend_url, style=f"{INCI_SLATE} dim")
    return text


def render_error(message: str) -> Text:
    text = Text()
    text.append(" ⚠ ", style=ERROR)
    text.append(message, style=ERROR)
    return text


def render_result_row(row: ResultRow) -> Text:
    """One search result: name line, plus details when expanded."""
    text = Text()
    text.append("▾ " if row.expanded else "▸ ", style="dim")
    text.append(row.display_name or "(unnamed)", style=f"bold {INCI_EMERALD}")
    if not row.expanded:
        return text

    text.append("\n    Source ID: ", style="dim")
    text.append(row.source_id)
    text.append("\n    Functions: ", style="dim")
    text.append(row.functions or "-")
    text.append("\n    Text Score: ", style="dim")
    text.append(row.text_score, style=INCI_SLATE)
    text.append("   Vector Score: ", style="dim")
    text.append(row.vector_score, style=INCI_SLATE)
    text.append("   Combined: ", style="dim")
    text.append(row.combined_score, style=f"bold {INCI_MINT}")
    return text


def render_search_table(view: SearchView, show_details: bool = False) -> Table:
    """Tabular form of the result list, used by the CLI."""
    table = Table(
        title=Text(f"Results for {view.query!r} ({len(view.rows)})"),
        box=None,
        title_style=INCI_EMERALD,
    )
    table.add_column("#", style="dim", justify="right")
    table.add_column("INCI name", style=INCI_EMERALD)
    if show_details:
        table.add_column("Source ID", style="dim")
        table.add_column("Functions")
        table.add_column("Text", justify="right", style=INCI_SLATE)
        table.add_column("Vector", justify="right", style=INCI_SLATE)
    table.add_column("Combined", justify="right", style=f"bold {INCI_MINT}")

    for index, row in enumerate(view.rows, 1):
        # Backend text is never parsed as console markup
        cells: list[RenderableType] = [str(index), Text(row.display_name)]
        if show_details:
            cells += [Text(row.source_id), Text(row.functions), row.text_score, row.vector_score]
        cells.append(row.combined_score)
        table.add_row(*cells)
    return table


def render_progress(view: ProgressView) -> Text:
    """Narrator phases revealed so far; the newest one is highlighted."""
    text = Text()
    for index, message in enumerate(view.phases):
        if index:
            text.append("\n")
        latest = index == len(view.phases) - 1
        text.append(" ⟳ " if latest else " ✓ ", style=INCI_EMERALD if latest else "dim")
        text.append(message, style=INCI_MINT if latest else "dim")
    return text


def render_verdict_table(view: ValidationView) -> Table:
    table = Table(
        title=Text(f"Compliance: {view.formulation_name or 'formulation'}"),
        box=None,
        title_style=INCI_EMERALD,
    )
    table.add_column("Ingredient", style=INCI_SLATE)
    table.add_column("Concentration", justify="right")
    table.add_column("Status")

    for row in view.rows:
        table.add_row(
            Text(row.ingredient),
            Text(row.concentration),
            Text(row.status, style=SUCCESS if row.passed else WARNING),
        )
    return table


def render_validation(view: ValidationView) -> RenderableType:
    """Verdict table, counts, summary, and report link."""
    if view.error:
        return render_error(view.error)
    if not view.has_outcome:
        return Text("Submit a formulation to check compliance.", style="dim")

    parts: list[RenderableType] = [render_verdict_table(view)]

    counts = Text()
    counts.append(f" {view.passed_count} compliant", style=SUCCESS)
    counts.append("  |  ", style="dim")
    counts.append(
        f"{view.attention_count} need attention",
        style=WARNING if view.attention_count else "dim",
    )
    parts.append(counts)

    if view.summary:
        parts.append(
            Panel(
                Markdown(view.summary),
                title="[bold]Summary[/bold]",
                title_align="left",
                border_style=SUCCESS,
                padding=(0, 1),
            )
        )

    if view.report_url:
        link = Text()
        link.append(" Report: ", style="dim")
        link.append(
            view.report_url,
            style=Style(underline=True, color=INCI_SLATE, link=view.report_url),
        )
        parts.append(link)

    return Group(*parts)

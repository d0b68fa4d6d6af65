"""Tests for Rich rendering of view models."""

from rich.console import Console

from inciscope.rendering import (
    render_error,
    render_health,
    render_progress,
    render_result_row,
    render_search_table,
    render_validation,
)
from inciscope.view import (
    HealthView,
    ProgressView,
    ResultRow,
    SearchView,
    ValidationView,
    VerdictRow,
)


def export(renderable) -> str:
    console = Console(record=True, width=120, color_system=None)
    console.print(renderable)
    return console.export_text()


def make_row(expanded: bool = False) -> ResultRow:
    return ResultRow(
        key="1",
        display_name="Water",
        expanded=expanded,
        source_id="1",
        functions="solvent",
        text_score="0.9",
        vector_score="0.8",
        combined_score="0.850",
    )


def make_validation(**overrides) -> ValidationView:
    values = dict(
        formulation_name="Cream",
        loading=False,
        error=None,
        rows=(VerdictRow("Aqua", "40%", "✅ Compliant", True),),
        summary="All **clear**.",
        report_url=None,
        passed_count=1,
        attention_count=0,
        has_outcome=True,
    )
    values.update(overrides)
    return ValidationView(**values)


class TestRenderHealth:
    def test_online(self) -> None:
        text = render_health(HealthView(True, "Backend online"), "http://backend.test")
        assert "Backend online" in text.plain
        assert "http://backend.test" in text.plain

    def test_offline(self) -> None:
        text = render_health(HealthView(False, "Backend offline"))
        assert "Backend offline" in text.plain
        assert "unavailable" in text.plain


class TestRenderResultRow:
    def test_collapsed_shows_name_only(self) -> None:
        plain = render_result_row(make_row()).plain
        assert "Water" in plain
        assert "Source ID" not in plain
        assert plain.startswith("▸")

    def test_expanded_shows_details(self) -> None:
        plain = render_result_row(make_row(expanded=True)).plain
        assert plain.startswith("▾")
        assert "Source ID: 1" in plain
        assert "Functions: solvent" in plain
        assert "Text Score: 0.9" in plain
        assert "Vector Score: 0.8" in plain
        assert "Combined: 0.850" in plain


class TestRenderSearchTable:
    def test_compact(self) -> None:
        view = SearchView("Aqua", False, None, (make_row(),), None)
        output = export(render_search_table(view))
        assert "Water" in output
        assert "0.850" in output
        assert "solvent" not in output

    def test_details(self) -> None:
        view = SearchView("Aqua", False, None, (make_row(),), None)
        output = export(render_search_table(view, show_details=True))
        assert "solvent" in output


class TestRenderProgress:
    def test_phases_in_order(self) -> None:
        plain = render_progress(ProgressView(True, ("Parsing", "Matching"))).plain
        assert plain.index("Parsing") < plain.index("Matching")

    def test_hidden(self) -> None:
        assert render_progress(ProgressView(False, ())).plain == ""


class TestRenderValidation:
    def test_outcome(self) -> None:
        output = export(render_validation(make_validation()))
        assert "Aqua" in output
        assert "40%" in output
        assert "✅ Compliant" in output
        assert "1 compliant" in output
        assert "Summary" in output
        assert "Report:" not in output

    def test_report_link(self) -> None:
        view = make_validation(report_url="http://backend.test/reports/cream.pdf")
        output = export(render_validation(view))
        assert "Report: http://backend.test/reports/cream.pdf" in output

    def test_error(self) -> None:
        output = export(render_validation(make_validation(error="Invalid ingredients", rows=())))
        assert "Invalid ingredients" in output

    def test_no_outcome(self) -> None:
        view = make_validation(rows=(), summary=None, passed_count=0, has_outcome=False)
        assert "Submit a formulation" in export(render_validation(view))

    def test_error_helper(self) -> None:
        assert "boom" in render_error("boom").plain


class TestBackendTextIsLiteral:
    def test_bracketed_name_in_search_table(self) -> None:
        row = ResultRow("1", "TITANIUM DIOXIDE [nano]", False, "1", "", "0.9", "0.8", "0.850")
        view = SearchView("[bold]", False, None, (row,), None)
        output = export(render_search_table(view))
        assert "TITANIUM DIOXIDE [nano]" in output
        assert "[bold]" in output

    def test_closing_tag_in_details(self) -> None:
        row = ResultRow("1", "Odd [/x] name", True, "id[/b]", "[/i] solvent", "0.9", "0.8", "0.850")
        view = SearchView("Aqua", False, None, (row,), None)
        output = export(render_search_table(view, show_details=True))
        assert "Odd [/x] name" in output
        assert "id[/b]" in output
        assert "[/i] solvent" in output

    def test_bracketed_verdict(self) -> None:
        view = make_validation(
            formulation_name="Sunscreen [SPF 50]",
            rows=(VerdictRow("SILICA [nano]", "2% [/w]", "✅ Compliant", True),),
        )
        output = export(render_validation(view))
        assert "SILICA [nano]" in output
        assert "2% [/w]" in output
        assert "Sunscreen [SPF 50]" in output

    def test_report_url_with_space(self) -> None:
        url = "http://backend.test/reports/my cream.pdf"
        output = export(render_validation(make_validation(report_url=url)))
        assert f"Report: {url}" in output


class TestEmptyOutcome:
    def test_completed_without_verdicts(self) -> None:
        view = make_validation(rows=(), summary=None, passed_count=0)
        output = export(render_validation(view))
        assert "Submit a formulation" not in output
        assert "0 compliant" in output

"""Validation report widget."""

from __future__ import annotations

from textual.widgets import Static

from inciscope.rendering import render_validation
from inciscope.view import ValidationView


class ValidationReport(Static):
    """Per-ingredient verdicts, summary, and report link."""

    def show_report(self, view: ValidationView) -> None:
        self.update(render_validation(view))

"""TUI widgets for inciscope."""

from inciscope.tui.widgets.progress import ProgressOverlay
from inciscope.tui.widgets.report import ValidationReport
from inciscope.tui.widgets.results import ResultList, SearchNotice
from inciscope.tui.widgets.search_input import SearchInput
from inciscope.tui.widgets.status_bar import StatusBar

__all__ = [
    "ProgressOverlay",
    "ResultList",
    "SearchInput",
    "SearchNotice",
    "StatusBar",
    "ValidationReport",
]

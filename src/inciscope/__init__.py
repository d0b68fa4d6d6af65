"""inciscope - INCI ingredient search and formulation compliance client.

Quick Start:
    from inciscope import InciClient, Settings

    async with InciClient(Settings(backend_url="http://localhost:8000")) as client:
        await client.search.run_search("Aqua")
        for row in client.view().search.rows:
            print(row.display_name, row.combined_score)

        await client.validation.run_validate("Cream", '{"Aqua": "40%"}')
        print(client.view().validation.summary)
"""

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("inciscope")
except PackageNotFoundError:
    __version__ = "unknown"

from inciscope.client import InciClient
from inciscope.config import load_settings
from inciscope.exceptions import (
    ConfigError,
    DecodeError,
    InciscopeError,
    InputError,
    TransportError,
)
from inciscope.models import (
    IngredientVerdict,
    SearchResultItem,
    ValidationOutcome,
)
from inciscope.sessions import (
    ExpansionTracker,
    HealthMonitor,
    ProgressNarrator,
    SearchSession,
    SessionStatus,
    ValidationSession,
    parse_ingredients,
)
from inciscope.settings import NarratorPhase, Settings
from inciscope.transport import BackendClient, TransportResult
from inciscope.view import ViewModel, compose_view

__all__ = [
    # Version
    "__version__",
    # Central object
    "InciClient",
    # Configuration
    "Settings",
    "NarratorPhase",
    "load_settings",
    # Transport
    "BackendClient",
    "TransportResult",
    # Models
    "SearchResultItem",
    "IngredientVerdict",
    "ValidationOutcome",
    # Sessions
    "SessionStatus",
    "SearchSession",
    "ValidationSession",
    "ExpansionTracker",
    "ProgressNarrator",
    "HealthMonitor",
    "parse_ingredients",
    # View
    "ViewModel",
    "compose_view",
    # Errors
    "InciscopeError",
    "InputError",
    "TransportError",
    "DecodeError",
    "ConfigError",
]

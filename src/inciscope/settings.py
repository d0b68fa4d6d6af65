# src/inciscope/settings.py
"""Runtime settings for inciscope.

Settings are read from ``INCISCOPE_*`` environment variables and a local
``.env`` file. Use ``inciscope.config.load_settings`` to also pick up an
``inciscope.yaml`` file.

Example:
    settings = Settings(backend_url="http://inci.internal:8000")

    # Or from the environment
    #   INCISCOPE_BACKEND_URL=http://inci.internal:8000
    settings = Settings()
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BACKEND_URL = "http://localhost:8000"


class NarratorPhase(BaseModel):
    """One status line shown while a validation call is pending.

    Attributes:
        message: Text shown once the phase activates
        offset: Seconds after the request starts at which the phase appears
    """

    message: str
    offset: float = Field(default=0.0, ge=0.0)


DEFAULT_NARRATOR_PHASES: list[NarratorPhase] = [
    NarratorPhase(message="Parsing formulation...", offset=0.0),
    NarratorPhase(message="Matching ingredients against the INCI database...", offset=1.2),
    NarratorPhase(message="Checking concentration limits and regulatory annexes...", offset=2.4),
    NarratorPhase(message="Compiling compliance report...", offset=3.6),
]


class Settings(BaseSettings):
    """Client settings.

    Attributes:
        backend_url: Base address of the INCI backend
        request_timeout: Seconds before a backend call fails (None = wait forever)
        narrator_phases: Progress messages shown during validation
        log_level: Root log level
        log_file: Optional path for a rotating log file
    """

    model_config = SettingsConfigDict(
        env_prefix="INCISCOPE_",
        env_file=".env",
        extra="ignore",
    )

    backend_url: str = DEFAULT_BACKEND_URL
    request_timeout: float | None = 60.0
    narrator_phases: list[NarratorPhase] = Field(
        default_factory=lambda: [phase.model_copy() for phase in DEFAULT_NARRATOR_PHASES]
    )
    log_level: str = "WARNING"
    log_file: str | None = None

    @field_validator("backend_url", mode="before")
    @classmethod
    def parse_backend_url(cls, v: Any) -> Any:
        # An empty value falls back to the local default
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_BACKEND_URL
        return v.strip().rstrip("/") if isinstance(v, str) else v

    @field_validator("request_timeout", mode="before")
    @classmethod
    def parse_timeout(cls, v: Any) -> Any:
        if v == "" or v is None:
            return None
        return float(v)

    @field_validator("narrator_phases")
    @classmethod
    def sort_phases(cls, v: list[NarratorPhase]) -> list[NarratorPhase]:
        return sorted(v, key=lambda phase: phase.offset)

    @classmethod
    def from_sources(
        cls, file_values: dict[str, Any], explicit: dict[str, Any] | None = None
    ) -> Settings:
        """Merge config-file values underneath the environment and explicit values.

        Args:
            file_values: Values loaded from a config file (lowest precedence)
            explicit: Values passed by the caller (highest precedence)

        Returns:
            Settings instance
        """
        base = cls(**(explicit or {}))
        merged = dict(file_values)
        for name in base.model_fields_set:
            merged[name] = getattr(base, name)
        return cls(**merged)

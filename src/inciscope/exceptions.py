# src/inciscope/exceptions.py
"""Exceptions for inciscope.

Sessions never let these escape their operations: every error is caught at
the session boundary and turned into a user-visible message.
"""

from __future__ import annotations


class InciscopeError(Exception):
    """Base class for all inciscope errors."""


class InputError(InciscopeError):
    """Raised when locally entered data cannot be used (e.g. malformed ingredients)."""


class TransportError(InciscopeError):
    """Raised when a backend call fails.

    Attributes:
        status_code: HTTP status of the response, or None for network failures
            and timeouts.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(TransportError):
    """Raised when a response body is not the structured data we expect."""


class ConfigError(InciscopeError):
    """Raised when a configuration file cannot be loaded."""

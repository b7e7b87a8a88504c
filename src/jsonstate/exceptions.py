"""Custom exception hierarchy for jsonstate.

Tree operations (construction, lookup, merge, aggregation, rendering) never
raise; these exceptions are only used at the I/O and configuration edges.
"""

from __future__ import annotations

from pathlib import Path


class JsonStateError(Exception):
    """Base exception for all jsonstate errors."""


class JsonStateConfigError(JsonStateError):
    """Invalid or missing configuration."""


class OverrideLoadError(JsonStateError):
    """An override document could not be read, parsed or validated."""

    def __init__(self, message: str, *, path: str | Path = "") -> None:
        self.path = str(path)
        super().__init__(message)

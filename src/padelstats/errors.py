"""Error types raised by the analysis ingestion pipeline."""

from __future__ import annotations

from typing import Any


class PadelStatsError(Exception):
    """Base class for errors raised by padelstats."""


class MalformedMetricError(PadelStatsError, ValueError):
    """A single metric value could not be parsed into a canonical quantity."""

    def __init__(self, field: str, value: Any, reason: str | None = None):
        self.field = field
        self.value = value
        self.reason = reason
        message = f"metric {field!r} has malformed value {value!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class MissingRequiredContextError(PadelStatsError, ValueError):
    """The formatter was called without a required identifier."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"{identifier} is required to format an analysis response")


class EmptyPayloadWarning(UserWarning):
    """Issued when a payload carries no players or no clips. Not an error."""

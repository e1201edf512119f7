"""Canonical models shared across ingestion, formatting and the API."""

from .envelope import AnalyticsEnvelope, FormattedResponse, PlayerAnalytics
from .player import CanonicalPlayerRecord

__all__ = [
    "AnalyticsEnvelope",
    "CanonicalPlayerRecord",
    "FormattedResponse",
    "PlayerAnalytics",
]

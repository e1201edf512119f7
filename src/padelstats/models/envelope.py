"""Envelope models wrapping per-player records and clip groups."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from .player import CanonicalPlayerRecord


class PlayerAnalytics(BaseModel):
    players: List[CanonicalPlayerRecord] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class AnalyticsEnvelope(BaseModel):
    """Top-level result of transforming one analysis job."""

    job_id: Optional[str] = None
    status: Optional[str] = None
    analysis_status: Optional[str] = None
    player_analytics: PlayerAnalytics = Field(default_factory=PlayerAnalytics)
    highlights: Dict[str, List[str]] = Field(default_factory=dict)
    match_id: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class FormattedResponse(AnalyticsEnvelope):
    """Envelope with caller context attached, ready for storage and delivery."""

    match_id: str = Field(..., min_length=1)
    user_id: str = Field(..., min_length=1)

    model_config = ConfigDict(frozen=False)

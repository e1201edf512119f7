"""Canonical per-player analytics record."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class CanonicalPlayerRecord(BaseModel):
    """Normalized metrics for one tracked player.

    Percentages are bounded below only; upstream occasionally reports values
    above 100 and those are kept as-is.
    """

    player_id: str = Field(..., min_length=1)
    total_distance_km: float = Field(..., ge=0.0)
    average_speed_kmh: float = Field(..., ge=0.0)
    peak_speed_kmh: float = Field(..., ge=0.0)
    net_dominance_percentage: float = Field(..., ge=0.0)
    dead_zone_presence_percentage: float = Field(..., ge=0.0)
    baseline_play_percentage: float = Field(..., ge=0.0)
    total_sprint_bursts: int = Field(..., ge=0)
    calories_burned: float = Field(..., ge=0.0)
    player_heatmap: Optional[str] = None

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

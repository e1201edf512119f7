"""Metric field table for the upstream analysis payload."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Union

CLIPS_KEY = "all_clips"
HIGHLIGHTS_GROUP = "all"

UNIT_DISTANCE = "distance"
UNIT_SPEED = "speed"
UNIT_PERCENTAGE = "percentage"
UNIT_COUNT = "count"
UNIT_URL = "url"


@dataclass(frozen=True)
class MetricSpec:
    raw_name: str
    field: str
    unit: str
    required: bool = False
    default: Optional[Union[int, float]] = 0


_METRIC_SPECS: Dict[str, MetricSpec] = {
    spec.raw_name.lower(): spec
    for spec in (
        MetricSpec("Distance Covered", "total_distance_km", UNIT_DISTANCE, required=True, default=0.0),
        MetricSpec("Average Speed", "average_speed_kmh", UNIT_SPEED, required=True, default=0.0),
        MetricSpec("Peak Speed", "peak_speed_kmh", UNIT_SPEED, default=0.0),
        MetricSpec("Net Dominance", "net_dominance_percentage", UNIT_PERCENTAGE, default=0.0),
        MetricSpec("Dead Zone Presence", "dead_zone_presence_percentage", UNIT_PERCENTAGE, default=0.0),
        MetricSpec("Baseline Play", "baseline_play_percentage", UNIT_PERCENTAGE, default=0.0),
        MetricSpec("Total Sprint Bursts", "total_sprint_bursts", UNIT_COUNT, default=0),
        MetricSpec("Player Heatmap", "player_heatmap", UNIT_URL, default=None),
    )
}


def _metric_token(name: str) -> str:
    return " ".join(name.split()).lower()


def iter_metric_specs() -> Iterable[MetricSpec]:
    """Return an iterator of all recognized metric specs."""

    return _METRIC_SPECS.values()


def get_metric_spec(raw_name: str) -> Optional[MetricSpec]:
    """Look up the spec for an upstream metric name, ignoring case and spacing."""

    if not isinstance(raw_name, str):
        return None
    return _METRIC_SPECS.get(_metric_token(raw_name))


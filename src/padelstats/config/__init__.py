"""Configuration for metric fields and runtime defaults."""

from .metrics import (
    CLIPS_KEY,
    HIGHLIGHTS_GROUP,
    UNIT_COUNT,
    UNIT_DISTANCE,
    UNIT_PERCENTAGE,
    UNIT_SPEED,
    UNIT_URL,
    MetricSpec,
    get_metric_spec,
    iter_metric_specs,
)
from .settings import DEFAULT_BODY_MASS_KG, default_body_mass_kg

__all__ = [
    "CLIPS_KEY",
    "DEFAULT_BODY_MASS_KG",
    "HIGHLIGHTS_GROUP",
    "UNIT_COUNT",
    "UNIT_DISTANCE",
    "UNIT_PERCENTAGE",
    "UNIT_SPEED",
    "UNIT_URL",
    "MetricSpec",
    "default_body_mass_kg",
    "get_metric_spec",
    "iter_metric_specs",
]

"""Build canonical player records from raw per-player metric maps."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from padelstats.config import UNIT_URL, MetricSpec, default_body_mass_kg, get_metric_spec, iter_metric_specs
from padelstats.energy import estimate_calories
from padelstats.errors import MalformedMetricError
from padelstats.ingest.quantities import parse_quantity
from padelstats.models import CanonicalPlayerRecord


logger = logging.getLogger(__name__)


def _parse_heatmap(value: Any) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        logger.warning("Ignoring non-string heatmap value %r", value)
        return None
    return value if value.strip() else None


def _resolve_metric(player_id: str, spec: MetricSpec, raw: Any) -> Any:
    if spec.unit == UNIT_URL:
        return _parse_heatmap(raw)
    try:
        return parse_quantity(spec.raw_name, raw, expected=spec.unit)
    except MalformedMetricError:
        if spec.required:
            raise
        logger.warning(
            "Player %s: unparsable %s value %r, defaulting to %r",
            player_id,
            spec.raw_name,
            raw,
            spec.default,
        )
        return spec.default


def normalize_player(
    player_id: str,
    raw_metrics: Mapping[str, Any],
    *,
    body_mass_kg: float | None = None,
) -> CanonicalPlayerRecord:
    """Convert one player's raw metric map into a ``CanonicalPlayerRecord``.

    Distance and average speed feed the calorie estimate, so a malformed value
    for either raises ``MalformedMetricError``. Other malformed metrics fall
    back to their defaults. ``body_mass_kg`` defaults to
    ``default_body_mass_kg()``.
    """

    values: Dict[str, Any] = {}
    for raw_name, raw in raw_metrics.items():
        spec = get_metric_spec(raw_name)
        if spec is None:
            logger.debug("Player %s: ignoring unknown metric %r", player_id, raw_name)
            continue
        values[spec.field] = _resolve_metric(player_id, spec, raw)

    for spec in iter_metric_specs():
        if spec.field in values:
            continue
        if spec.required:
            logger.warning("Player %s: %s missing, defaulting to %r", player_id, spec.raw_name, spec.default)
        values[spec.field] = spec.default

    values["calories_burned"] = estimate_calories(
        values["total_distance_km"],
        values["average_speed_kmh"],
        values["total_sprint_bursts"],
        body_mass_kg if body_mass_kg is not None else default_body_mass_kg(),
    )
    return CanonicalPlayerRecord(player_id=player_id, **values)

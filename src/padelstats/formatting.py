"""Final response assembly and migration of older envelope shapes."""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, Mapping

from padelstats.config import default_body_mass_kg, iter_metric_specs
from padelstats.energy import estimate_calories
from padelstats.errors import MissingRequiredContextError
from padelstats.ingest.results import RawAnalysisPayload, looks_like_raw_payload, transform_analysis_results
from padelstats.models import AnalyticsEnvelope, FormattedResponse


logger = logging.getLogger(__name__)


def _missing(player: Mapping[str, Any], field: str) -> bool:
    return player.get(field) is None


def _needs_calories(player: Mapping[str, Any]) -> bool:
    # Records written before the calorie model carry a placeholder 0.
    calories = player.get("calories_burned")
    if calories is None:
        return True
    return calories == 0 and (player.get("total_distance_km") or 0) > 0


def _migrate_player(player: Dict[str, Any], *, body_mass_kg: float) -> Dict[str, Any]:
    if _needs_calories(player):
        player["calories_burned"] = estimate_calories(
            player.get("total_distance_km") or 0,
            player.get("average_speed_kmh") or 0,
            player.get("total_sprint_bursts") or 0,
            body_mass_kg,
        )
        logger.debug("Recomputed calories for legacy player %s", player.get("player_id"))
    if _missing(player, "peak_speed_kmh"):
        player["peak_speed_kmh"] = player.get("average_speed_kmh") or 0
    for spec in iter_metric_specs():
        if _missing(player, spec.field):
            player[spec.field] = spec.default
    return player


def migrate_envelope(envelope: Mapping[str, Any], *, body_mass_kg: float | None = None) -> Dict[str, Any]:
    """Bring a stored or legacy envelope up to the current shape.

    Returns a new dict; the input is left untouched. Fields that are already
    present are never re-derived, except a placeholder ``calories_burned`` of 0
    next to a positive distance. Recomputing is deterministic, so migrating
    twice is a no-op.
    """

    if body_mass_kg is None:
        body_mass_kg = default_body_mass_kg()
    migrated = copy.deepcopy(dict(envelope))

    analytics = migrated.get("player_analytics") or {}
    players = analytics.get("players") or []
    migrated["player_analytics"] = {
        **analytics,
        "players": [
            _migrate_player(dict(player), body_mass_kg=body_mass_kg)
            for player in players
        ],
    }

    if migrated.get("highlights") is None:
        legacy_files = migrated.get("files") or {}
        migrated["highlights"] = dict(legacy_files.get("highlights") or {})
    return migrated


def _as_mapping(data: Any, *, body_mass_kg: float | None) -> Dict[str, Any]:
    if isinstance(data, AnalyticsEnvelope):
        return data.model_dump()
    if isinstance(data, RawAnalysisPayload) or looks_like_raw_payload(data):
        return transform_analysis_results(data, body_mass_kg=body_mass_kg).model_dump()
    if isinstance(data, Mapping):
        return dict(data)
    raise TypeError(f"cannot format analysis data of type {type(data).__name__}")


def format_response(
    data: AnalyticsEnvelope | RawAnalysisPayload | Mapping[str, Any],
    match_id: str | None = None,
    user_id: str | None = None,
    *,
    body_mass_kg: float | None = None,
) -> FormattedResponse:
    """Attach caller context to an analysis result and fill legacy gaps.

    ``data`` may be a raw service payload, a fresh envelope or a previously
    formatted response. Identifiers not passed explicitly are taken from
    ``data`` when it already carries them.

    Raises:
        MissingRequiredContextError: no ``match_id`` or ``user_id`` available.
    """

    if body_mass_kg is None:
        body_mass_kg = default_body_mass_kg()
    migrated = migrate_envelope(_as_mapping(data, body_mass_kg=body_mass_kg), body_mass_kg=body_mass_kg)

    match_id = match_id or migrated.get("match_id")
    if not match_id:
        raise MissingRequiredContextError("match_id")
    user_id = user_id or migrated.get("user_id")
    if not user_id:
        raise MissingRequiredContextError("user_id")

    migrated["match_id"] = match_id
    migrated["user_id"] = user_id
    return FormattedResponse.model_validate(migrated)

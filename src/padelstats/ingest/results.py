"""Transform raw analysis-service payloads into analytics envelopes."""

from __future__ import annotations

import logging
import warnings
from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from padelstats.config import CLIPS_KEY, HIGHLIGHTS_GROUP, default_body_mass_kg
from padelstats.errors import EmptyPayloadWarning, MalformedMetricError
from padelstats.ingest.players import normalize_player
from padelstats.models import AnalyticsEnvelope, CanonicalPlayerRecord, PlayerAnalytics


logger = logging.getLogger(__name__)


class RawAnalysisPayload(BaseModel):
    """Payload as delivered by the analysis service once a job completes."""

    status: Optional[str] = None
    job_id: Optional[str] = None
    analysis_status: Optional[str] = None
    results: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(extra="allow")

    def player_entries(self) -> List[Tuple[str, Any]]:
        """Player keys and their raw metrics, in delivery order, without the clips key."""

        return [(key, value) for key, value in self.results.items() if key != CLIPS_KEY]

    def clip_urls(self) -> List[str]:
        raw = self.results.get(CLIPS_KEY)
        if raw is None:
            return []
        if not isinstance(raw, list) or not all(isinstance(url, str) for url in raw):
            logger.warning("Job %s: ignoring malformed %s value %r", self.job_id, CLIPS_KEY, raw)
            return []
        return list(raw)


def looks_like_raw_payload(data: Any) -> bool:
    """True for service payloads that still need transforming."""

    return isinstance(data, Mapping) and "results" in data and "player_analytics" not in data


def transform_analysis_results(
    payload: RawAnalysisPayload | Mapping[str, Any],
    *,
    body_mass_kg: float | None = None,
) -> AnalyticsEnvelope:
    """Build the analytics envelope for one completed job.

    Raises ``MalformedMetricError`` when a player's distance or average speed
    cannot be parsed, which should fail the job as a whole.
    """

    if not isinstance(payload, RawAnalysisPayload):
        payload = RawAnalysisPayload.model_validate(payload)
    if body_mass_kg is None:
        body_mass_kg = default_body_mass_kg()

    players: List[CanonicalPlayerRecord] = []
    for player_key, raw_metrics in payload.player_entries():
        if not isinstance(raw_metrics, Mapping):
            raise MalformedMetricError(player_key, raw_metrics, "player metrics must be a mapping")
        players.append(normalize_player(player_key, raw_metrics, body_mass_kg=body_mass_kg))

    clips = payload.clip_urls()
    highlights: Dict[str, List[str]] = {HIGHLIGHTS_GROUP: clips} if clips else {}

    if not players:
        warnings.warn(f"job {payload.job_id} has no players", EmptyPayloadWarning, stacklevel=2)
    if not clips:
        warnings.warn(f"job {payload.job_id} has no clips", EmptyPayloadWarning, stacklevel=2)

    logger.info(
        "Transformed job %s: %d players, %d clips",
        payload.job_id,
        len(players),
        len(clips),
    )
    return AnalyticsEnvelope(
        job_id=payload.job_id,
        status=payload.analysis_status or payload.status,
        analysis_status=payload.analysis_status,
        player_analytics=PlayerAnalytics(players=players),
        highlights=highlights,
    )

"""Input adapters that normalize raw analysis-service payloads."""

from .players import normalize_player
from .quantities import format_quantity, parse_quantity, split_quantity
from .results import RawAnalysisPayload, looks_like_raw_payload, transform_analysis_results

__all__ = [
    "RawAnalysisPayload",
    "format_quantity",
    "looks_like_raw_payload",
    "normalize_player",
    "parse_quantity",
    "split_quantity",
    "transform_analysis_results",
]

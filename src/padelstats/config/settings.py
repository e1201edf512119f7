"""Environment-driven settings."""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

_BODY_MASS_ENV = "PADELSTATS_BODY_MASS_KG"
DEFAULT_BODY_MASS_KG = 80.0


def _env_float(name: str, default: float, *, clamp_min: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    return value


def default_body_mass_kg() -> float:
    """Body mass used for calorie estimates when no profile value is supplied."""

    return _env_float(_BODY_MASS_ENV, DEFAULT_BODY_MASS_KG, clamp_min=1.0)

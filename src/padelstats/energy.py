"""Calorie estimates derived from movement metrics.

Calories = distance_km x body_mass_kg x 0.9 x intensity multiplier
           + 5 per sprint burst

The multiplier is chosen from the player's average speed. No per-user profile
data is available here, so callers resolve body mass (see
``padelstats.config.default_body_mass_kg``) and pass it in. Without one the
estimate uses 80 kg.
"""

from __future__ import annotations

import math
from typing import Optional, Tuple

from padelstats.config import DEFAULT_BODY_MASS_KG

RUNNING_COEFFICIENT = 0.9
SPRINT_BONUS_KCAL = 5

# (lower bound km/h inclusive, multiplier, label), ascending.
INTENSITY_TIERS: Tuple[Tuple[float, float, str], ...] = (
    (0.0, 1.2, "light"),
    (3.0, 1.5, "moderate"),
    (5.0, 1.8, "vigorous"),
    (7.0, 2.2, "high"),
)


def _magnitude(value: Optional[float]) -> float:
    # Integers beyond float range saturate instead of raising.
    try:
        return float(value or 0)
    except OverflowError:
        return math.inf


def _tier(average_speed_kmh: Optional[float]) -> Tuple[float, float, str]:
    speed = average_speed_kmh or 0.0
    selected = INTENSITY_TIERS[0]
    for tier in INTENSITY_TIERS:
        if speed >= tier[0]:
            selected = tier
    return selected


def intensity_multiplier(average_speed_kmh: Optional[float]) -> float:
    return _tier(average_speed_kmh)[1]


def intensity_level(average_speed_kmh: Optional[float]) -> str:
    """Return the tier label (light, moderate, vigorous or high)."""

    return _tier(average_speed_kmh)[2]


def estimate_calories(
    distance_km: Optional[float],
    average_speed_kmh: Optional[float],
    sprint_count: Optional[int] = 0,
    body_mass_kg: Optional[float] = None,
) -> float:
    """Estimate calories burned during a match, rounded to 2 decimals.

    Returns exactly 0 when distance is missing or not positive. Inputs too
    large for a float give an infinite estimate.
    """

    if not distance_km or distance_km <= 0:
        return 0.0
    mass = body_mass_kg if body_mass_kg is not None else DEFAULT_BODY_MASS_KG
    base = _magnitude(distance_km) * mass * RUNNING_COEFFICIENT * intensity_multiplier(average_speed_kmh)
    bonus = _magnitude(sprint_count) * SPRINT_BONUS_KCAL
    return round(base + bonus, 2)

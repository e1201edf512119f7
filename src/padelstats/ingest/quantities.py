"""Parse unit-suffixed metric strings into canonical magnitudes.

Upstream values look like ``"25.586 Meters"``, ``"14.47575 Kilometers per Hour"``,
``"42.1%"`` or ``"4"``. Every magnitude is converted to kilometers, km/h, a bare
percentage or an integer count. Earlier upstream releases reported miles and
miles per hour; those units are still accepted.
"""

from __future__ import annotations

import math
import re
from typing import Any, Callable, List, Optional, Tuple, Union

from padelstats.config import UNIT_COUNT, UNIT_DISTANCE, UNIT_PERCENTAGE, UNIT_SPEED
from padelstats.errors import MalformedMetricError

Number = Union[int, float]

_KM_PER_MILE = 1.609344

_QUANTITY_PATTERN = re.compile(r"^(?P<number>\d+(?:\.\d+)?)(?:\s*(?P<unit>[A-Za-z%/].*))?$")

_UNIT_ALIASES: List[Tuple[Tuple[str, ...], str, Callable[[float], float]]] = [
    (("kilometers per hour", "kilometer per hour", "km/h", "kmh"), UNIT_SPEED, lambda v: v),
    (("miles per hour", "mile per hour", "mph"), UNIT_SPEED, lambda v: v * _KM_PER_MILE),
    (("kilometers", "kilometer", "km"), UNIT_DISTANCE, lambda v: v),
    (("meters", "meter", "m"), UNIT_DISTANCE, lambda v: v / 1000),
    (("miles", "mile"), UNIT_DISTANCE, lambda v: v * _KM_PER_MILE),
    (("%",), UNIT_PERCENTAGE, lambda v: v),
]

# Longest keyword first so "kilometers" is never matched as "meters".
_UNIT_TABLE: List[Tuple[str, str, Callable[[float], float]]] = sorted(
    (
        (alias, family, convert)
        for aliases, family, convert in _UNIT_ALIASES
        for alias in aliases
    ),
    key=lambda entry: len(entry[0]),
    reverse=True,
)


def split_quantity(value: str) -> Tuple[str, str]:
    """Split ``value`` into its numeric token and normalized unit text."""

    match = _QUANTITY_PATTERN.match(value.strip())
    if not match:
        raise ValueError(f"{value!r} is not a number followed by a unit")
    unit = " ".join((match.group("unit") or "").split()).lower()
    return match.group("number"), unit


def _resolve_unit(unit: str) -> Optional[Tuple[str, Callable[[float], float]]]:
    for keyword, family, convert in _UNIT_TABLE:
        if unit == keyword or unit.endswith(" " + keyword) or (keyword == "%" and unit.endswith("%")):
            return family, convert
    return None


def _check_family(field: str, value: Any, family: str, expected: Optional[str]) -> None:
    if expected is not None and family != expected:
        raise MalformedMetricError(field, value, f"expected a {expected} value, got {family}")


def _bounded_count(field: str, value: Any, count: int) -> int:
    try:
        float(count)
    except OverflowError:
        raise MalformedMetricError(field, value, "value is out of range") from None
    return count


def _from_number(field: str, value: Number, expected: Optional[str]) -> int:
    # Without a unit a number can only be a count, same as a bare digit string.
    _check_family(field, value, UNIT_COUNT, expected)
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise MalformedMetricError(field, value, "count must be a whole number")
        value = int(value)
    if value < 0:
        raise MalformedMetricError(field, value, "count must not be negative")
    return _bounded_count(field, value, value)


def parse_quantity(field: str, value: Any, *, expected: Optional[str] = None) -> Number:
    """Return ``value`` as a magnitude in canonical units.

    ``field`` is only used for diagnostics. ``expected`` optionally names the
    unit family the value must belong to. Values without a unit, whether
    digit strings or JSON numbers, are counts.

    Raises:
        MalformedMetricError: the value is not numeric, carries an unknown
            unit, is too large, or belongs to a different unit family than
            ``expected``.
    """

    if isinstance(value, bool):
        raise MalformedMetricError(field, value, "boolean is not a quantity")
    if isinstance(value, (int, float)):
        return _from_number(field, value, expected)
    if not isinstance(value, str):
        raise MalformedMetricError(field, value, "expected a string")

    try:
        number, unit = split_quantity(value)
    except ValueError:
        raise MalformedMetricError(field, value, "not a number followed by a unit") from None

    if not unit:
        if "." in number:
            raise MalformedMetricError(field, value, "count must be a whole number")
        _check_family(field, value, UNIT_COUNT, expected)
        try:
            count = int(number)
        except ValueError:
            raise MalformedMetricError(field, value, "value is out of range") from None
        return _bounded_count(field, value, count)

    resolved = _resolve_unit(unit)
    if resolved is None:
        raise MalformedMetricError(field, value, f"unrecognized unit {unit!r}")
    family, convert = resolved
    _check_family(field, value, family, expected)
    magnitude = convert(float(number))
    if not math.isfinite(magnitude):
        raise MalformedMetricError(field, value, "value is out of range")
    return magnitude


def _plain(value: float) -> str:
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return text or "0"


def format_quantity(magnitude: Number, family: str) -> str:
    """Render a canonical magnitude in the upstream string format."""

    if family == UNIT_DISTANCE:
        return f"{_plain(magnitude * 1000)} Meters"
    if family == UNIT_SPEED:
        return f"{_plain(magnitude)} Kilometers per Hour"
    if family == UNIT_PERCENTAGE:
        return f"{_plain(magnitude)}%"
    if family == UNIT_COUNT:
        return str(int(magnitude))
    raise ValueError(f"unsupported unit family {family!r}")

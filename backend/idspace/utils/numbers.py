"""Lenient number coercion for ids and pagination parameters.

JSON clients send ids as numbers, numeric strings or floats with an integral
value (``1000001.0``). These helpers turn such loose input into Python numbers
without raising, leaving the decision about invalid values to the caller.
"""

import math


def coerce_number(value: object) -> float:
    """Convert a loosely typed value to a float.

    ``None`` and blank strings become ``0``, booleans become ``0``/``1``,
    numeric strings are parsed. Anything else yields ``nan``.
    """
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, int):
        # ints beyond float range
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, float):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            return float(text)
        except ValueError:
            return math.nan
    return math.nan


def is_positive_integer(value: float) -> bool:
    """True for finite, integral values greater than zero."""
    return math.isfinite(value) and value.is_integer() and value > 0


def coerce_id(value: object) -> int | None:
    """Coerce a value to an integer id, or ``None`` if it cannot be one."""
    number = coerce_number(value)
    if not is_positive_integer(number):
        return None
    return int(number)


def parse_count(value: object, default: int) -> int:
    """Parse a non-negative count such as ``offset`` or ``limit``.

    Missing, non-numeric and negative values fall back to ``default``;
    fractional values are truncated.
    """
    if value is None:
        return default
    number = coerce_number(value)
    if not math.isfinite(number) or number < 0:
        return default
    return int(number)

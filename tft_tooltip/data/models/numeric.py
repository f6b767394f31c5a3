"""Lenient numeric coercion for upstream game-data exports."""

import math
from typing import Any, Optional


def to_number(value: Any, default: float = 0.0) -> float:
    """Coerce a raw export value to a finite float.

    Numeric strings are parsed; booleans, None, NaN, infinities and anything
    unparseable become ``default``.
    """
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return default
    else:
        return default
    if math.isnan(number) or math.isinf(number):
        return default
    return number


def to_optional_number(value: Any) -> Optional[float]:
    """Like ``to_number`` but keeps "absent" distinguishable from zero."""
    if isinstance(value, bool) or value is None:
        return None
    number = to_number(value, default=math.nan)
    return None if math.isnan(number) else number


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity.

    Matches how the site has always displayed numbers (``Math.round``), which
    differs from Python's banker's rounding at exact halves.
    """
    return math.floor(value + 0.5)


def format_number(value: float) -> str:
    """Render 25.0 as "25" and 0.5 as "0.5"."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"

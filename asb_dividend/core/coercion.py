"""Free-text numeric coercion for calculator fields."""

from __future__ import annotations

import math
import re
from typing import Any

# longest leading decimal literal, optional sign and exponent
_NUMBER_PREFIX = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(raw: Any, fallback: float) -> float:
    """Coerce a form value to a float, or ``fallback`` when it is unusable.

    Strings are read by their leading numeric prefix ("12abc" -> 12.0).
    Missing, empty, non-numeric, non-finite and zero values all give ``fallback``.
    """
    if raw is None or isinstance(raw, bool):
        return fallback

    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            # integer beyond float range
            value = math.inf
    elif isinstance(raw, str):
        match = _NUMBER_PREFIX.match(raw.strip())
        if not match:
            return fallback
        value = float(match.group(0))
    else:
        return fallback

    if not math.isfinite(value) or value == 0:
        return fallback
    return value


def to_period_years(value: float) -> int:
    """Whole years of a (possibly fractional) horizon, truncated toward zero."""
    return int(value)

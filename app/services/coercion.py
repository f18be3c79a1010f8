from __future__ import annotations

import math
from decimal import Decimal
from typing import Any


def coerce_grade(v: Any) -> float | None:
    """Parse a stored or submitted grade into a finite float.

    Returns ``None`` for anything that is not a number: missing values,
    booleans, blank or unparsable strings, containers, NaN and infinities.
    """
    if v is None or isinstance(v, bool):
        return None
    if isinstance(v, (int, float, Decimal)):
        try:
            value = float(v)
        except (OverflowError, ValueError):
            return None
    elif isinstance(v, str):
        text = v.strip()
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(value):
        return None
    return value


def average(values: list[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


def student_id_or_none(v: Any) -> str | None:
    if v is None:
        return None
    if isinstance(v, str):
        return v
    if isinstance(v, Decimal) and v == v.to_integral_value():
        return str(int(v))
    return str(v)

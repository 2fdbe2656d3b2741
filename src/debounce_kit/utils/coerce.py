"""Lenient coercion of user-supplied option values."""

from __future__ import annotations

import math
from typing import Any


def to_number(value: Any) -> float:
    """
    Coerce a value to a float.

    Anything that cannot be read as a number (None, junk strings, objects
    without ``__float__``) and NaN become 0. Infinity is kept.
    """
    if value is None:
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    if math.isnan(number):
        return 0.0
    return number


def to_delay(value: Any) -> float:
    """Coerce a value to a non-negative delay in milliseconds."""
    return max(to_number(value), 0.0)


def to_flag(value: Any) -> bool:
    """Truthiness of a value."""
    return bool(value)

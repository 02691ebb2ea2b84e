"""
Helper functions for loosely-typed input coercion.

Request values often arrive from forms, query strings or JSON bodies as
strings, floats or booleans. These helpers turn them into integers
(e.g. amounts in cents) in one predictable way:

- bool -> 0 or 1
- int -> unchanged
- float / Decimal -> value truncated toward zero
- numeric string ("12", " 12.9 ", "-3", "1e3") -> its value truncated toward zero
- anything else -> not coercible

Usage:
    from core.helpers import to_int, to_strict_int

    to_int("250")         # 250
    to_int("abc")         # 0
    to_int(None, -1)      # -1
    to_strict_int("abc")  # raises ValueError
"""

from __future__ import annotations

import math
import re
from decimal import Decimal, InvalidOperation
from typing import Any

_NUMERIC_STRING = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")


def to_strict_int(value: Any) -> int:
    """
    Coerce a value to an integer, rejecting anything non-numeric.

    Args:
        value: Value to coerce

    Returns:
        The integer value (truncated toward zero for fractional input)

    Raises:
        ValueError: If the value is not numeric

    Example:
        to_strict_int(12.7)    # 12
        to_strict_int("-1.5")  # -1
        to_strict_int("1e3")   # 1000
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"Cannot coerce {value!r} to int")
        return math.trunc(value)
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"Cannot coerce {value!r} to int")
        return math.trunc(value)
    if isinstance(value, str):
        text = value.strip()
        if _NUMERIC_STRING.match(text):
            try:
                return math.trunc(Decimal(text))
            except InvalidOperation:
                pass
    raise ValueError(f"Cannot coerce {value!r} to int")


def to_int(value: Any, default: int = 0) -> int:
    """
    Coerce a value to an integer, falling back to a default.

    Args:
        value: Value to coerce
        default: Returned when the value is not numeric (default: 0)

    Returns:
        The integer value, or default
    """
    try:
        return to_strict_int(value)
    except ValueError:
        return default

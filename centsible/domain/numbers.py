"""Numeric helpers shared by the currency and calculation modules.

All rounding in centsible is half away from zero, applied to the decimal
value of the input rather than its binary float approximation.
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from numbers import Real
from typing import Any

from centsible.errors import InvalidArgumentError

Number = int | float | Decimal


def is_finite_number(value: Any) -> bool:
    """Check for an int, float or Decimal that is not NaN or infinite.

    Booleans are rejected even though bool is an int subclass.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, Real):
        return math.isfinite(value)
    return False


def require_finite(value: Any, name: str) -> Number:
    """Return value unchanged, or raise InvalidArgumentError if it is not a finite number."""
    if not is_finite_number(value):
        raise InvalidArgumentError(f"Invalid input: {name} must be a finite number", field=name)
    return value


def to_decimal(value: Number) -> Decimal:
    """Convert a finite number to Decimal using its shortest repr for floats."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def round_half_away(value: Number) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(to_decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def percentage_of(part: Number, whole: Number) -> int:
    """Rounded percentage of part over whole. Caller guarantees whole != 0."""
    return round_half_away(to_decimal(part) / to_decimal(whole) * 100)


def add_amounts(a: Number, b: Number) -> Number:
    """Sum two finite numbers, promoting to Decimal when either side is one."""
    if isinstance(a, Decimal) or isinstance(b, Decimal):
        return to_decimal(a) + to_decimal(b)
    return a + b


def subtract_amounts(a: Number, b: Number) -> Number:
    """Difference a - b, promoting to Decimal when either side is one."""
    if isinstance(a, Decimal) or isinstance(b, Decimal):
        return to_decimal(a) - to_decimal(b)
    return a - b

"""Value predicates shared by the built-in validators."""

import math
from numbers import Number
from typing import Any


def is_number(value: Any) -> bool:
    """True for real numbers, excluding booleans."""
    return isinstance(value, Number) and not isinstance(value, bool)


def is_nan(value: Any) -> bool:
    """True only for a numeric NaN; the string "NaN" is not NaN."""
    if not is_number(value):
        return False
    try:
        return math.isnan(value)
    except (TypeError, ValueError):
        return False


def not_null(value: Any) -> bool:
    """True if the value is not None, not the empty string and not NaN."""
    return value is not None and not (isinstance(value, str) and value == "") and not is_nan(value)


def is_empty(value: Any) -> bool:
    return not not_null(value)

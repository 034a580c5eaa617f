"""Built-in field validators.

Each validator is a stateless object with a ``name`` (the key used in
constraint maps) and a pure ``validate(value, params)`` predicate. Apart
from Required, every validator treats an empty value as valid so that
optional fields only fail on content that is actually present.
"""

import re
from datetime import date, datetime, timezone
from typing import Any, Mapping, Protocol, runtime_checkable

from fieldcheck.config import get_settings
from fieldcheck.utils.values import is_empty, is_nan, is_number, not_null


@runtime_checkable
class Validator(Protocol):
    """Common interface for all field validators.

    Example:
        validator: Validator = SizeValidator()
        validator.validate("abc", {"min": 2, "max": 4})
    """

    name: str

    def validate(self, value: Any, params: Mapping[str, Any]) -> bool:
        """Check a single value against one constraint's parameters.

        Args:
            value: The field value
            params: Constraint parameters (``min``, ``max``, ``message``, ...)

        Returns:
            True if the value satisfies the constraint
        """
        ...


def _to_float(value: Any) -> float:
    """Coerce like a numeric form input: NaN when the value is not numeric."""
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return float("nan")


def _bound(params: Mapping[str, Any], key: str = "value") -> float:
    raw = params.get(key)
    bound = _to_float(raw) if raw is not None else float("nan")
    if is_nan(bound):
        raise ValueError(f"Constraint parameter '{key}' must be numeric, got {raw!r}")
    return bound


def _count(params: Mapping[str, Any], key: str) -> int | None:
    """Read an optional non-negative integer parameter such as ``min`` or ``integer``."""
    raw = params.get(key)
    if raw is None:
        return None
    if isinstance(raw, bool) or (isinstance(raw, float) and not raw.is_integer()):
        raise ValueError(f"Constraint parameter '{key}' must be an integer, got {raw!r}")
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValueError(f"Constraint parameter '{key}' must be an integer, got {raw!r}") from None


class RequiredValidator:
    """Fails for None, the empty string and NaN."""

    name = "Required"

    def validate(self, value: Any, params: Mapping[str, Any]) -> bool:
        return not_null(value)


class SizeValidator:
    """Length of the value must lie within [min, max]."""

    name = "Size"

    def validate(self, value: Any, params: Mapping[str, Any]) -> bool:
        min_length = _count(params, "min") or 0
        max_length = _count(params, "max")

        if value is None:
            value = ""
        elif not hasattr(value, "__len__"):
            value = str(value)

        length = len(value)
        return length >= min_length and (max_length is None or length <= max_length)


class MinValidator:
    """Numeric value must be at least ``value``.

    A NaN value is invalid even though Required would call it empty.
    """

    name = "Min"

    def validate(self, value: Any, params: Mapping[str, Any]) -> bool:
        if is_nan(value):
            return False
        if is_empty(value):
            return True
        return _to_float(value) >= _bound(params)


class MaxValidator:
    """Numeric value must be at most ``value``."""

    name = "Max"

    def validate(self, value: Any, params: Mapping[str, Any]) -> bool:
        if is_nan(value):
            return False
        if is_empty(value):
            return True
        return _to_float(value) <= _bound(params)


class EmailValidator:
    """Validates email addresses with a lenient local@domain pattern."""

    name = "Email"

    EMAIL_PATTERN = re.compile(
        r'^(([^<>()\[\]\\.,;:\s@"]+(\.[^<>()\[\]\\.,;:\s@"]+)*)|(".+"))'
        r"@((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])"
        r"|(([a-z\-0-9]+\.)+[a-z]{2,}))$",
        re.IGNORECASE,
    )

    def validate(self, value: Any, params: Mapping[str, Any]) -> bool:
        if is_empty(value):
            return True
        return self.EMAIL_PATTERN.fullmatch(str(value)) is not None


class DigitsValidator:
    """Limits the number of integer and fraction digits of a number.

    The locale decimal separator is normalised to a dot before splitting;
    a ``decimal_separator`` constraint parameter overrides the configured one.
    """

    name = "Digits"

    def __init__(self, decimal_separator: str | None = None):
        self._decimal_separator = decimal_separator

    @property
    def decimal_separator(self) -> str:
        if self._decimal_separator is not None:
            return self._decimal_separator
        return get_settings().validation.decimal_separator

    def validate(self, value: Any, params: Mapping[str, Any]) -> bool:
        if is_empty(value):
            return True

        separator = params.get("decimal_separator") or self.decimal_separator
        clean = str(value).strip().replace(separator, ".")
        if is_nan(_to_float(clean)):
            return False

        integer_part, _, fraction_part = clean.lstrip("+-").partition(".")
        # rejects exponents, inf and thousands separators
        if not all(part.isdigit() for part in (integer_part, fraction_part) if part):
            return False

        integer_limit = _count(params, "integer")
        fraction_limit = _count(params, "fraction")
        if integer_limit is not None and len(integer_part) > integer_limit:
            return False
        if fraction_limit is not None and len(fraction_part) > fraction_limit:
            return False
        return True


_REGEX_LITERAL = re.compile(r"^/(.*)/([gimsuy]*)$", re.DOTALL)
_REGEX_FLAGS = {"i": re.IGNORECASE, "m": re.MULTILINE, "s": re.DOTALL}
# an unescaped trailing "$"
_TRAILING_DOLLAR = re.compile(r"(?<!\\)(?:\\\\)*\$$")


def as_regex(pattern: Any) -> re.Pattern:
    """Turn a constraint pattern into a compiled regular expression.

    Without the ``m`` flag a trailing ``$`` becomes ``\\Z`` so that, as in
    JavaScript, it does not match before a final newline.

    Args:
        pattern: A compiled pattern or a string in ``/pattern/flags`` form

    Raises:
        ValueError: If the pattern is in neither form
    """
    if isinstance(pattern, re.Pattern):
        return pattern
    if isinstance(pattern, str):
        match = _REGEX_LITERAL.match(pattern)
        if match:
            source, flag_chars = match.group(1), match.group(2)
            flags = 0
            for flag in flag_chars:
                flags |= _REGEX_FLAGS.get(flag, 0)
            if "m" not in flag_chars and _TRAILING_DOLLAR.search(source):
                source = source[:-1] + r"\Z"
            return re.compile(source, flags)
    raise ValueError(f"Expected {pattern!r} to be a regular expression")


class PatternValidator:
    """Value must match the regular expression given in ``value``."""

    name = "Pattern"

    def validate(self, value: Any, params: Mapping[str, Any]) -> bool:
        regex = as_regex(params.get("value"))
        if is_empty(value):
            return True
        return regex.search(str(value)) is not None


def parse_instant(value: Any) -> datetime | None:
    """Parse a date-ish value; None when it cannot be understood.

    Accepts datetimes, dates (midnight), ISO-8601 strings and epoch
    milliseconds.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if is_number(value):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            return None
    return None


def _now_like(instant: datetime) -> datetime:
    if instant.tzinfo is None:
        return datetime.now()
    return datetime.now(timezone.utc)


class PastValidator:
    """Date must lie before the current instant."""

    name = "Past"

    def validate(self, value: Any, params: Mapping[str, Any]) -> bool:
        if is_empty(value):
            return True
        instant = parse_instant(value)
        if instant is None:
            return False
        return instant < _now_like(instant)


class FutureValidator:
    """Date must lie after the current instant."""

    name = "Future"

    def validate(self, value: Any, params: Mapping[str, Any]) -> bool:
        if is_empty(value):
            return True
        instant = parse_instant(value)
        if instant is None:
            return False
        return instant > _now_like(instant)


# Catalog keys accepted by ValidatorRegistry.add_validator
VALIDATOR_CATALOG: dict[str, type] = {
    "required": RequiredValidator,
    "size": SizeValidator,
    "min": MinValidator,
    "max": MaxValidator,
    "email": EmailValidator,
    "digits": DigitsValidator,
    "pattern": PatternValidator,
    "past": PastValidator,
    "future": FutureValidator,
}

BUILTIN_VALIDATORS: tuple[str, ...] = tuple(VALIDATOR_CATALOG)

"""Validation result types.

This module defines structured result types for field validation,
replacing primitive tuples and dicts with immutable value objects.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Violation:
    """One failed constraint on one field.

    Carries every parameter of the originating constraint so message
    templates can interpolate ``min``, ``max``, ``value`` and friends.
    """

    value: Any
    field: str
    type: str
    validator: str
    params: dict[str, Any] = field(default_factory=dict)

    @property
    def message(self) -> str | None:
        """Message key or text configured on the constraint, if any."""
        return self.params.get("message")

    def as_dict(self) -> dict[str, Any]:
        """Flatten the violation for template interpolation.

        Identity fields win over constraint parameters of the same name,
        except ``value``, which is exposed as ``constraint_value`` when the
        constraint defines one.
        """
        data = dict(self.params)
        if "value" in self.params:
            data["constraint_value"] = self.params["value"]
        data.update(
            value=self.value,
            field=self.field,
            type=self.type,
            validator=self.validator,
            message=self.message,
        )
        return data


@dataclass(frozen=True)
class ValidationResult:
    """Immutable outcome of validating one field value.

    ``violations`` is ``None`` when nothing failed, never an empty tuple.
    """

    valid: bool
    violations: tuple[Violation, ...] | None = None

    @property
    def failed(self) -> bool:
        """Check if validation failed."""
        return not self.valid

    @property
    def first_violation(self) -> Violation | None:
        if not self.violations:
            return None
        return self.violations[0]

    @classmethod
    def from_violations(cls, valid: bool, violations: list[Violation]) -> "ValidationResult":
        return cls(valid=valid, violations=tuple(violations) if violations else None)


VALID = ValidationResult(valid=True)

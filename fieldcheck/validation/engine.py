"""Validation engine.

Looks up the constraints configured for a (type, field) pair, runs each of
them through the validator registry and aggregates the outcome into a
single ValidationResult.
"""

from typing import Any, Mapping

from fieldcheck.rules.store import ConstraintStore
from fieldcheck.utils.logging import get_logger
from fieldcheck.validation.registry import ValidatorRegistry
from fieldcheck.validation.results import VALID, ValidationResult, Violation

logger = get_logger(__name__)


class ValidationEngine:
    """Validates field values against the constraints held by a store.

    Configuration gaps never fail a field: an unknown type is reported once
    and passes, a field without constraints passes silently, and a
    constraint naming an unknown validator is reported and skipped.
    """

    def __init__(self, store: ConstraintStore, registry: ValidatorRegistry):
        self.store = store
        self.registry = registry
        self._warned_types: set[str] = set()

    def _field_constraints(self, type_name: str, field_name: str) -> dict[str, Any] | None:
        type_constraints = self.store.constraints_for(type_name)
        if type_constraints is None:
            # rules may still be on their way; only complain once they settled
            if not self.store.loading and type_name not in self._warned_types:
                self._warned_types.add(type_name)
                logger.warning("No validation rules for type", type=type_name)
            return None
        return type_constraints.get(field_name)

    def validate(self, type_name: str, field_name: str, value: Any) -> ValidationResult:
        """Validate one field value.

        Args:
            type_name: Logical model name the constraints are grouped under
            field_name: Field within that type
            value: The value to check

        Returns:
            ValidationResult; ``violations`` is None when nothing failed

        Raises:
            ValueError: If a constraint's parameters are malformed
        """
        constraints = self._field_constraints(type_name, field_name)
        if not constraints:
            return VALID

        valid = True
        violations: list[Violation] = []
        for validator_name, params in constraints.items():
            validator = self.registry.get(validator_name)
            if validator is None:
                logger.warning(
                    "No validator defined",
                    validator=validator_name,
                    type=type_name,
                    field=field_name,
                )
                continue

            params = params or {}
            if not validator.validate(value, params):
                valid = False
                violations.append(
                    Violation(
                        value=value,
                        field=field_name,
                        type=type_name,
                        validator=validator_name,
                        params=dict(params),
                    )
                )

        return ValidationResult.from_violations(valid, violations)

    def validate_fields(
        self, type_name: str, values: Mapping[str, Any]
    ) -> dict[str, ValidationResult]:
        """Validate several fields of one type, keyed by field name."""
        return {
            field_name: self.validate(type_name, field_name, value)
            for field_name, value in values.items()
        }

    def has_errors(self, results: Mapping[str, ValidationResult]) -> bool:
        """Check if any field failed validation."""
        return any(r.failed for r in results.values())

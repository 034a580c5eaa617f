"""Field validation.

Validators are small stateless predicates looked up by name; the engine
runs every constraint configured for a field and collects violations.
"""

from fieldcheck.validation.engine import ValidationEngine
from fieldcheck.validation.registry import ValidatorRegistry, resolve_validator
from fieldcheck.validation.results import ValidationResult, Violation
from fieldcheck.validation.validators import (
    BUILTIN_VALIDATORS,
    DigitsValidator,
    EmailValidator,
    FutureValidator,
    MaxValidator,
    MinValidator,
    PastValidator,
    PatternValidator,
    RequiredValidator,
    SizeValidator,
    Validator,
)

__all__ = [
    "BUILTIN_VALIDATORS",
    "DigitsValidator",
    "EmailValidator",
    "FutureValidator",
    "MaxValidator",
    "MinValidator",
    "PastValidator",
    "PatternValidator",
    "RequiredValidator",
    "SizeValidator",
    "ValidationEngine",
    "ValidationResult",
    "Validator",
    "ValidatorRegistry",
    "Violation",
    "resolve_validator",
]

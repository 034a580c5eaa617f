"""Declarative field constraints for form validation.

This package provides:
- A constraint store keyed by type, field and validator name
- A registry of built-in and pluggable validators
- A validation engine producing structured violations
- A revalidate signal, presentation classes and message rendering
"""

from fieldcheck.context import ValidationContext
from fieldcheck.events import RULES_CHANGED, Signal
from fieldcheck.validation import ValidationResult, Violation

__all__ = [
    "RULES_CHANGED",
    "Signal",
    "ValidationContext",
    "ValidationResult",
    "Violation",
]

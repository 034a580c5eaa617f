"""Constraint map storage and loading."""

from fieldcheck.rules.client import RulesClient
from fieldcheck.rules.store import ConstraintMap, ConstraintStore

__all__ = [
    "ConstraintMap",
    "ConstraintStore",
    "RulesClient",
]

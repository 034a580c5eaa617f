"""Validator registry.

Collects validator references and constraint-name aliases while the host
application is being configured, then resolves them exactly once into a
name -> validator mapping used by the validation engine.
"""

import importlib
from typing import Any

from fieldcheck.utils.logging import get_logger
from fieldcheck.validation.validators import (
    BUILTIN_VALIDATORS,
    VALIDATOR_CATALOG,
    Validator,
)

logger = get_logger(__name__)


def resolve_validator(ref: Any) -> Validator:
    """Resolve a validator reference into a validator instance.

    Args:
        ref: A catalog key (``"size"``), an import path
             (``"package.module:attribute"``), a validator class or instance

    Returns:
        The validator instance

    Raises:
        LookupError: If the reference cannot be resolved to a validator
    """
    target = ref
    if isinstance(ref, str):
        if ref in VALIDATOR_CATALOG:
            target = VALIDATOR_CATALOG[ref]
        elif ":" in ref:
            module_name, _, attribute = ref.partition(":")
            try:
                target = getattr(importlib.import_module(module_name), attribute)
            except (ImportError, AttributeError) as e:
                raise LookupError(f"Cannot import validator '{ref}': {e}") from e
        else:
            raise LookupError(f"Unknown validator reference '{ref}'")

    if isinstance(target, type):
        target = target()

    if not isinstance(target, Validator):
        raise LookupError(f"'{ref}' does not provide a name and a validate() method")
    return target


class ValidatorRegistry:
    """Name -> validator mapping built once from registered references.

    References and aliases are collected first; the mapping is built on
    the first lookup (or an explicit ``build()``). Constraint maps then
    refer to validators by their declared name, or by the alias registered
    for that name.
    """

    def __init__(self, include_builtins: bool = True):
        self._refs: list[Any] = list(BUILTIN_VALIDATORS) if include_builtins else []
        self._aliases: dict[str, str] = {}
        self._validators: dict[str, Validator] | None = None

    @property
    def built(self) -> bool:
        return self._validators is not None

    def _ensure_not_built(self) -> None:
        if self.built:
            raise RuntimeError("Validator registry is already built")

    def add_validator(self, ref: Any) -> None:
        """Register a validator reference to be resolved at build time."""
        self._ensure_not_built()
        self._refs.append(ref)

    def add_alias(self, internal_name: str, external_name: str) -> None:
        """Key the validator declared as ``internal_name`` under ``external_name``.

        Registering a second alias for the same internal name replaces the first.
        """
        self._ensure_not_built()
        self._aliases[internal_name] = external_name

    def build(self) -> dict[str, Validator]:
        """Resolve all references; later references override earlier ones."""
        if self._validators is not None:
            return self._validators

        validators: dict[str, Validator] = {}
        for ref in self._refs:
            validator = resolve_validator(ref)
            key = self._aliases.get(validator.name, validator.name)
            validators[key] = validator

        logger.debug("Validator registry built", validators=",".join(validators))
        self._validators = validators
        return validators

    def get(self, name: str) -> Validator | None:
        return self.build().get(name)

    def names(self) -> list[str]:
        return list(self.build())

    def __contains__(self, name: str) -> bool:
        return name in self.build()

"""Validation context.

The one object a host application constructs and hands to every consumer:
it owns the constraint store, the validator registry, the engine, the
revalidate signal, the presentation classes and the message renderer.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

from fieldcheck.config import Settings, get_settings
from fieldcheck.events import RULES_CHANGED, Signal
from fieldcheck.messages import MessageRenderer
from fieldcheck.presentation import Presentation, PresentationClasses
from fieldcheck.rules import ConstraintMap, ConstraintStore, RulesClient
from fieldcheck.validation import ValidationEngine, ValidationResult, ValidatorRegistry
from fieldcheck.validation.validators import VALIDATOR_CATALOG, DigitsValidator


class ValidationContext:
    """Explicitly owned validation state.

    Usage:
        context = ValidationContext()
        context.registry.add_alias("Size", "Length")
        context.add_constraints({"Person": {"name": {"Required": {}}}})

        result = context.validate("Person", "name", "")
        result.valid  # False
    """

    def __init__(
        self,
        settings: Settings | None = None,
        registry: ValidatorRegistry | None = None,
        client: RulesClient | None = None,
    ):
        self.settings = settings or get_settings()
        self.signal = Signal(RULES_CHANGED)
        self.store = ConstraintStore(
            signal=self.signal,
            client=client or RulesClient(self.settings.rules),
        )
        self.registry = registry or self._default_registry()
        self.engine = ValidationEngine(self.store, self.registry)
        self.presentation = Presentation(
            self.signal, PresentationClasses.from_settings(self.settings.presentation)
        )
        self.messages = MessageRenderer(template=self.settings.messages.template)

    def _default_registry(self) -> ValidatorRegistry:
        registry = ValidatorRegistry(include_builtins=False)
        for ref in VALIDATOR_CATALOG:
            if ref == "digits":
                registry.add_validator(
                    DigitsValidator(self.settings.validation.decimal_separator)
                )
            else:
                registry.add_validator(ref)
        return registry

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "ValidationContext":
        """Build a context and merge ``FIELDCHECK_RULES_FILE`` when it is set."""
        context = cls(settings=settings)
        if context.settings.rules.file:
            context.store.load_from_file(context.settings.rules.file)
        return context

    def validate(self, type_name: str, field_name: str, value: Any) -> ValidationResult:
        return self.engine.validate(type_name, field_name, value)

    def validate_fields(
        self, type_name: str, values: Mapping[str, Any]
    ) -> dict[str, ValidationResult]:
        return self.engine.validate_fields(type_name, values)

    def add_constraints(self, constraints: Mapping[str, Any]) -> None:
        self.store.add_constraints(constraints)

    def get_constraints(self) -> ConstraintMap:
        return self.store.get_constraints()

    def subscribe(self, fn: Callable[[], None]) -> Callable[[], None]:
        return self.signal.subscribe(fn)

    def close(self) -> None:
        self.store.close()

    def __enter__(self) -> "ValidationContext":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    async def load_rules(self, url: str | None = None) -> bool:
        """Fetch constraints from ``url`` or the configured FIELDCHECK_RULES_URL."""
        return await self.store.load_from_source(url)

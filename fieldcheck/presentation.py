"""CSS class tokens consumed by host UI bindings."""

from dataclasses import dataclass, replace

from fieldcheck.config import PresentationSettings, get_settings
from fieldcheck.events import Signal
from fieldcheck.validation.results import ValidationResult


@dataclass(frozen=True)
class PresentationClasses:
    valid: str
    invalid: str
    dirty_blurred: str

    @classmethod
    def from_settings(cls, settings: PresentationSettings) -> "PresentationClasses":
        return cls(
            valid=settings.valid,
            invalid=settings.invalid,
            dirty_blurred=settings.dirty_blurred,
        )


class Presentation:
    """Holds the class tokens and announces changes on the revalidate signal."""

    def __init__(self, signal: Signal, classes: PresentationClasses | None = None):
        self.signal = signal
        self.classes = classes or PresentationClasses.from_settings(get_settings().presentation)

    def set_classes(self, **tokens: str) -> PresentationClasses:
        """Replace some of the tokens (``valid``, ``invalid``, ``dirty_blurred``)."""
        self.classes = replace(self.classes, **tokens)
        self.signal.broadcast()
        return self.classes

    def classes_for(
        self, result: ValidationResult, dirty: bool = False, blurred: bool = False
    ) -> list[str]:
        """Tokens a host should put on a field wrapper for ``result``."""
        if result.valid:
            return [self.classes.valid]
        tokens = [self.classes.invalid]
        if dirty and blurred:
            tokens.append(self.classes.dirty_blurred)
        return tokens

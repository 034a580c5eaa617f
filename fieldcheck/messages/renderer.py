"""Violation message rendering.

Renders violations into markup with Jinja2. The default template prints the
constraint's message; a custom template can be configured, and an optional
translator turns message keys and ``<type>.<field>`` keys into display text.
"""

from typing import Any, Callable

from jinja2 import Environment, Template

from fieldcheck.config import get_settings
from fieldcheck.validation.results import ValidationResult, Violation

DEFAULT_TEMPLATE = '<div class="fieldcheck-message">{{ violation.message }}</div>'

Translator = Callable[[str, dict[str, Any]], str]

jinja_env = Environment(autoescape=True)


class MessageRenderer:
    """Renders the violations of a ValidationResult.

    Attributes:
        translator: Optional callable ``(key, params) -> text``
    """

    def __init__(self, template: str | None = None, translator: Translator | None = None):
        self.translator = translator
        self._template_source = template or get_settings().messages.template or DEFAULT_TEMPLATE
        self._template: Template = jinja_env.from_string(self._template_source)

    @property
    def template(self) -> str:
        return self._template_source

    @property
    def translate_available(self) -> bool:
        return self.translator is not None

    def set_template(self, template: str) -> None:
        """Swap the template used for subsequent renders."""
        self._template = jinja_env.from_string(template)
        self._template_source = template

    def _context(self, violation: Violation) -> dict[str, Any]:
        data = violation.as_dict()
        data["field_name"] = violation.field
        if self.translator is not None:
            field_key = f"{violation.type}.{violation.field}"
            data["field_name"] = self.translator(field_key, {})
            if violation.message:
                data["message"] = self.translator(violation.message, data)
        return data

    def render_violation(self, violation: Violation) -> str:
        return self._template.render(violation=self._context(violation))

    def render(self, result: ValidationResult) -> str:
        """Render the first violation; empty string when the result is valid."""
        violation = result.first_violation
        if violation is None:
            return ""
        return self.render_violation(violation)

    def render_all(self, result: ValidationResult) -> list[str]:
        if not result.violations:
            return []
        return [self.render_violation(v) for v in result.violations]

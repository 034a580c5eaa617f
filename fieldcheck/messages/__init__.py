"""Violation message rendering."""

from fieldcheck.messages.renderer import DEFAULT_TEMPLATE, MessageRenderer, Translator

__all__ = [
    "DEFAULT_TEMPLATE",
    "MessageRenderer",
    "Translator",
]

"""Configuration module for fieldcheck.

This module provides centralized, type-safe configuration management
using pydantic-settings with environment variable loading.

Usage:
    from fieldcheck.config import get_settings

    settings = get_settings()

    # Where constraints come from
    rules_url = settings.rules.url
    timeout = settings.rules.timeout_s

    # Presentation tokens for the host UI
    invalid_class = settings.presentation.invalid
"""

from fieldcheck.config.settings import (
    LoggingSettings,
    MessageSettings,
    PresentationSettings,
    RulesSettings,
    Settings,
    ValidationSettings,
    get_settings,
    reset_settings,
)

__all__ = [
    "LoggingSettings",
    "MessageSettings",
    "PresentationSettings",
    "RulesSettings",
    "Settings",
    "ValidationSettings",
    "get_settings",
    "reset_settings",
]

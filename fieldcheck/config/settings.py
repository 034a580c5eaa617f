"""Centralized configuration management using pydantic-settings.

This module provides type-safe configuration with environment variable loading,
validation, and sensible defaults for all fieldcheck settings.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RulesSettings(BaseSettings):
    """Constraint source configuration."""

    model_config = SettingsConfigDict(env_prefix="FIELDCHECK_RULES_", extra="ignore")

    url: str | None = Field(
        default=None,
        description="URL serving the constraint map as JSON",
    )
    file: str | None = Field(
        default=None,
        description="Local JSON or YAML file with the constraint map",
    )
    timeout_s: float = Field(
        default=10.0,
        description="Request timeout in seconds",
    )
    verify_ssl: bool = Field(
        default=True,
        description="SSL verification flag",
    )

    def is_remote(self) -> bool:
        """Check if constraints should be fetched over HTTP (url is set)."""
        return bool(self.url)


class ValidationSettings(BaseSettings):
    """Validator behaviour configuration."""

    model_config = SettingsConfigDict(env_prefix="FIELDCHECK_", extra="ignore")

    decimal_separator: str = Field(
        default=".",
        description="Locale decimal separator used by the Digits validator",
    )

    @field_validator("decimal_separator")
    @classmethod
    def single_character(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError("decimal separator must be a single character")
        return v


class PresentationSettings(BaseSettings):
    """CSS class tokens handed to the host UI layer."""

    model_config = SettingsConfigDict(env_prefix="FIELDCHECK_CLASS_", extra="ignore")

    valid: str = Field(
        default="has-success",
        description="Class applied to valid fields",
    )
    invalid: str = Field(
        default="has-error",
        description="Class applied to invalid fields",
    )
    dirty_blurred: str = Field(
        default="fieldcheck-invalid-dirty-blurred",
        description="Class applied to invalid fields that were edited and left",
    )


class MessageSettings(BaseSettings):
    """Violation message rendering configuration."""

    model_config = SettingsConfigDict(env_prefix="FIELDCHECK_MESSAGE_", extra="ignore")

    template: str | None = Field(
        default=None,
        description="Jinja2 template overriding the default violation message markup",
    )


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    debug_all: bool = Field(
        default=False,
        validation_alias="DEBUG_ALL",
        description="Enable debug logging for all libraries",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Log level for fieldcheck namespace",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str) -> str:
        if isinstance(v, str):
            return v.upper()
        return v


class Settings(BaseSettings):
    """Root settings class with all nested configurations.

    Usage:
        from fieldcheck.config import get_settings

        settings = get_settings()
        url = settings.rules.url
        separator = settings.validation.decimal_separator
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    rules: RulesSettings = Field(default_factory=RulesSettings)
    validation: ValidationSettings = Field(default_factory=ValidationSettings)
    presentation: PresentationSettings = Field(default_factory=PresentationSettings)
    messages: MessageSettings = Field(default_factory=MessageSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Singleton pattern for settings
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance.

    Returns:
        The singleton Settings instance with all configuration loaded.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)."""
    global _settings
    _settings = None

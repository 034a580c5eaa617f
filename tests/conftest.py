"""Pytest configuration and shared fixtures."""

import pytest
import structlog

from fieldcheck.config import reset_settings
from fieldcheck.context import ValidationContext
from fieldcheck.utils.logging import format_context

PERSON_RULES = {
    "Person": {
        "firstName": {
            "Required": {"message": "person.firstName.required"},
            "Size": {"min": 2, "max": 20, "message": "person.firstName.size"},
        },
        "email": {
            "Email": {"message": "person.email.invalid"},
        },
        "age": {
            "Min": {"value": 18, "message": "person.age.min"},
            "Max": {"value": 130, "message": "person.age.max"},
        },
        "nickname": {},
    }
}


@pytest.fixture(autouse=True, scope="session")
def route_logs_to_stdlib():
    """Send structlog output through stdlib logging instead of stdout.

    Mirrors setup_logging() without logger caching, so capture_logs() keeps
    working and CLI output stays free of log lines.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            format_context,
            structlog.stdlib.render_to_log_kwargs,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def reset_config_settings():
    """Reset the settings singleton before and after each test.

    This ensures that environment variable changes made by monkeypatch
    are properly reflected in the settings, since pydantic-settings
    reads env vars at instantiation time.
    """
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def context():
    """A fresh validation context with the Person rules loaded."""
    ctx = ValidationContext()
    ctx.add_constraints(PERSON_RULES)
    return ctx

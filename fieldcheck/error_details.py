"""Error message formatting for user-friendly exception handling."""

import requests
import yaml


def _format_http_error(error) -> str:
    """Format HTTP errors raised while fetching constraints."""
    response = error.response
    if response is None:
        return f"HTTP error: {error!s}"
    return f"Constraint source returned HTTP {response.status_code} for {response.url}"


ERROR_TYPES = {
    requests.HTTPError: _format_http_error,
    requests.ConnectionError: lambda e: f"Cannot reach constraint source: {e!s}",
    requests.Timeout: lambda e: f"Constraint source timed out: {e!s}",
    yaml.YAMLError: lambda e: f"Invalid constraint file: {e!s}",
    FileNotFoundError: lambda e: f"File not found: {e.filename}",
    PermissionError: lambda e: f"Permission denied: {e!s}\nCheck file permissions.",
    LookupError: lambda e: str(e).strip("'\""),
    TypeError: lambda e: str(e),
    ValueError: lambda e: str(e),
    OSError: lambda e: f"System error: {e!s}",
}


def get_error_human_message(error: Exception) -> str:
    """
    Get user-friendly error message based on exception type.

    Args:
        error: The exception to format

    Returns:
        Formatted error message suitable for end users
    """
    for error_type, handler in ERROR_TYPES.items():
        if isinstance(error, error_type):
            return handler(error)
    return str(error)

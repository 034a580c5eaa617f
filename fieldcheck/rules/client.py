"""HTTP client for fetching constraint maps.

Provides session management and SSL/timeout handling for loading a
constraint map published as JSON by a backend.
"""

from __future__ import annotations

from typing import Any

import requests

from fieldcheck.config import RulesSettings, get_settings
from fieldcheck.utils.logging import get_logger

logger = get_logger(__name__)


class RulesClient:
    """Fetches a constraint map (type -> field -> validator -> params) over HTTP."""

    def __init__(self, settings: RulesSettings | None = None) -> None:
        self._settings = settings or get_settings().rules
        self._session = requests.Session()
        self._session.headers.update({"Accept": "application/json"})

    @property
    def _timeout(self) -> float:
        """Return request timeout in seconds."""
        return self._settings.timeout_s

    def _resolve_url(self, url: str | None) -> str:
        resolved = url or self._settings.url
        if not resolved:
            raise ValueError("No constraint URL given and FIELDCHECK_RULES_URL is not set")
        return resolved

    def fetch(self, url: str | None = None) -> dict[str, Any]:
        """GET the constraint map.

        Args:
            url: Location of the constraint map; defaults to the configured URL

        Returns:
            The decoded constraint map

        Raises:
            requests.RequestException: On connection errors or non-2xx responses
            ValueError: If no URL is available or the body is not a JSON object
        """
        resolved = self._resolve_url(url)
        logger.debug("Fetching constraints", url=resolved)

        resp = self._session.get(
            resolved,
            verify=self._settings.verify_ssl,
            timeout=self._timeout,
        )
        resp.raise_for_status()

        data = resp.json()
        if not isinstance(data, dict):
            raise ValueError(
                f"Expected a JSON object from {resolved}, got {type(data).__name__}"
            )
        return data

    def close(self) -> None:
        self._session.close()

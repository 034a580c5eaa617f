"""Tests for RulesClient."""

import pytest
import responses
from requests.exceptions import HTTPError

from fieldcheck.config import RulesSettings
from fieldcheck.rules.client import RulesClient

RULES_URL = "https://rules.example/api/constraints"


class TestRulesClient:
    """Tests for fetching constraint maps."""

    @responses.activate
    def test_fetch_returns_json_object(self):
        responses.add(responses.GET, RULES_URL, json={"Person": {}}, status=200)

        data = RulesClient(RulesSettings()).fetch(RULES_URL)

        assert data == {"Person": {}}
        assert responses.calls[0].request.headers["Accept"] == "application/json"

    @responses.activate
    def test_fetch_uses_configured_url(self, monkeypatch):
        monkeypatch.setenv("FIELDCHECK_RULES_URL", RULES_URL)
        responses.add(responses.GET, RULES_URL, json={}, status=200)

        assert RulesClient().fetch() == {}
        assert responses.calls[0].request.url == RULES_URL

    def test_fetch_without_url(self):
        with pytest.raises(ValueError, match="FIELDCHECK_RULES_URL"):
            RulesClient(RulesSettings()).fetch()

    @responses.activate
    def test_fetch_raises_on_server_error(self):
        responses.add(responses.GET, RULES_URL, status=500)

        with pytest.raises(HTTPError):
            RulesClient(RulesSettings()).fetch(RULES_URL)

    @responses.activate
    def test_fetch_rejects_non_object(self):
        responses.add(responses.GET, RULES_URL, json=[1, 2], status=200)

        with pytest.raises(ValueError, match="Expected a JSON object"):
            RulesClient(RulesSettings()).fetch(RULES_URL)

    @responses.activate
    def test_timeout_from_settings(self, monkeypatch):
        monkeypatch.setenv("FIELDCHECK_RULES_TIMEOUT_S", "2.5")
        responses.add(responses.GET, RULES_URL, json={}, status=200)

        client = RulesClient()
        client.fetch(RULES_URL)

        assert client._timeout == 2.5

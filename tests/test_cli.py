"""Tests for the command line interface."""

import json

import pytest
import responses
from click.testing import CliRunner

from app import cli
from fieldcheck.rules.client import RulesClient

RULES = {
    "Person": {
        "name": {
            "Required": {"message": "Name is required"},
            "Size": {"min": 2, "max": 5, "message": "Name length"},
        },
        "email": {"Email": {}},
    }
}

RULES_URL = "https://rules.example/api/constraints"


@pytest.fixture
def rules_file(tmp_path):
    path = tmp_path / "rules.json"
    path.write_text(json.dumps(RULES))
    return str(path)


@pytest.fixture
def runner():
    return CliRunner()


class TestValidateCommand:
    def test_valid_value(self, runner, rules_file):
        result = runner.invoke(cli, ["validate", "Person", "name", "Ada", "--rules", rules_file])

        assert result.exit_code == 0
        assert "name: valid" in result.output

    def test_invalid_value(self, runner, rules_file):
        result = runner.invoke(cli, ["validate", "Person", "name", "A", "--rules", rules_file])

        assert result.exit_code == 1
        assert "Size - Name length" in result.output

    def test_violation_without_message(self, runner, rules_file):
        result = runner.invoke(
            cli, ["validate", "Person", "email", "nope", "--rules", rules_file]
        )

        assert result.exit_code == 1
        assert "Email - Email" in result.output

    def test_later_rules_file_wins(self, runner, rules_file, tmp_path):
        override = tmp_path / "override.yaml"
        override.write_text("Person:\n  name:\n    Size: {max: 1}\n")

        result = runner.invoke(
            cli,
            ["validate", "Person", "name", "Ada", "--rules", rules_file, "--rules", str(override)],
        )

        assert result.exit_code == 1
        assert "Required" not in result.output

    @responses.activate
    def test_rules_from_url(self, runner):
        responses.add(responses.GET, RULES_URL, json=RULES, status=200)

        result = runner.invoke(cli, ["validate", "Person", "name", "A", "--url", RULES_URL])

        assert result.exit_code == 1
        assert "Name length" in result.output

    @responses.activate
    def test_unreachable_url(self, runner):
        responses.add(responses.GET, RULES_URL, status=503)

        result = runner.invoke(cli, ["validate", "Person", "name", "A", "--url", RULES_URL])

        assert result.exit_code == 1
        assert "Could not load constraints" in result.output

    def test_malformed_constraint(self, runner, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"T": {"f": {"Pattern": {"value": "abc"}}}}))

        result = runner.invoke(cli, ["validate", "T", "f", "x", "--rules", str(path)])

        assert result.exit_code == 1
        assert "to be a regular expression" in result.output


class TestCheckCommand:
    def test_several_fields(self, runner, rules_file):
        result = runner.invoke(
            cli,
            ["check", "Person", "--values", '{"name": "Ada", "email": "bad"}', "--rules", rules_file],
        )

        assert result.exit_code == 1
        assert "name: valid" in result.output
        assert "email: Email" in result.output

    def test_values_must_be_object(self, runner, rules_file):
        result = runner.invoke(
            cli, ["check", "Person", "--values", "[1]", "--rules", rules_file]
        )

        assert result.exit_code == 1
        assert "--values must be a JSON object" in result.output


class TestRulesCommand:
    def test_prints_merged_rules(self, runner, rules_file):
        result = runner.invoke(cli, ["rules", "--rules", rules_file])

        assert result.exit_code == 0
        assert json.loads(result.output) == RULES

    def test_closes_http_session(self, runner, rules_file, monkeypatch):
        closed = []
        monkeypatch.setattr(RulesClient, "close", lambda self: closed.append(self))

        result = runner.invoke(cli, ["rules", "--rules", rules_file])

        assert result.exit_code == 0
        assert len(closed) == 1

    def test_help_without_command(self, runner):
        result = runner.invoke(cli, [])

        assert result.exit_code == 0
        assert "validate" in result.output

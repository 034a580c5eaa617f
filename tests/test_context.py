"""End-to-end tests through ValidationContext."""

import asyncio
import json
from unittest.mock import Mock

import responses

from fieldcheck.context import ValidationContext
from fieldcheck.rules import RulesClient
from fieldcheck.validation.validators import DigitsValidator

RULES_URL = "https://rules.example/api/constraints"


class TestValidationContext:
    """Tests for the explicit validation context."""

    def test_required(self, context):
        for value in ("", None, float("nan")):
            assert context.validate("Person", "firstName", value).valid is False
        assert context.validate("Person", "firstName", "Jo").valid is True

    def test_two_failing_constraints(self, context):
        context.add_constraints(
            {"Person": {"code": {"Size": {"min": 3}, "Pattern": {"value": "/^\\d+$/"}}}}
        )

        result = context.validate("Person", "code", "x")

        assert result.valid is False
        assert len(result.violations) == 2
        assert [v.validator for v in result.violations] == ["Size", "Pattern"]
        assert result.violations[0].params == {"min": 3}

    def test_min_max(self, context):
        assert context.validate("Person", "age", "").valid is True
        assert context.validate("Person", "age", "18").valid is True
        assert context.validate("Person", "age", "17").violations[0].validator == "Min"
        assert context.validate("Person", "age", "131").violations[0].validator == "Max"

    def test_email(self, context):
        assert context.validate("Person", "email", "").valid is True
        assert context.validate("Person", "email", "a@b.com").valid is True
        assert context.validate("Person", "email", "not-an-email").valid is False

    def test_field_without_rules(self, context):
        result = context.validate("Person", "nickname", "")
        assert result.valid is True
        assert result.violations is None

    def test_add_constraints_broadcasts_once(self, context):
        calls = []
        context.subscribe(lambda: calls.append(1))

        context.add_constraints({"Person": {"firstName": {"Size": {"min": 1}}}})

        assert calls == [1]
        assert context.get_constraints()["Person"]["firstName"] == {"Size": {"min": 1}}

    def test_presentation_change_broadcasts(self, context):
        calls = []
        context.subscribe(lambda: calls.append(1))

        context.presentation.set_classes(valid="ok")

        assert calls == [1]

    def test_revalidate_on_change(self, context):
        shown = {}

        def revalidate():
            shown["result"] = context.validate("Person", "nickname", "x")

        context.subscribe(revalidate)
        context.add_constraints({"Person": {"nickname": {"Size": {"min": 2}}}})

        assert shown["result"].valid is False

    def test_digits_uses_configured_separator(self, monkeypatch):
        monkeypatch.setenv("FIELDCHECK_DECIMAL_SEPARATOR", ",")
        context = ValidationContext()
        context.add_constraints({"Item": {"price": {"Digits": {"integer": 3, "fraction": 2}}}})

        assert isinstance(context.registry.get("Digits"), DigitsValidator)
        assert context.validate("Item", "price", "123,45").valid is True
        assert context.validate("Item", "price", "123,456").valid is False

    def test_messages_render_violation(self, context):
        result = context.validate("Person", "firstName", "")
        assert "person.firstName.required" in context.messages.render(result)

    def test_from_settings_loads_rules_file(self, monkeypatch, tmp_path):
        path = tmp_path / "rules.json"
        path.write_text(json.dumps({"Person": {"name": {"Required": {}}}}))
        monkeypatch.setenv("FIELDCHECK_RULES_FILE", str(path))

        context = ValidationContext.from_settings()

        assert context.validate("Person", "name", "").valid is False

    @responses.activate
    def test_load_rules(self):
        responses.add(
            responses.GET, RULES_URL, json={"Person": {"name": {"Required": {}}}}, status=200
        )
        context = ValidationContext()
        calls = []
        context.subscribe(lambda: calls.append(1))

        assert asyncio.run(context.load_rules(RULES_URL)) is True
        assert calls == [1]
        assert context.validate("Person", "name", "").valid is False

    def test_context_manager_closes_client(self):
        client = Mock(spec=RulesClient)

        with ValidationContext(client=client) as context:
            context.add_constraints({"Person": {"name": {"Required": {}}}})
            client.close.assert_not_called()

        client.close.assert_called_once_with()

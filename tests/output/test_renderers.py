"""Tests for Rich renderers and output formatting."""

from __future__ import annotations

import json

from jackprop.output.formatters import OutputSettings, format_result
from jackprop.output.renderers import render_quiet, render_result
from jackprop.services.result import ServiceResult

LIST_RESULT = ServiceResult(
    ok=True,
    op="list_actions",
    data={
        "count": 2,
        "items": [
            {"name": "CreateUser", "description": "Creates a user"},
            {"name": "Greet", "description": "Greets"},
        ],
    },
)

DESCRIBE_RESULT = ServiceResult(
    ok=True,
    op="describe_action",
    data={
        "name": "Greet",
        "description": "Greets someone",
        "jacks": {"greeting": "string.is_required"},
        "props": {"name": "string.is_required"},
        "has_default_jacks": True,
        "has_default_props": False,
    },
)

VALIDATION_FAILURE = ServiceResult.failure(
    "run_action",
    "VALIDATION_FAILED",
    "The action could not be validated",
    detail={"action": "Greet", "errors": {"props": {"name": "Required", "o": {"s": "Required"}}}},
)


class TestRenderResult:
    def test_list_table(self) -> None:
        output = render_result(LIST_RESULT)
        assert "CreateUser" in output
        assert "Creates a user" in output
        assert "2 action(s)" in output

    def test_empty_list(self) -> None:
        result = ServiceResult(ok=True, op="list_actions", data={"count": 0, "items": []})
        assert render_result(result) == "No actions registered."

    def test_describe(self) -> None:
        output = render_result(DESCRIBE_RESULT)
        assert "Greets someone" in output
        assert "string.is_required" in output
        assert "jacks" in output
        assert "props" in output
        assert output.count("defaults supplied by a provider") == 1

    def test_run(self) -> None:
        result = ServiceResult(
            ok=True, op="run_action", data={"action": "Greet", "result": {"a": 1}}
        )
        output = render_result(result)
        assert output.startswith("OK: run_action")
        assert '"a": 1' in output

    def test_generic(self) -> None:
        output = render_result(ServiceResult(ok=True, op="other", data={"k": "v"}))
        assert "OK: other" in output
        assert "k: v" in output

    def test_validation_error_tree(self) -> None:
        output = render_result(VALIDATION_FAILURE)
        assert "ERROR: run_action" in output
        assert "The action could not be validated" in output
        assert "name: Required" in output
        assert "s: Required" in output


class TestRenderQuiet:
    def test_list_names(self) -> None:
        assert render_quiet(LIST_RESULT) == "CreateUser\nGreet"

    def test_run_result(self) -> None:
        result = ServiceResult(ok=True, op="run_action", data={"action": "X", "result": "hi"})
        assert render_quiet(result) == '"hi"'

    def test_error(self) -> None:
        assert render_quiet(VALIDATION_FAILURE).startswith("ERROR: run_action")


class TestFormatResult:
    def test_json(self) -> None:
        parsed = json.loads(
            format_result(VALIDATION_FAILURE, settings=OutputSettings(json_output=True))
        )
        assert parsed["error"]["detail"]["errors"]["props"]["name"] == "Required"

    def test_default_is_rich(self) -> None:
        assert "CreateUser" in format_result(LIST_RESULT)

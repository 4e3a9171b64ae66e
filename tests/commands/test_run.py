"""Tests for the run CLI command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from jackprop.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestRunCommand:
    def test_run_success(self, cli_runner: CliRunner, actions_module: str) -> None:
        result = cli_runner.invoke(
            cli, ["-m", actions_module, "run", "Greet", "--props", '{"name": "Ada"}']
        )
        assert result.exit_code == 0
        assert "OK: run_action" in result.output
        assert "Hello, Ada!" in result.output

    def test_run_json_with_jacks(self, cli_runner: CliRunner, actions_module: str) -> None:
        result = cli_runner.invoke(
            cli,
            [
                "--json",
                "-m",
                actions_module,
                "run",
                "Greet",
                "--jacks",
                '{"greeting": "Hi"}',
                "--props",
                '{"name": "Ada"}',
            ],
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["data"] == {"action": "Greet", "result": "Hi, Ada!"}

    def test_run_quiet_prints_result_only(
        self, cli_runner: CliRunner, actions_module: str
    ) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "-m", actions_module, "run", "Schedule", "--props", '{"at": 0}']
        )
        assert result.exit_code == 0
        assert json.loads(result.output) == {"at": "1970-01-01T00:00:00.000Z", "note": None}

    def test_validation_failure(self, cli_runner: CliRunner, actions_module: str) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "-m", actions_module, "run", "Greet", "--props", '{"age": "x"}']
        )
        assert result.exit_code == 1
        assert result.stdout == ""
        data = json.loads(result.stderr)
        assert data["error"]["code"] == "VALIDATION_FAILED"
        assert data["error"]["detail"]["errors"] == {
            "props": {
                "name": "Required",
                "age": 'Expected type to be "number" but found "string"',
            }
        }

    def test_validation_failure_human(self, cli_runner: CliRunner, actions_module: str) -> None:
        result = cli_runner.invoke(cli, ["-m", actions_module, "run", "Greet"])
        assert result.exit_code == 1
        assert "The action could not be validated" in result.stderr
        assert "name: Required" in result.stderr

    def test_perform_failure(self, cli_runner: CliRunner, actions_module: str) -> None:
        result = cli_runner.invoke(cli, ["-m", actions_module, "run", "Explode"])
        assert result.exit_code == 1
        assert "RuntimeError: boom" in result.stderr

    @pytest.mark.parametrize("payload", ["{not json", "[1, 2]"])
    def test_bad_json_is_usage_error(
        self, cli_runner: CliRunner, actions_module: str, payload: str
    ) -> None:
        result = cli_runner.invoke(
            cli, ["-m", actions_module, "run", "Greet", "--props", payload]
        )
        assert result.exit_code == 2
        assert "--props" in result.output

    def test_unknown_action(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["run", "Nope"])
        assert result.exit_code == 1
        assert "No action named 'Nope'" in result.stderr

    def test_log_records_carry_command_and_action(
        self, cli_runner: CliRunner, actions_module: str
    ) -> None:
        result = cli_runner.invoke(
            cli,
            [
                "-v",
                "--log-json",
                "-m",
                actions_module,
                "run",
                "Greet",
                "--props",
                '{"name": "Ada"}',
            ],
        )
        assert result.exit_code == 0
        records = [json.loads(line) for line in result.stderr.splitlines() if line.startswith("{")]
        performing = [r for r in records if r["event"] == "Performing action Greet"]
        assert len(performing) == 1
        assert performing[0]["command"] == "run"
        assert performing[0]["action"] == "Greet"

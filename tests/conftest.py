"""Shared pytest fixtures for jackprop tests."""

from __future__ import annotations

import sys
import textwrap
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

ACTIONS_MODULE = '''
from jackprop import Types, create

def _greet(jacks, props):
    return f"{jacks['greeting']}, {props['name']}!"

greet = create({
    "name": "Greet",
    "description": "Greets someone by name",
    "jack_types": {"greeting": Types.string.is_required},
    "prop_types": {"name": Types.string.is_required, "age": Types.number},
    "get_default_jacks": lambda: {"greeting": "Hello"},
    "perform": _greet,
})

def _explode(jacks, props):
    raise RuntimeError("boom")

explode = create({
    "name": "Explode",
    "description": "Always fails in its handler",
    "jack_types": {},
    "prop_types": {},
    "perform": _explode,
})

schedule = create({
    "name": "Schedule",
    "description": "Echoes a parsed date",
    "jack_types": {},
    "prop_types": {"at": Types.date.is_required},
    "perform": lambda jacks, props: {"at": props["at"], "note": props.get("note")},
})
'''


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def base_action() -> dict[str, Any]:
    """A minimal valid action descriptor that tests mutate per case."""
    return {
        "name": "CreateUser",
        "description": "Creates a new user account",
        "jack_types": {},
        "prop_types": {},
        "perform": lambda jacks, props: None,
    }


@pytest.fixture
def actions_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    """Write an importable module of sample actions and return its name.

    Each test gets a unique module name so imports never leak between tests.
    """
    name = f"sample_actions_{tmp_path.name.replace('-', '_')}"
    (tmp_path / f"{name}.py").write_text(textwrap.dedent(ACTIONS_MODULE), encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    yield name
    sys.modules.pop(name, None)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no config override."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("JACKPROP_CONFIG", raising=False)


"""Tests for config models, discovery, and JackpropSettings."""

from __future__ import annotations

from pathlib import Path

import click
import pytest
from pydantic import ValidationError

from jackprop.config.discovery import CONFIG_FILENAME, find_config
from jackprop.config.models import OutputConfig, RegistryConfig
from jackprop.config.settings import JackpropSettings


@pytest.fixture(autouse=True)
def _no_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("JACKPROP_CONFIG", "JACKPROP_JSON_OUTPUT", "JACKPROP_VERBOSE"):
        monkeypatch.delenv(var, raising=False)


def _write_config(directory: Path, body: str) -> Path:
    path = directory / CONFIG_FILENAME
    path.write_text(body, encoding="utf-8")
    return path


class TestModels:
    def test_defaults(self) -> None:
        assert RegistryConfig().modules == []
        assert RegistryConfig().entry_points is True
        assert OutputConfig().width == 120

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            RegistryConfig().entry_points = False  # type: ignore[misc]


class TestDiscovery:
    def test_walks_up(self, tmp_path: Path) -> None:
        path = _write_config(tmp_path, "")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config(nested) == path

    def test_none_when_missing(self, tmp_path: Path) -> None:
        assert find_config(tmp_path) is None

    def test_env_var_overrides(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = _write_config(tmp_path, "")
        monkeypatch.setenv("JACKPROP_CONFIG", str(path))
        assert find_config(Path("/")) == path

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("JACKPROP_CONFIG", str(tmp_path / "nope.toml"))
        assert find_config(tmp_path) is None


class TestSettings:
    def test_from_cli_without_config(self, tmp_path: Path) -> None:
        settings = JackpropSettings.from_cli(config_path=str(tmp_path / "missing.toml"))
        assert settings.config_path is None
        assert settings.registry.modules == []

    def test_toml_sections_loaded(self, tmp_path: Path) -> None:
        _write_config(tmp_path, '[registry]\nmodules = ["x.actions"]\n\n[output]\nwidth = 80\n')
        settings = JackpropSettings.from_cli(cwd=tmp_path)
        assert settings.config_path == tmp_path / CONFIG_FILENAME
        assert settings.registry.modules == ["x.actions"]
        assert settings.output.width == 80

    def test_cli_flags_win(self, tmp_path: Path) -> None:
        path = _write_config(tmp_path, "verbose = false\n")
        settings = JackpropSettings.from_cli(config_path=str(path), verbose=True)
        assert settings.verbose is True

    def test_env_vars(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("JACKPROP_JSON_OUTPUT", "true")
        settings = JackpropSettings.from_cli(config_path=str(tmp_path / "missing.toml"))
        assert settings.json_output is True

    def test_action_modules_merge_without_duplicates(self, tmp_path: Path) -> None:
        path = _write_config(tmp_path, '[registry]\nmodules = ["a", "b"]\n')
        settings = JackpropSettings.from_cli(config_path=str(path), modules=("b", "c"))
        assert settings.action_modules == ["a", "b", "c"]

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = _write_config(tmp_path, "[registry\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            JackpropSettings.from_cli(config_path=str(path))

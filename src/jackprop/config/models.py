"""Pydantic configuration models with code-baked defaults.

``jackprop.toml`` only needs the values that differ from these defaults::

    [registry]
    modules = ["myapp.actions"]
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class RegistryConfig(BaseModel):
    """[registry] section: where actions are discovered."""

    model_config = {"frozen": True}

    modules: list[str] = Field(default_factory=list)
    entry_points: bool = True


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = 120

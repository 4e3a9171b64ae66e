"""Config file discovery.

Walks up from the working directory looking for ``jackprop.toml``.
``JACKPROP_CONFIG`` pins an explicit file and disables the walk.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "jackprop.toml"
CONFIG_ENV_VAR = "JACKPROP_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest ``jackprop.toml`` at or above *start*, or None."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None

"""ActionRegistry: the set of actions a CLI session can list and run.

Sources, in load order (later sources win on a name clash):
  1. Plugins implementing ``register_actions``
  2. Python modules named in config or via ``--module``

A module contributes its ``ACTIONS`` mapping when it defines one, and
otherwise every module-level :class:`Action`.
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Iterable, Iterator, Mapping
from types import ModuleType

from jackprop.domain.actions import Action
from jackprop.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


def actions_from_module(module: ModuleType) -> dict[str, Action]:
    """Return the actions exported by *module*, keyed by action name."""
    exported = getattr(module, "ACTIONS", None)
    if isinstance(exported, Mapping):
        return {name: a for name, a in exported.items() if isinstance(a, Action)}
    return {a.name: a for a in vars(module).values() if isinstance(a, Action)}


class ActionRegistry:
    """Name -> Action lookup with plugin and module discovery."""

    def __init__(self, plugins: PluginManager | None = None) -> None:
        self.plugins = plugins or PluginManager()
        self._actions: dict[str, Action] = {}
        self.warnings: list[str] = []

    def register(self, action: Action, name: str | None = None) -> None:
        key = name or action.name
        if key in self._actions and self._actions[key] is not action:
            logger.warning("Action %s registered twice; keeping the later one", key)
        self._actions[key] = action

    def load(self, modules: Iterable[str] = (), *, entry_points: bool = True) -> None:
        """Populate the registry from plugins and the named modules.

        Import failures are recorded in :attr:`warnings` and logged.
        """
        if entry_points and not self.plugins.is_loaded:
            self.plugins.discover_and_load()
        for name, action in self.plugins.collect_actions().items():
            self.register(action, name)

        for module_name in modules:
            try:
                module = importlib.import_module(module_name)
            except Exception as exc:
                logger.warning("Could not import action module %s", module_name, exc_info=True)
                self.warnings.append(f"Could not import action module {module_name}: {exc}")
                continue
            for name, action in actions_from_module(module).items():
                self.register(action, name)

    def get(self, name: str) -> Action | None:
        return self._actions.get(name)

    def names(self) -> list[str]:
        return sorted(self._actions)

    def __contains__(self, name: object) -> bool:
        return name in self._actions

    def __iter__(self) -> Iterator[Action]:
        return (self._actions[n] for n in self.names())

    def __len__(self) -> int:
        return len(self._actions)

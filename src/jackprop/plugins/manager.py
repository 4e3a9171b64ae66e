"""Plugin discovery and loading.

Plugins are found through the ``jackprop.plugins`` entry-point group or
registered directly.  A plugin that fails to load or to report its
actions is logged and skipped; it never stops the others.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING

import pluggy

from jackprop.plugins.hookspecs import PROJECT_NAME, JackpropHookSpec

if TYPE_CHECKING:
    from jackprop.domain.actions import Action

ENTRY_POINT_GROUP = "jackprop.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, registration, and hook dispatch."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(JackpropHookSpec)
        self._loaded: bool = False

    def discover_and_load(self) -> list[str]:
        """Load entry-point plugins and return the names of all registered plugins."""
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def collect_actions(self) -> dict[str, Action]:
        """Gather actions from every plugin implementing ``register_actions``.

        Plugins are asked one at a time so a failing plugin only loses its
        own actions.
        """
        from jackprop.domain.actions import Action

        actions: dict[str, Action] = {}
        for plugin in self._pm.get_plugins():
            plugin_name = self._pm.get_name(plugin) or plugin.__class__.__name__
            hook = getattr(plugin, "register_actions", None)
            if hook is None:
                continue
            try:
                registered = hook()
            except Exception:
                logger.warning(
                    "Failed to collect actions from plugin %s", plugin_name, exc_info=True
                )
                continue
            if registered is None:
                continue
            if not isinstance(registered, dict):
                logger.warning("Plugin %s returned non-dict action registrations", plugin_name)
                continue
            for name, action in registered.items():
                if not isinstance(action, Action):
                    logger.warning(
                        "Skipping action %r from plugin %s: not an Action", name, plugin_name
                    )
                    continue
                actions[name] = action
        return actions

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry points may name a class; hook calls against the class leave
        ``self`` unbound.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin) or not self._has_hook_impls(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s", plugin_name, exc_info=True
                )
                continue

            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Check whether *cls* has any ``@hookimpl``-decorated methods."""
        marker = f"{PROJECT_NAME}_impl"
        for name in dir(cls):
            if name.startswith("_"):
                continue
            method = getattr(cls, name, None)
            if callable(method) and getattr(method, marker, None):
                return True
        return False

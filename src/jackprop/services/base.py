"""BaseService: shared foundation for registry-backed services."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from jackprop.services.registry import ActionRegistry

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes; holds the :class:`ActionRegistry`."""

    def __init__(self, registry: ActionRegistry) -> None:
        self._registry = registry

    def _dispatch_event(self, hook_name: str, payload: dict[str, Any], warnings: list[str]) -> None:
        """Call a plugin hook.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        hook = getattr(self._registry.plugins.hook, hook_name)
        try:
            hook(**payload)
        except Exception:
            logger.debug("Event dispatch failed for %s", hook_name, exc_info=True)
            warnings.append(f"Event dispatch failed for {hook_name}")

"""Pluggy hook specifications for jackprop.

Plugins contribute actions through ``register_actions`` and observe
invocations made through the service layer via ``post_perform``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pluggy

if TYPE_CHECKING:
    from jackprop.domain.actions import Action

PROJECT_NAME = "jackprop"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class JackpropHookSpec:
    """Hook specifications for the jackprop plugin system."""

    @hookspec
    def register_actions(self) -> dict[str, Action] | None:
        """Return action name -> Action mappings to add to the registry."""

    @hookspec
    def post_perform(
        self,
        action_name: str,
        ok: bool,
        errors: dict[str, Any] | str | None,
    ) -> None:
        """Called after every action run.

        *errors* is None on success, the validation error tree when the input
        was rejected, or ``"<ExceptionType>: <message>"`` when perform raised.
        """

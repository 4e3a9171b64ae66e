"""Command: validate input and run an action."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from jackprop.commands._base import JackpropCommand

if TYPE_CHECKING:
    from jackprop.commands._context import AppContext


class JsonObject(click.ParamType):
    """Click parameter type for a JSON object literal."""

    name = "json"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> dict[str, Any]:
        if isinstance(value, dict):
            return value
        try:
            parsed = json.loads(value)
        except json.JSONDecodeError as exc:
            self.fail(f"invalid JSON: {exc}", param, ctx)
        if not isinstance(parsed, dict):
            self.fail("expected a JSON object", param, ctx)
        return parsed


@click.command(
    cls=JackpropCommand,
    examples="""\
  jackprop run CreateUser --props '{"email": "a@b.c"}'
  jackprop run SendInvite --jacks '{"mailer": "smtp"}' --props '{"to": "a@b.c"}'
  jackprop --json run CreateUser --props '{}'""",
)
@click.argument("name")
@click.option("--jacks", type=JsonObject(), default=None, help="Jacks as a JSON object.")
@click.option("--props", type=JsonObject(), default=None, help="Props as a JSON object.")
@click.pass_obj
def run(
    app: AppContext,
    name: str,
    jacks: dict[str, Any] | None,
    props: dict[str, Any] | None,
) -> None:
    """Validate JACKS/PROPS against action NAME and run it."""
    from jackprop.services.actions import ActionService

    app.emit(ActionService(app.registry).run(name, jacks, props))

"""Commands: list registered actions and describe one."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jackprop.commands._base import JackpropCommand

if TYPE_CHECKING:
    from jackprop.commands._context import AppContext


@click.command(
    "list",
    cls=JackpropCommand,
    examples="""\
  jackprop list
  jackprop --module myapp.actions list
  jackprop --json list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List registered actions."""
    from jackprop.services.actions import ActionService

    app.emit(ActionService(app.registry).list_actions())


@click.command(
    cls=JackpropCommand,
    examples="""\
  jackprop describe CreateUser
  jackprop --json describe CreateUser""",
)
@click.argument("name")
@click.pass_obj
def describe(app: AppContext, name: str) -> None:
    """Show an action's description, fields, and validators."""
    from jackprop.services.actions import ActionService

    app.emit(ActionService(app.registry).describe(name))

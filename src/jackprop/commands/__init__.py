"""Subcommand modules for jackprop."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group (imports deferred)."""
    from jackprop.commands.describe import describe, list_cmd
    from jackprop.commands.run import run

    cli.add_command(list_cmd)
    cli.add_command(describe)
    cli.add_command(run)

"""Click base class shared by jackprop commands.

``--examples`` prints usage examples and exits, keeping ``--help`` short.
While a command runs, its name is bound into the structlog context so every
log record it triggers carries ``command=<name>``.
"""

from __future__ import annotations

from typing import Any

import click
import structlog


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a command."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class JackpropCommand(click.Command):
    """Click Command with an ``examples`` string and command-scoped log context."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)

    def invoke(self, ctx: click.Context) -> Any:
        with structlog.contextvars.bound_contextvars(command=ctx.info_name):
            return super().invoke(ctx)

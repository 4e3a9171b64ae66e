"""AppContext: shared Click context for all commands.

Created once by the root group.  The action registry is loaded lazily so
``--help`` and ``--version`` never import action modules.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jackprop.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from jackprop.config.settings import JackpropSettings
    from jackprop.services.registry import ActionRegistry
    from jackprop.services.result import ServiceResult


class AppContext:
    """Context object passed to subcommands via ``@click.pass_obj``."""

    def __init__(self, settings: JackpropSettings) -> None:
        self.settings = settings
        self._registry: ActionRegistry | None = None

        from jackprop.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def registry(self) -> ActionRegistry:
        """The action registry (loaded on first access)."""
        if self._registry is None:
            from jackprop.services.registry import ActionRegistry

            registry = ActionRegistry()
            registry.load(
                self.settings.action_modules,
                entry_points=self.settings.registry.entry_points,
            )
            self._registry = registry
        return self._registry

    def emit(self, result: ServiceResult) -> None:
        """Print a ServiceResult with exit-code semantics.

        Success goes to stdout (warnings to stderr outside JSON mode);
        failure goes to stderr and exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            width=self.settings.output.width,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

"""Output mode selection for ServiceResult.

``--json`` emits the full result as JSON, ``--quiet`` the minimum, and
the default mode renders Rich tables and trees.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from jackprop.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from jackprop.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags extracted from the CLI settings."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    width: int | None = None


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose, width=settings.width)

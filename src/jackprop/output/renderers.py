"""Operation-specific Rich renderers for ServiceResult.

Dispatched by ``result.op``; unknown ops use the generic key-value renderer.
Failed results render the error message and, for validation failures,
the error tree.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from jackprop.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from jackprop.services.result import ServiceResult


def render_result(result: ServiceResult, *, verbose: bool = False, width: int | None = None) -> str:
    """Render a ServiceResult to a string via Rich."""
    console = create_console(width=width)
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output for ``--quiet``: names for lists, the raw result for runs."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if result.op == "list_actions":
        return "\n".join(item["name"] for item in result.data.get("items", []))
    if result.op == "run_action":
        return _dumps(result.data.get("result"))
    return f"OK: {result.op}"


def error_tree(errors: Any, label: str = "errors") -> Tree:
    """Build a Rich tree mirroring a validation error mapping."""
    tree = Tree(Text(label, style="jp.error"))
    _add_errors(tree, errors)
    return tree


def _add_errors(node: Tree, errors: Any) -> None:
    if isinstance(errors, dict):
        for key, value in errors.items():
            if isinstance(value, dict):
                _add_errors(node.add(Text(str(key), style="jp.field")), value)
            else:
                line = Text.assemble((str(key), "jp.field"), ": ", str(value))
                node.add(line)
    else:
        node.add(Text(str(errors)))


def _dumps(value: Any) -> str:
    return json.dumps(value, indent=2, sort_keys=True, default=str)


def _header(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "jp.ok"), ": ", (result.op, "jp.op")))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _header(console, result)
    for key, value in result.data.items():
        rendered = _dumps(value) if isinstance(value, (dict, list)) else str(value)
        console.print(Text.assemble((f"  {key}", "jp.key"), ": ", rendered))


def _render_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    if not items:
        console.print("No actions registered.")
        return
    table = Table(show_header=True, header_style="bold")
    table.add_column("Name", style="jp.name")
    table.add_column("Description")
    for item in items:
        table.add_row(Text(item["name"]), Text(item["description"]))
    console.print(table)
    console.print(Text(f"{result.data.get('count', len(items))} action(s)", style="jp.key"))


def _render_describe(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    console.print(Text(data["name"], style="jp.name"))
    console.print(Text(data["description"]))
    for side in ("jacks", "props"):
        fields: dict[str, str] = data.get(side, {})
        table = Table(title=side, show_header=True, header_style="bold", title_justify="left")
        table.add_column("Field", style="jp.field")
        table.add_column("Validator", style="jp.validator")
        for name, label in fields.items():
            table.add_row(Text(name), Text(label))
        if not fields:
            table.add_row("—", "")
        console.print(table)
        if data.get(f"has_default_{side}"):
            console.print(Text("defaults supplied by a provider", style="jp.key"))


def _render_run(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _header(console, result)
    console.print(Text.assemble(("  action", "jp.key"), ": ", result.data.get("action", "")))
    console.print(Text(_dumps(result.data.get("result"))))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    error = result.error
    message = error.message if error else "Unknown error"
    console.print(Text.assemble(("ERROR", "jp.error"), ": ", (result.op, "jp.op"), f" — {message}"))
    if error is None:
        return
    if "errors" in error.detail:
        console.print(error_tree(error.detail["errors"]))
    if verbose and error.detail:
        console.print(Text(f"  code: {error.code}", style="jp.key"))


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "list_actions": _render_list,
    "describe_action": _render_describe,
    "run_action": _render_run,
}

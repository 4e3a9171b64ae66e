"""Rich Console factory and theme for jackprop output.

Consoles render into a StringIO buffer so renderers can return plain
strings.  Rich drops color codes automatically when not on a TTY.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

JACKPROP_THEME = Theme(
    {
        "jp.ok": "bold green",
        "jp.error": "bold red",
        "jp.warning": "bold yellow",
        "jp.op": "bold cyan",
        "jp.key": "dim",
        "jp.name": "bold blue",
        "jp.field": "bold",
        "jp.validator": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    return Console(
        file=StringIO(),
        theme=JACKPROP_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()

"""Rich Console factory and theme for rangectl output.

Consoles render into a StringIO buffer so formatters can return plain
strings. Outside a TTY (tests, pipes) Rich drops color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

RANGE_THEME = Theme(
    {
        "range.ok": "bold green",
        "range.error": "bold red",
        "range.warning": "bold yellow",
        "range.op": "bold cyan",
        "range.key": "dim",
        "range.zone": "bold blue",
        "range.instant": "magenta",
        "range.civil": "bold",
        "range.dst": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=RANGE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()

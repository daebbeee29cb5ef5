"""Rich Console factory and theme for mintcompat output.

Consoles render into a StringIO buffer so formatters keep a plain
``-> str`` contract. In non-TTY environments (tests, pipes) Rich drops
color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

MINT_THEME = Theme(
    {
        "mint.ok": "bold green",
        "mint.error": "bold red",
        "mint.warning": "bold yellow",
        "mint.op": "bold cyan",
        "mint.key": "dim",
        "mint.path": "blue",
        "mint.element": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=MINT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()

"""Rich/JSON output helpers.

The CLI renders a ServiceResult either for humans (Rich text) or for
machines (``--json``, the pydantic dump of the result).
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.text import Text

from mintcompat.output.console import create_console, get_output

if TYPE_CHECKING:
    from mintcompat.services.result import ServiceResult

# List-valued keys and the style used for their items.
_LIST_STYLES: dict[str, str] = {
    "files": "mint.path",
    "elements": "mint.element",
    "extra": "mint.element",
}


@dataclass(frozen=True)
class OutputSettings:
    json_output: bool = False
    quiet: bool = False


def _print(console: Console, text: Text) -> None:
    console.print(text, soft_wrap=True)


def _render_data(console: Console, data: dict[str, Any]) -> None:
    for key, value in data.items():
        if isinstance(value, list):
            _print(console, Text.assemble("  ", (f"{key}:", "mint.key"), f" {len(value)}"))
            style = _LIST_STYLES.get(key, "")
            for item in value:
                _print(console, Text.assemble("    - ", (str(item), style)))
        elif isinstance(value, dict):
            dumped = _json.dumps(value, separators=(",", ":"))
            _print(console, Text.assemble("  ", (f"{key}:", "mint.key"), f" {dumped}"))
        else:
            _print(console, Text.assemble("  ", (f"{key}:", "mint.key"), f" {value}"))


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    Quiet mode prints only the status line; errors always include the
    message and, unless quiet, the error detail.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)

    console = create_console()
    if result.ok:
        _print(console, Text.assemble(("OK", "mint.ok"), ": ", (result.op, "mint.op")))
        if result.data and not settings.quiet:
            _render_data(console, result.data)
    else:
        message = result.error.message if result.error else "Unknown error"
        _print(
            console,
            Text.assemble(("ERROR", "mint.error"), ": ", (result.op, "mint.op"), f" - {message}"),
        )
        if result.error and result.error.detail and not settings.quiet:
            _render_data(console, result.error.detail)
    return get_output(console).rstrip("\n")

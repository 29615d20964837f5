"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (a Rich property table) or
machines (--json). Renderers are dispatched by ``result.op``; unknown ops
fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from beanscan.output.console import create_console, get_output, style_for_element

if TYPE_CHECKING:
    from rich.console import Console

    from beanscan.services.result import ServiceResult


def format_result(result: ServiceResult, *, json_output: bool = False) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: If True, return JSON; otherwise return human-readable text.
    """
    if json_output:
        return result.model_dump_json(indent=2)

    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result.data, console)
    else:
        message = result.error.message if result.error else "Unknown error"
        console.print(Text.assemble(("ERROR", "bean.error"), f": {result.op} - {message}"))
    return get_output(console).rstrip("\n")


def _render_generic(data: dict[str, Any], console: Console) -> None:
    for key, value in data.items():
        if isinstance(value, (dict, list)):
            value = _json.dumps(value, separators=(",", ":"))
        console.print(Text.assemble((f"  {key}: ", "bean.key"), str(value)))


def _render_describe(data: dict[str, Any], console: Console) -> None:
    console.print(
        Text.assemble(
            ("OK", "bean.ok"),
            ": ",
            (data["type"], "bean.type"),
            f" ({data['size']} properties)",
        )
    )
    if not data["properties"]:
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Property", style="bean.name")
    table.add_column("Type")
    table.add_column("Elements")
    table.add_column("Annotations", style="bean.key")
    for prop in data["properties"]:
        elements = Text(", ").join(
            Text(kind, style=style_for_element(kind)) for kind in prop["elements"]
        )
        # Text cells: type names like ``list[int]`` must not be parsed as markup.
        table.add_row(
            Text(prop["name"]),
            Text(prop["type"]),
            elements,
            Text(", ".join(prop["annotations"])),
        )
    console.print(table)


_OP_RENDERERS = {
    "describe": _render_describe,
}

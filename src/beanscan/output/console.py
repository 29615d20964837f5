"""Rich Console factory and theme for beanscan output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

BEANSCAN_THEME = Theme(
    {
        "bean.ok": "bold green",
        "bean.error": "bold red",
        "bean.op": "bold cyan",
        "bean.key": "dim",
        "bean.type": "bold",
        "bean.name": "bold blue",
        "bean.element.getter": "green",
        "bean.element.setter": "yellow",
        "bean.element.field": "cyan",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=BEANSCAN_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_element(kind: str) -> str:
    """Return the Rich style name for an element kind."""
    return f"bean.element.{kind}" if kind in ("getter", "setter", "field") else ""

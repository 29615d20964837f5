"""Command: describe the property set of a class."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from beanscan.commands._base import BeanCommand

if TYPE_CHECKING:
    from beanscan.commands._context import AppContext


@click.command(
    cls=BeanCommand,
    examples="""\
  beanscan describe myapp.models:Customer
  beanscan describe myapp.models.Customer
  beanscan --json describe myapp.models:Order.Line
  beanscan -v describe myapp.models:Customer   # log skipped properties""",
)
@click.argument("target")
@click.pass_obj
def describe(app: AppContext, target: str) -> None:
    """Scan TARGET (module:Class) and list its properties."""
    from beanscan.services.describe import describe_class

    app.emit(describe_class(target))

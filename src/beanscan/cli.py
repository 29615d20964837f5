"""Root CLI group for beanscan with global flags and command registration."""

from __future__ import annotations

import click

from beanscan import __version__
from beanscan.commands import register_commands
from beanscan.commands._context import AppContext
from beanscan.config.settings import BeanscanSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="beanscan")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging (skipped properties).")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
) -> None:
    """beanscan: inspect the inferred property set of Python classes."""
    settings = BeanscanSettings.from_cli(
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)

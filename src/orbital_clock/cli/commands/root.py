"""Root CLI command registration."""

from __future__ import annotations

import click

from orbital_clock.debug_log import setup_debug_logging
from orbital_clock.version import get_version

from .angle import angle
from .config import config_cmd
from .markers import markers
from .run import run
from .tui import tui


@click.group(invoke_without_command=True)
@click.option("--version", is_flag=True, help="Show version and exit")
@click.pass_context
def cli(ctx: click.Context, version: bool) -> None:
    """Earth's place on its orbit as twinkling ASCII art."""
    if version:
        click.echo(f"orbital-clock {get_version()}")
        ctx.exit(0)

    setup_debug_logging()

    if ctx.invoked_subcommand is None:
        ctx.invoke(run)


cli.add_command(run)
cli.add_command(tui)
cli.add_command(angle)
cli.add_command(markers)
cli.add_command(config_cmd)

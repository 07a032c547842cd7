"""Config file commands."""

from __future__ import annotations

from pathlib import Path

import click

from orbital_clock.config import OrbitalClockConfig
from orbital_clock.paths import get_config_path


@click.group(name="config")
def config_cmd() -> None:
    """Inspect or create the config file."""


@config_cmd.command(name="path")
def path_cmd() -> None:
    """Print the config file location."""
    click.echo(str(get_config_path()))


@config_cmd.command(name="init")
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
@click.option(
    "--path",
    "target",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Where to write (default: user config dir)",
)
def init_cmd(force: bool, target: Path | None) -> None:
    """Write a config file with the default settings."""
    target = target or get_config_path()
    if target.exists() and not force:
        raise click.ClickException(f"{target} already exists (use --force to overwrite)")
    OrbitalClockConfig().save(target)
    click.secho(f"Wrote {target}", fg="green")

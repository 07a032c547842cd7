"""List marker positions in an art asset."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from orbital_clock.cli.options import asset_store, assets_option, config_option, load_config
from orbital_clock.errors import AssetReadError
from orbital_clock.overlay import OVERLAY_MARKERS
from orbital_clock.twinkle import find_markers

if TYPE_CHECKING:
    from pathlib import Path


@click.command()
@click.argument("asset_id")
@click.option(
    "--chars",
    default=OVERLAY_MARKERS,
    show_default=True,
    help="Characters to look for",
)
@config_option
@assets_option
def markers(asset_id: str, chars: str, config_path: Path | None, assets: Path | None) -> None:
    """Print the row and column of each marker character in ASSET_ID."""
    config = load_config(config_path)
    try:
        frame = asset_store(config, assets).load(asset_id)
    except AssetReadError as exc:
        raise click.ClickException(str(exc)) from exc

    positions = find_markers(frame, chars)
    if not positions:
        click.secho(f"No {chars!r} markers in {asset_id}", fg="yellow")
        return

    for position in positions:
        click.echo(f"{position.row:>3} {position.column:>3}  {position.char}")

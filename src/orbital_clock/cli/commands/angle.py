"""Print the orbital angle and the art it selects."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from orbital_clock.cli.options import (
    asset_store,
    assets_option,
    config_option,
    date_option,
    load_config,
)
from orbital_clock.orbit import compute_angle, days_since_epoch, local_date, seasonal_event

if TYPE_CHECKING:
    from pathlib import Path


@click.command()
@date_option
@config_option
@assets_option
def angle(when: datetime | None, config_path: Path | None, assets: Path | None) -> None:
    """Show where Earth is on its orbit and which art that selects."""
    config = load_config(config_path)
    now = when or datetime.now()
    degrees = compute_angle(now)

    today = local_date(now)
    click.echo(f"Date:   {today:%Y-%m-%d}  (day {days_since_epoch(now)} since 2000-01-01)")
    click.echo(f"Angle:  {degrees:.2f}°")

    event = seasonal_event(today, config.seasonal_events())
    if event is not None:
        asset_id = event.asset_id
        click.echo(f"Event:  {event.name}")
    else:
        asset_id = config.build_catalog().lookup(degrees)

    if asset_id is None:
        click.secho(f"Art:    none configured below {degrees:.2f}°", fg="yellow")
        return

    path = asset_store(config, assets).path_for(asset_id)
    missing = "" if path.is_file() else click.style("  (missing)", fg="red")
    click.echo(f"Art:    {asset_id}{missing}")

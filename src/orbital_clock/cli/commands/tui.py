"""Textual front end command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from orbital_clock.cli.options import (
    display_options,
    load_config,
    make_rng,
    resolve_startup,
    with_debug_log,
)

if TYPE_CHECKING:
    from datetime import datetime
    from pathlib import Path


@click.command()
@display_options
@with_debug_log
def tui(
    when: datetime | None,
    config_path: Path | None,
    assets: Path | None,
    interval: int | None,
    overlay: bool | None,
    mini: str | None,
    seed: int | None,
    debug_log: Path | None,
) -> None:
    """Show the art in a full-screen TUI (q to quit, space to pause)."""
    from orbital_clock.app import OrbitalClockApp

    config = load_config(config_path, interval=interval, overlay=overlay, mini=mini)
    startup = resolve_startup(config, when, assets)
    OrbitalClockApp(startup, config, rng=make_rng(seed)).run()

"""Console animation command."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from orbital_clock.cli.options import (
    display_options,
    load_config,
    make_rng,
    resolve_startup,
    with_debug_log,
)
from orbital_clock.errors import DisplaySurfaceError
from orbital_clock.overlay import live_overlay
from orbital_clock.render import Animator, ConsoleSurface, RenderLoop

if TYPE_CHECKING:
    from datetime import datetime
    from pathlib import Path


@click.command()
@display_options
@click.option(
    "--frames",
    type=click.IntRange(min=1),
    default=None,
    help="Stop after this many frames (default: run until interrupted)",
)
@with_debug_log
def run(
    when: datetime | None,
    config_path: Path | None,
    assets: Path | None,
    interval: int | None,
    overlay: bool | None,
    mini: str | None,
    seed: int | None,
    debug_log: Path | None,
    frames: int | None,
) -> None:
    """Animate the art in the terminal until interrupted."""
    config = load_config(config_path, interval=interval, overlay=overlay, mini=mini)
    startup = resolve_startup(config, when, assets)

    decorate = None
    if config.display.overlay:
        decorate = live_overlay(startup.angle, startup.today)
    animator = Animator(startup.frame, rng=make_rng(seed), decorate=decorate)
    loop = RenderLoop(
        animator,
        ConsoleSurface(),
        interval_ms=config.display.interval_ms,
    )

    try:
        loop.run(max_ticks=frames)
    except KeyboardInterrupt:
        pass
    except DisplaySurfaceError as exc:
        click.secho(str(exc), fg="red", err=True)
        sys.exit(1)
    finally:
        # the first frame clears the screen over the startup warning
        if startup.error is not None:
            click.secho(str(startup.error), fg="yellow", err=True)

"""Options and startup helpers shared by the display commands."""

from __future__ import annotations

import functools
import random
import tomllib
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar

import click
from pydantic import ValidationError

from orbital_clock.assets import AssetStore, parse_row_spec
from orbital_clock.config import OrbitalClockConfig
from orbital_clock.debug_log import export_logs_to_file
from orbital_clock.paths import get_debug_log_path
from orbital_clock.render import prepare

if TYPE_CHECKING:
    from collections.abc import Callable

    from orbital_clock.render import Startup

DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M", "%Y-%m-%dT%H:%M:%S"]


def _validate_rows(ctx: click.Context, param: click.Parameter, value: str | None) -> str | None:
    del ctx, param
    if value is None:
        return None
    try:
        parse_row_spec(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc
    return value


def _resolve_debug_log(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> Path | None:
    del ctx, param
    if value is None:
        return None
    # bare --debug-log
    if not value:
        return get_debug_log_path()
    return Path(value)


date_option = click.option(
    "--date",
    "when",
    type=click.DateTime(formats=DATE_FORMATS),
    default=None,
    help="Pretend it is this date instead of now (YYYY-MM-DD)",
)
config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: user config dir)",
)
assets_option = click.option(
    "--assets",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the art files",
)


F = TypeVar("F", bound="Callable[..., Any]")


def display_options(func: F) -> F:
    """Attach the options shared by ``run`` and ``tui``."""
    decorators = [
        date_option,
        config_option,
        assets_option,
        click.option(
            "--interval",
            type=click.IntRange(min=1),
            default=None,
            help="Milliseconds between frames (default 800)",
        ),
        click.option(
            "--overlay/--no-overlay",
            default=None,
            help="Stamp angle, date and time over the &, = and # placeholders",
        ),
        click.option(
            "-m",
            "--mini",
            default=None,
            callback=_validate_rows,
            help="Mini mode: art rows to hide, e.g. '0-3,7'",
        ),
        click.option("--seed", type=int, default=None, help="Seed the twinkle randomness"),
        click.option(
            "--debug-log",
            is_flag=False,
            flag_value="",
            default=None,
            callback=_resolve_debug_log,
            help="Write captured logs on exit, to PATH or the data dir's debug.log",
        ),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def load_config(
    config_path: Path | None,
    *,
    interval: int | None = None,
    overlay: bool | None = None,
    mini: str | None = None,
) -> OrbitalClockConfig:
    """Load the config file and apply command line overrides."""
    try:
        config = OrbitalClockConfig.load(config_path)
    except (OSError, tomllib.TOMLDecodeError, ValidationError) as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc

    overrides: dict[str, Any] = {}
    if interval is not None:
        overrides["interval_ms"] = interval
    if overlay is not None:
        overrides["overlay"] = overlay
    if mini is not None:
        overrides["hidden_rows"] = mini
    if overrides:
        config = config.model_copy(
            update={"display": config.display.model_copy(update=overrides)}
        )
    return config


def asset_store(config: OrbitalClockConfig, assets: Path | None) -> AssetStore:
    if assets is not None:
        return AssetStore(assets)
    return AssetStore(config.asset_root())


def resolve_startup(
    config: OrbitalClockConfig, when: datetime | None, assets: Path | None
) -> Startup:
    startup = prepare(
        when or datetime.now(),
        config.build_catalog(),
        asset_store(config, assets),
        seasonal=config.seasonal_events(),
        hidden_rows=config.display.hidden_row_set,
    )
    if startup.error is not None:
        click.secho(str(startup.error), fg="yellow", err=True)
    return startup


def make_rng(seed: int | None) -> random.Random | None:
    return random.Random(seed) if seed is not None else None


def export_debug_log(path: Path | None) -> None:
    if path is None:
        return
    count = export_logs_to_file(path)
    click.echo(f"Wrote {count} log entries to {path}", err=True)


def with_debug_log(func: Callable[..., Any]) -> Callable[..., Any]:
    """Export the captured log after the command finishes, however it finishes."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        finally:
            export_debug_log(kwargs.get("debug_log"))

    return wrapper

"""Startup resolution and the render/wait loop."""

from __future__ import annotations

import logging
import sys
import time
from dataclasses import dataclass
from typing import IO, TYPE_CHECKING, Protocol

from orbital_clock.assets import hide_rows
from orbital_clock.errors import AssetReadError, DisplaySurfaceError, LookupMiss
from orbital_clock.limits import TICK_INTERVAL_MS
from orbital_clock.orbit import compute_angle, local_date, seasonal_event
from orbital_clock.twinkle import DEFAULT_PALETTE, twinkle

if TYPE_CHECKING:
    from collections.abc import Callable, Collection, Iterable
    from datetime import date, datetime

    from orbital_clock.assets import AssetStore
    from orbital_clock.catalog import ArtCatalog
    from orbital_clock.orbit import SeasonalEvent
    from orbital_clock.twinkle import ArtFrame, ChoiceSource, MarkerPalette

log = logging.getLogger(__name__)

CLEAR_AND_HOME = "\x1b[2J\x1b[1;1H"


class DisplaySurface(Protocol):
    def clear(self) -> None: ...

    def write_line(self, line: str) -> None: ...


class ConsoleSurface:
    """Display surface backed by a text stream that understands ANSI escapes."""

    def __init__(self, stream: IO[str] | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout

    def _write(self, text: str) -> None:
        try:
            self._stream.write(text)
            self._stream.flush()
        except (OSError, ValueError) as exc:
            raise DisplaySurfaceError(f"Cannot write to display: {exc}") from exc

    def clear(self) -> None:
        self._write(CLEAR_AND_HOME)

    def write_line(self, line: str) -> None:
        self._write(line + "\n")


@dataclass(frozen=True, slots=True)
class Startup:
    """Everything resolved once at startup."""

    angle: float
    today: date
    asset_id: str | None
    frame: ArtFrame
    error: LookupMiss | AssetReadError | None = None
    event: SeasonalEvent | None = None

    @property
    def degraded(self) -> bool:
        return self.error is not None


def prepare(
    now: datetime,
    catalog: ArtCatalog,
    store: AssetStore,
    *,
    seasonal: Iterable[SeasonalEvent] = (),
    hidden_rows: Collection[int] = (),
) -> Startup:
    """Resolve the original frame for ``now``.

    Seasonal dates take priority over the catalog. Lookup misses and
    unreadable assets are logged and yield an empty frame instead of raising.
    """
    angle = compute_angle(now)
    today = local_date(now)
    event = seasonal_event(today, seasonal)
    asset_id: str | None = event.asset_id if event is not None else None

    try:
        if asset_id is None:
            asset_id = catalog.resolve(angle)
        frame = hide_rows(store.load(asset_id), hidden_rows)
    except (LookupMiss, AssetReadError) as exc:
        log.warning("%s; showing an empty frame", exc)
        return Startup(
            angle=angle, today=today, asset_id=asset_id, frame=(), error=exc, event=event
        )

    log.info("Angle %.2f resolved to %s", angle, asset_id)
    return Startup(angle=angle, today=today, asset_id=asset_id, frame=frame, event=event)


class Animator:
    """Produces twinkled frames from an original that it never modifies."""

    def __init__(
        self,
        original: ArtFrame,
        *,
        palette: MarkerPalette = DEFAULT_PALETTE,
        rng: ChoiceSource | None = None,
        decorate: Callable[[ArtFrame], ArtFrame] | None = None,
    ) -> None:
        self._original = tuple(original)
        self._palette = palette
        self._rng = rng
        self._decorate = decorate

    @property
    def original(self) -> ArtFrame:
        return self._original

    def next_frame(self) -> ArtFrame:
        frame = twinkle(self._original, self._palette, self._rng)
        if self._decorate is not None:
            frame = self._decorate(frame)
        return frame


class RenderLoop:
    """Render -> wait, repeated until stopped or the process is killed."""

    def __init__(
        self,
        animator: Animator,
        surface: DisplaySurface,
        *,
        interval_ms: int = TICK_INTERVAL_MS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.animator = animator
        self.surface = surface
        self.interval = interval_ms / 1000
        self._sleep = sleep
        self._stopped = False
        self.ticks = 0

    def stop(self) -> None:
        """Ask the loop to finish at the next tick boundary."""
        self._stopped = True

    def render_once(self) -> ArtFrame:
        frame = self.animator.next_frame()
        self.surface.clear()
        for line in frame:
            self.surface.write_line(line)
        self.ticks += 1
        return frame

    def run(self, max_ticks: int | None = None) -> int:
        """Run the animation; returns the number of frames rendered.

        Without ``max_ticks`` this only returns after :meth:`stop`.
        """
        while not self._stopped:
            self.render_once()
            if max_ticks is not None and self.ticks >= max_ticks:
                break
            self._sleep(self.interval)
        return self.ticks

"""Approximate Earth's position along its orbit from the calendar.

The orbit is treated as a circle walked at a constant rate of
``360 / 365.25`` degrees per day, starting at 0 degrees on 2000-01-01.
This is a novelty approximation, not an ephemeris.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import TYPE_CHECKING

from orbital_clock.limits import DAYS_PER_YEAR, FULL_CIRCLE

if TYPE_CHECKING:
    from collections.abc import Iterable

EPOCH = datetime(2000, 1, 1, 0, 0, 0)
DEGREES_PER_DAY = FULL_CIRCLE / DAYS_PER_YEAR

_ONE_DAY = timedelta(days=1)


def _as_local_naive(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment
    return moment.astimezone().replace(tzinfo=None)


def days_since_epoch(now: datetime) -> int:
    """Whole days elapsed since the epoch, truncated toward zero."""
    return int((_as_local_naive(now) - EPOCH) / _ONE_DAY)


def local_date(moment: datetime) -> date:
    """Calendar day of ``moment`` in local time, matching :func:`days_since_epoch`."""
    return _as_local_naive(moment).date()


def compute_angle(now: datetime) -> float:
    """Return the orbital angle in degrees, in the range [0, 360)."""
    angle = (days_since_epoch(now) * FULL_CIRCLE / DAYS_PER_YEAR) % FULL_CIRCLE
    # float modulo of a tiny negative value rounds up to the divisor
    if angle >= FULL_CIRCLE:
        return 0.0
    return angle


@dataclass(frozen=True, slots=True)
class SeasonalEvent:
    """A calendar day that shows dedicated art instead of the catalog pick."""

    name: str
    month: int
    day: int
    asset_id: str

    def matches(self, today: date) -> bool:
        return today.month == self.month and today.day == self.day


DEFAULT_SEASONAL_EVENTS: tuple[SeasonalEvent, ...] = (
    SeasonalEvent("vernal equinox", 3, 20, "vernal_equinox.txt"),
    SeasonalEvent("summer solstice", 6, 21, "summer_solstice.txt"),
    SeasonalEvent("autumnal equinox", 9, 22, "autumnal_equinox.txt"),
    SeasonalEvent("winter solstice", 12, 21, "winter_solstice.txt"),
)


def seasonal_event(today: date, events: Iterable[SeasonalEvent]) -> SeasonalEvent | None:
    """Return the first event falling on ``today``, if any."""
    for event in events:
        if event.matches(today):
            return event
    return None

"""Stamp live values over placeholder characters in the art.

Placeholders: ``&`` angle, ``=`` date, ``#`` time. The first occurrence of
each placeholder on a line is overwritten in place, clipped to the line, so
line lengths never change.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from datetime import date

    from orbital_clock.twinkle import ArtFrame

ANGLE_MARKER = "&"
DATE_MARKER = "="
TIME_MARKER = "#"
OVERLAY_MARKERS = ANGLE_MARKER + DATE_MARKER + TIME_MARKER


def stamp(line: str, marker: str, value: str) -> str:
    """Overwrite ``line`` with ``value`` from the first ``marker`` onward."""
    start = line.find(marker)
    if start == -1 or not value:
        return line
    end = min(len(line), start + len(value))
    return line[:start] + value[: end - start] + line[end:]


def apply_overlay(frame: ArtFrame, values: Mapping[str, str]) -> ArtFrame:
    """Return a new frame with every placeholder in ``values`` stamped."""
    stamped = []
    for line in frame:
        for marker, value in values.items():
            line = stamp(line, marker, value)
        stamped.append(line)
    return tuple(stamped)


def overlay_values(angle: float, today: date, now: datetime) -> dict[str, str]:
    return {
        ANGLE_MARKER: f"{angle:.2f}",
        DATE_MARKER: today.strftime("%Y-%m-%d"),
        TIME_MARKER: now.strftime("%H:%M"),
    }


def live_overlay(
    angle: float, today: date, clock: Callable[[], datetime] = datetime.now
) -> Callable[[ArtFrame], ArtFrame]:
    """Build a frame decorator stamping the startup angle and date and the current time."""

    def decorate(frame: ArtFrame) -> ArtFrame:
        return apply_overlay(frame, overlay_values(angle, today, clock()))

    return decorate

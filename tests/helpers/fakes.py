"""Test doubles for the display surface and randomness source."""

from __future__ import annotations

from typing import TYPE_CHECKING

from orbital_clock.errors import DisplaySurfaceError

if TYPE_CHECKING:
    from collections.abc import Sequence


class AlwaysBlank:
    """Randomness double that always picks the last substitute (the blank)."""

    def __init__(self) -> None:
        self.calls = 0

    def choice(self, seq: Sequence[str]) -> str:
        self.calls += 1
        return seq[-1]


class AlwaysFirst:
    """Randomness double that always keeps the marker itself."""

    def choice(self, seq: Sequence[str]) -> str:
        return seq[0]


class RecordingSurface:
    """Display surface that records every clear and line."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []

    def clear(self) -> None:
        self.events.append(("clear", ""))

    def write_line(self, line: str) -> None:
        self.events.append(("line", line))

    @property
    def clears(self) -> int:
        return sum(1 for kind, _ in self.events if kind == "clear")

    def frames(self) -> list[list[str]]:
        """Lines grouped by the clear that preceded them."""
        frames: list[list[str]] = []
        for kind, line in self.events:
            if kind == "clear":
                frames.append([])
            else:
                frames[-1].append(line)
        return frames


class BrokenSurface:
    """Display surface whose writes always fail."""

    def clear(self) -> None:
        raise DisplaySurfaceError("display went away")

    def write_line(self, line: str) -> None:
        raise DisplaySurfaceError("display went away")


class RecordingSleep:
    def __init__(self) -> None:
        self.delays: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)

"""Twinkle effect: random per-character substitution of marker characters."""

from __future__ import annotations

import random
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Protocol, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

ArtFrame: TypeAlias = tuple[str, ...]
"""Lines of art. Tuples keep the original frame safe from in-place edits."""

BLANK = " "


class ChoiceSource(Protocol):
    """Anything that can pick one element of a sequence (``random.Random`` fits)."""

    def choice(self, seq: Sequence[str]) -> str: ...


class MarkerPalette:
    """Read-only mapping of marker character to its substitutes."""

    __slots__ = ("_substitutes",)

    def __init__(self, substitutes: Mapping[str, Sequence[str]]) -> None:
        frozen: dict[str, tuple[str, ...]] = {}
        for marker, choices in substitutes.items():
            if len(marker) != 1:
                raise ValueError(f"Marker must be a single character, got {marker!r}")
            options = tuple(choices)
            if not options or any(len(option) != 1 for option in options):
                raise ValueError(f"Substitutes for {marker!r} must be single characters")
            frozen[marker] = options
        self._substitutes = MappingProxyType(frozen)

    @property
    def markers(self) -> frozenset[str]:
        return frozenset(self._substitutes)

    def __contains__(self, char: object) -> bool:
        return char in self._substitutes

    def substitutes(self, marker: str) -> tuple[str, ...]:
        return self._substitutes[marker]

    def as_mapping(self) -> Mapping[str, tuple[str, ...]]:
        return self._substitutes


DEFAULT_PALETTE = MarkerPalette(
    {
        "*": ("*", "+", ".", BLANK),
        "┼": ("┼", "├", "─", BLANK),
    }
)

_rng = random.Random()


def twinkle(
    frame: ArtFrame,
    palette: MarkerPalette = DEFAULT_PALETTE,
    rng: ChoiceSource | None = None,
) -> ArtFrame:
    """Return a new frame with every marker swapped for a random substitute.

    Non-marker characters pass through untouched, so line count and line
    lengths are preserved. ``frame`` itself is never modified.
    """
    choose = (rng or _rng).choice
    table = palette.as_mapping()
    return tuple(
        "".join(choose(table[char]) if char in table else char for char in line) for line in frame
    )


@dataclass(frozen=True, slots=True)
class MarkerPosition:
    row: int
    column: int
    char: str


def find_markers(frame: ArtFrame, markers: Iterable[str]) -> list[MarkerPosition]:
    """List every position of the given characters, row by row."""
    wanted = set(markers)
    return [
        MarkerPosition(row, column, char)
        for row, line in enumerate(frame)
        for column, char in enumerate(line)
        if char in wanted
    ]

"""Angle-to-art catalog with floor-style lookup."""

from __future__ import annotations

import math
from bisect import bisect_left
from dataclasses import dataclass
from typing import TYPE_CHECKING

from orbital_clock.errors import LookupMiss

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping


@dataclass(frozen=True, slots=True, order=True)
class CatalogEntry:
    """One row of the catalog: art shown from ``threshold`` degrees onward."""

    threshold: int
    asset_id: str


class ArtCatalog:
    """Immutable table of catalog entries sorted by threshold.

    Thresholds are unique but need not cover the whole circle. A lookup
    resolves to the entry with the largest threshold strictly below the
    truncated angle, so angles between two thresholds use the lower one.
    """

    __slots__ = ("_entries", "_thresholds")

    def __init__(self, entries: Iterable[CatalogEntry]) -> None:
        ordered = tuple(sorted(entries))
        thresholds = tuple(entry.threshold for entry in ordered)
        if len(set(thresholds)) != len(thresholds):
            raise ValueError("Catalog thresholds must be unique")
        self._entries = ordered
        self._thresholds = thresholds

    @classmethod
    def from_mapping(cls, table: Mapping[int, str]) -> ArtCatalog:
        return cls(CatalogEntry(threshold, asset_id) for threshold, asset_id in table.items())

    @property
    def entries(self) -> tuple[CatalogEntry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries)

    def find_entry(self, angle: float) -> CatalogEntry | None:
        """Return the entry with the greatest threshold below ``floor(angle)``."""
        index = bisect_left(self._thresholds, math.floor(angle)) - 1
        if index < 0:
            return None
        return self._entries[index]

    def lookup(self, angle: float) -> str | None:
        """Return the asset id for ``angle``, or None when nothing lies below it."""
        entry = self.find_entry(angle)
        return entry.asset_id if entry is not None else None

    def resolve(self, angle: float) -> str:
        """Like :meth:`lookup`, but raise :class:`LookupMiss` instead of returning None."""
        asset_id = self.lookup(angle)
        if asset_id is None:
            raise LookupMiss(angle)
        return asset_id


DEFAULT_CATALOG_TABLE: dict[int, str] = {
    0: "orbit_000.txt",
    20: "orbit_020.txt",
    40: "orbit_040.txt",
    60: "orbit_060.txt",
    90: "orbit_090.txt",
    120: "orbit_120.txt",
    140: "orbit_140.txt",
    160: "orbit_160.txt",
    180: "orbit_180.txt",
    200: "orbit_200.txt",
    220: "orbit_220.txt",
    240: "orbit_240.txt",
    270: "orbit_270.txt",
    300: "orbit_300.txt",
    320: "orbit_320.txt",
    340: "orbit_340.txt",
}

DEFAULT_CATALOG = ArtCatalog.from_mapping(DEFAULT_CATALOG_TABLE)

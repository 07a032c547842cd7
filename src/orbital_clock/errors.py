"""Error taxonomy for orbital-clock."""

from __future__ import annotations


class OrbitalClockError(Exception):
    """Base class for all orbital-clock errors."""


class LookupMiss(OrbitalClockError):
    """The orbital angle falls below every catalog threshold."""

    def __init__(self, angle: float) -> None:
        self.angle = angle
        super().__init__(f"No art configured below {angle:.2f} degrees")


class AssetReadError(OrbitalClockError):
    """An art asset could not be read from the asset store."""

    def __init__(self, asset_id: str, reason: str) -> None:
        self.asset_id = asset_id
        self.reason = reason
        super().__init__(f"Error loading ASCII art {asset_id!r}: {reason}")


class DisplaySurfaceError(OrbitalClockError):
    """The display surface can no longer be written to."""

"""Read-only art asset store."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING

from orbital_clock.errors import AssetReadError
from orbital_clock.paths import get_bundled_art_dir

if TYPE_CHECKING:
    from collections.abc import Collection

    from orbital_clock.twinkle import ArtFrame

log = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_ROW_SPEC = re.compile(r"^\s*(\d+)\s*(?:-\s*(\d+)\s*)?$")


def split_lines(text: str) -> ArtFrame:
    """Split text on line breaks, keeping every other character as-is."""
    if not text:
        return ()
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return tuple(lines)


class AssetStore:
    """Text files addressed by a path relative to ``root``."""

    def __init__(self, root: Path | None = None) -> None:
        self.root = root if root is not None else get_bundled_art_dir()

    def path_for(self, asset_id: str) -> Path:
        return self.root / asset_id

    def load(self, asset_id: str) -> ArtFrame:
        """Load an asset as lines of art.

        Raises:
            AssetReadError: The file is missing, unreadable or not UTF-8.
        """
        path = self.path_for(asset_id)
        try:
            with path.open(encoding="utf-8", newline="") as handle:
                text = handle.read()
        except UnicodeDecodeError as exc:
            raise AssetReadError(asset_id, f"not valid UTF-8 ({exc.reason})") from exc
        except OSError as exc:
            raise AssetReadError(asset_id, exc.strerror or str(exc)) from exc

        frame = split_lines(text)
        log.debug("Loaded asset %s (%d lines) from %s", asset_id, len(frame), path)
        return frame


def parse_row_spec(spec: str) -> frozenset[int]:
    """Parse a mini-mode row list such as ``"0-3,7"`` into row indices.

    Raises:
        ValueError: On anything that is not a comma separated list of
            non-negative integers or ascending ``start-end`` ranges.
    """
    rows: set[int] = set()
    if not spec.strip():
        return frozenset()
    for part in spec.split(","):
        match = _ROW_SPEC.match(part)
        if match is None:
            raise ValueError(f"Invalid row or range: {part.strip()!r}")
        start = int(match.group(1))
        end = int(match.group(2)) if match.group(2) is not None else start
        if end < start:
            raise ValueError(f"Range end before start: {part.strip()!r}")
        rows.update(range(start, end + 1))
    return frozenset(rows)


def hide_rows(frame: ArtFrame, rows: Collection[int]) -> ArtFrame:
    """Drop the given row indices; indices past the end are ignored."""
    if not rows:
        return frame
    return tuple(line for index, line in enumerate(frame) if index not in rows)

"""Pytest fixtures for orbital-clock tests."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from hypothesis import Phase, Verbosity, settings

_TEST_BASE_DIR = Path(tempfile.mkdtemp(prefix="orbital-clock-tests-"))
os.environ["ORBITAL_CLOCK_CONFIG_DIR"] = str(_TEST_BASE_DIR / "config")
os.environ["ORBITAL_CLOCK_DATA_DIR"] = str(_TEST_BASE_DIR / "data")
os.environ.pop("ORBITAL_CLOCK_ASSETS_DIR", None)

from orbital_clock.assets import AssetStore  # noqa: E402
from orbital_clock.catalog import ArtCatalog  # noqa: E402
from tests.helpers.fakes import AlwaysBlank, RecordingSurface  # noqa: E402

if TYPE_CHECKING:
    from collections.abc import Callable


settings.register_profile(
    "ci",
    max_examples=100,
    deadline=None,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
)
settings.register_profile(
    "dev",
    max_examples=20,
    deadline=500,
)
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    deadline=None,
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


SAMPLE_ART = "AB*C\n┼┼\nXY\n"

THRESHOLDS = tuple(range(0, 360, 20))


@pytest.fixture
def art_dir(tmp_path: Path) -> Path:
    """Asset store with one file per 20-degree threshold plus the sample art."""
    root = tmp_path / "art"
    root.mkdir()
    for threshold in THRESHOLDS:
        (root / f"orbit_{threshold:03d}.txt").write_text(
            f"* {threshold:03d} ┼\n  *  \n", encoding="utf-8"
        )
    (root / "sample.txt").write_text(SAMPLE_ART, encoding="utf-8")
    return root


@pytest.fixture
def store(art_dir: Path) -> AssetStore:
    return AssetStore(art_dir)


@pytest.fixture
def catalog() -> ArtCatalog:
    return ArtCatalog.from_mapping({t: f"orbit_{t:03d}.txt" for t in THRESHOLDS})


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def always_blank() -> AlwaysBlank:
    return AlwaysBlank()


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Write a TOML config file and return its path."""

    def _write(content: str) -> Path:
        path = tmp_path / "config.toml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write

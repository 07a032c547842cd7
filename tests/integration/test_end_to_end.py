"""End-to-end: fixed clock, bundled art, default catalog, console surface."""

from __future__ import annotations

import io
from datetime import datetime

import pytest

from orbital_clock.assets import AssetStore
from orbital_clock.config import OrbitalClockConfig
from orbital_clock.overlay import OVERLAY_MARKERS, live_overlay
from orbital_clock.render import CLEAR_AND_HOME, Animator, ConsoleSurface, RenderLoop, prepare
from orbital_clock.twinkle import DEFAULT_PALETTE
from tests.helpers.fakes import AlwaysBlank, RecordingSleep

pytestmark = pytest.mark.integration


@pytest.fixture
def config() -> OrbitalClockConfig:
    return OrbitalClockConfig()


def test_twenty_days_after_epoch_uses_zero_threshold_art(config: OrbitalClockConfig):
    startup = prepare(
        datetime(2000, 1, 21),
        config.build_catalog(),
        AssetStore(),
        seasonal=config.seasonal_events(),
    )

    assert startup.angle == pytest.approx(19.71, abs=0.01)
    assert startup.asset_id == "orbit_000.txt"
    assert startup.frame == AssetStore().load("orbit_000.txt")


def test_solstice_overrides_catalog(config: OrbitalClockConfig):
    startup = prepare(
        datetime(2023, 6, 21, 22, 30),
        config.build_catalog(),
        AssetStore(),
        seasonal=config.seasonal_events(),
    )
    assert startup.asset_id == "summer_solstice.txt"
    assert startup.event is not None


def test_blank_twinkle_does_not_drift(config: OrbitalClockConfig):
    startup = prepare(datetime(2000, 1, 21), config.build_catalog(), AssetStore())
    stream = io.StringIO()
    loop = RenderLoop(
        Animator(startup.frame, rng=AlwaysBlank()),
        ConsoleSurface(stream),
        sleep=RecordingSleep(),
    )

    loop.run(max_ticks=3)

    frames = [chunk for chunk in stream.getvalue().split(CLEAR_AND_HOME) if chunk]
    assert len(frames) == 3
    assert frames[0] == frames[1] == frames[2]
    assert not any(char in DEFAULT_PALETTE for char in frames[2])
    assert any(char in DEFAULT_PALETTE for line in startup.frame for char in line)


def test_overlay_stamps_bundled_art(config: OrbitalClockConfig):
    startup = prepare(datetime(2000, 1, 21), config.build_catalog(), AssetStore())
    decorate = live_overlay(startup.angle, startup.today, lambda: datetime(2000, 1, 21, 6, 5))
    stream = io.StringIO()
    loop = RenderLoop(
        Animator(startup.frame, rng=AlwaysBlank(), decorate=decorate),
        ConsoleSurface(stream),
        sleep=RecordingSleep(),
    )

    loop.run(max_ticks=1)

    rendered = stream.getvalue()
    assert "angle 19.71  date 2000-01-21 time 06:05" in rendered
    assert not any(marker in rendered for marker in OVERLAY_MARKERS)

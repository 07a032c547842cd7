"""Textual front end: the same twinkling art inside a full-screen TUI."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text
from textual.app import App
from textual.containers import Container
from textual.widgets import Footer, Static

from orbital_clock.config import OrbitalClockConfig
from orbital_clock.keybindings import APP_BINDINGS
from orbital_clock.overlay import live_overlay
from orbital_clock.render import Animator
from orbital_clock.theme import NIGHT_SKY_THEME, NIGHT_SKY_THEME_256, pick_theme

if TYPE_CHECKING:
    from textual.app import ComposeResult
    from textual.timer import Timer

    from orbital_clock.render import Startup
    from orbital_clock.twinkle import ArtFrame, ChoiceSource


class OrbitalClockApp(App):
    """Full-screen orbital clock."""

    TITLE = "orbital clock"
    CSS_PATH = "styles/orbital_clock.tcss"

    BINDINGS = APP_BINDINGS

    def __init__(
        self,
        startup: Startup,
        config: OrbitalClockConfig | None = None,
        rng: ChoiceSource | None = None,
    ) -> None:
        super().__init__()

        self.register_theme(NIGHT_SKY_THEME)
        self.register_theme(NIGHT_SKY_THEME_256)
        self.theme = pick_theme()

        self.startup = startup
        self.clock_config = config or OrbitalClockConfig()
        decorate = None
        if self.clock_config.display.overlay:
            decorate = live_overlay(startup.angle, startup.today)
        self.animator = Animator(startup.frame, rng=rng, decorate=decorate)
        self.current_frame: ArtFrame = ()
        self.frames_rendered = 0
        self.twinkle_paused = False
        self._timer: Timer | None = None

    def compose(self) -> ComposeResult:
        with Container(id="sky"):
            yield Static(id="art")
        yield Static(self._status_text(), id="status", markup=False)
        yield Footer()

    def on_mount(self) -> None:
        status = self.query_one("#status", Static)
        status.set_class(self.startup.degraded, "degraded")
        self.advance()
        self._timer = self.set_interval(
            self.clock_config.display.interval_ms / 1000, self.advance, pause=False
        )

    def on_unmount(self) -> None:
        if self._timer is not None:
            self._timer.stop()

    def _status_text(self) -> str:
        if self.startup.error is not None:
            return str(self.startup.error)
        label = f"{self.startup.angle:.2f}°  {self.startup.asset_id}"
        if self.startup.event is not None:
            label += f"  ({self.startup.event.name})"
        return label

    def advance(self) -> None:
        """Render the next twinkle of the original frame."""
        if self.twinkle_paused:
            return
        self.current_frame = self.animator.next_frame()
        self.query_one("#art", Static).update(Text("\n".join(self.current_frame)))
        self.frames_rendered += 1

    def action_toggle_pause(self) -> None:
        self.twinkle_paused = not self.twinkle_paused
        status = self.query_one("#status", Static)
        status.set_class(self.twinkle_paused, "paused")
        status.update(("paused  " if self.twinkle_paused else "") + self._status_text())

"""Keybindings for the orbital clock TUI."""

from __future__ import annotations

from textual.binding import Binding, BindingType

APP_BINDINGS: list[BindingType] = [
    Binding("q", "quit", "Quit"),
    Binding("space", "toggle_pause", "Pause", key_display="Space"),
    Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
]

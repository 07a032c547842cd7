"""Textual themes for the orbital clock TUI."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from textual.theme import Theme

if TYPE_CHECKING:
    from collections.abc import Mapping

# Deep space: near-black sky, pale starlight, a warm sun
NIGHT_SKY_THEME = Theme(
    name="night-sky",
    primary="#7aa2f7",  # Earthshine blue
    secondary="#e0af68",  # Sunlight
    accent="#bb9af7",  # Nebula violet
    foreground="#c0caf5",  # Starlight
    background="#0b0e14",  # Deep space
    surface="#11151c",
    panel="#1a1f29",
    warning="#e0af68",
    error="#f7768e",
    success="#9ece6a",
    dark=True,
    variables={
        "border": "#232a36",
        "text-muted": "#565f89",
        "footer-key-foreground": "#565f89",
        "footer-key-background": "transparent",
        "footer-description-foreground": "#565f8980",
    },
)

# Nearest xterm-256 colours for terminals without truecolor
NIGHT_SKY_THEME_256 = Theme(
    name="night-sky-256",
    primary="#5f87ff",  # color(69)
    secondary="#d7af5f",  # color(179)
    accent="#af87ff",  # color(141)
    foreground="#d0d0ff",  # color(189)
    background="#080808",  # color(232)
    surface="#121212",  # color(233)
    panel="#1c1c1c",  # color(234)
    warning="#d7af5f",
    error="#ff5f87",  # color(204)
    success="#87d75f",  # color(113)
    dark=True,
    variables={
        "border": "#262626",
        "text-muted": "#5f5f87",
        "footer-key-foreground": "#5f5f87",
        "footer-key-background": "transparent",
        "footer-description-foreground": "#5f5f8780",
    },
)

_TRUECOLOR_HINTS = ("truecolor", "24bit")


def pick_theme(environ: Mapping[str, str] | None = None) -> str:
    """Name of the night sky theme suited to the terminal's colour depth.

    An explicit TEXTUAL_COLOR_SYSTEM wins. Otherwise the full palette is used
    only when the terminal advertises 24-bit colour; anything unknown gets the
    256-colour variant.
    """
    env = os.environ if environ is None else environ
    forced = env.get("TEXTUAL_COLOR_SYSTEM", "auto").lower()
    if forced not in ("", "auto"):
        return NIGHT_SKY_THEME.name if forced == "truecolor" else NIGHT_SKY_THEME_256.name

    # Terminal.app sets COLORTERM=truecolor but renders 256 colours
    if env.get("TERM_PROGRAM") == "Apple_Terminal":
        return NIGHT_SKY_THEME_256.name
    if env.get("COLORTERM", "").lower() in _TRUECOLOR_HINTS or env.get("WT_SESSION"):
        return NIGHT_SKY_THEME.name
    return NIGHT_SKY_THEME_256.name

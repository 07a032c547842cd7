"""XDG-compliant path helpers for orbital-clock."""

from __future__ import annotations

import os
from importlib import resources
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir

APP_NAME = "orbital-clock"


def get_config_dir() -> Path:
    """Get the config directory (config.toml)."""
    override = os.environ.get("ORBITAL_CLOCK_CONFIG_DIR")
    if override:
        return Path(override)
    return Path(user_config_dir(APP_NAME))


def get_data_dir() -> Path:
    """Get the data directory (debug log exports)."""
    override = os.environ.get("ORBITAL_CLOCK_DATA_DIR")
    if override:
        return Path(override)
    return Path(user_data_dir(APP_NAME))


def get_config_path() -> Path:
    """Get the path to the main config file."""
    return get_config_dir() / "config.toml"


def get_debug_log_path() -> Path:
    """Get the default path for debug log exports."""
    return get_data_dir() / "debug.log"


def get_bundled_art_dir() -> Path:
    """Get the directory holding the art shipped with the package."""
    return Path(str(resources.files("orbital_clock") / "art"))


def get_asset_root(configured: str | Path | None = None) -> Path:
    """Resolve the asset store root.

    Priority: ORBITAL_CLOCK_ASSETS_DIR, then the configured root, then the bundled art.
    """
    override = os.environ.get("ORBITAL_CLOCK_ASSETS_DIR")
    if override:
        return Path(override)
    if configured:
        return Path(configured).expanduser()
    return get_bundled_art_dir()

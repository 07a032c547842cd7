"""Configuration loader for orbital-clock."""

from __future__ import annotations

import os
import tempfile
import tomllib
from pathlib import Path

import tomlkit
from pydantic import BaseModel, Field, field_validator, model_validator

from orbital_clock.assets import parse_row_spec
from orbital_clock.catalog import DEFAULT_CATALOG_TABLE, ArtCatalog, CatalogEntry
from orbital_clock.limits import FULL_CIRCLE, TICK_INTERVAL_MS
from orbital_clock.orbit import DEFAULT_SEASONAL_EVENTS, SeasonalEvent
from orbital_clock.paths import get_asset_root, get_config_path


class DisplayConfig(BaseModel):
    """How frames are drawn."""

    interval_ms: int = Field(default=TICK_INTERVAL_MS, gt=0, description="Delay between frames")
    overlay: bool = Field(
        default=False, description="Stamp angle, date and time over &, = and # in the art"
    )
    hidden_rows: str = Field(
        default="", description="Mini mode: art rows to hide, e.g. '0-3,7'"
    )

    @field_validator("hidden_rows")
    @classmethod
    def validate_hidden_rows(cls, value: str) -> str:
        parse_row_spec(value)
        return value

    @property
    def hidden_row_set(self) -> frozenset[int]:
        return parse_row_spec(self.hidden_rows)


class AssetsConfig(BaseModel):
    """Where art files are read from."""

    root: str = Field(default="", description="Asset directory (empty = bundled art)")


class CatalogEntryConfig(BaseModel):
    threshold: int = Field(..., ge=0, lt=int(FULL_CIRCLE))
    asset: str = Field(..., min_length=1)


class SeasonalConfig(BaseModel):
    name: str
    month: int = Field(..., ge=1, le=12)
    day: int = Field(..., ge=1, le=31)
    asset: str = Field(..., min_length=1)


def _default_catalog() -> list[CatalogEntryConfig]:
    return [
        CatalogEntryConfig(threshold=threshold, asset=asset)
        for threshold, asset in DEFAULT_CATALOG_TABLE.items()
    ]


def _default_seasonal() -> list[SeasonalConfig]:
    return [
        SeasonalConfig(name=event.name, month=event.month, day=event.day, asset=event.asset_id)
        for event in DEFAULT_SEASONAL_EVENTS
    ]


class OrbitalClockConfig(BaseModel):
    """Root configuration model."""

    display: DisplayConfig = Field(default_factory=DisplayConfig)
    assets: AssetsConfig = Field(default_factory=AssetsConfig)
    catalog: list[CatalogEntryConfig] = Field(default_factory=_default_catalog)
    seasonal: list[SeasonalConfig] = Field(default_factory=_default_seasonal)

    @model_validator(mode="after")
    def check_unique_thresholds(self) -> OrbitalClockConfig:
        thresholds = [entry.threshold for entry in self.catalog]
        duplicates = sorted({t for t in thresholds if thresholds.count(t) > 1})
        if duplicates:
            raise ValueError(f"Duplicate catalog thresholds: {duplicates}")
        return self

    @classmethod
    def load(cls, config_path: Path | None = None) -> OrbitalClockConfig:
        """Load configuration from TOML file or use defaults."""
        if config_path is None:
            config_path = get_config_path()

        if config_path.exists():
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
            return cls.model_validate(data)

        return cls()

    def build_catalog(self) -> ArtCatalog:
        return ArtCatalog(CatalogEntry(entry.threshold, entry.asset) for entry in self.catalog)

    def seasonal_events(self) -> tuple[SeasonalEvent, ...]:
        return tuple(
            SeasonalEvent(entry.name, entry.month, entry.day, entry.asset)
            for entry in self.seasonal
        )

    def asset_root(self) -> Path:
        return get_asset_root(self.assets.root or None)

    def to_toml(self) -> str:
        doc = tomlkit.document()
        doc.add(tomlkit.comment("orbital-clock configuration"))

        display_table = tomlkit.table()
        for key, value in self.display.model_dump().items():
            display_table[key] = value
        doc["display"] = display_table

        assets_table = tomlkit.table()
        assets_table["root"] = self.assets.root
        doc["assets"] = assets_table

        catalog = tomlkit.aot()
        for entry in self.catalog:
            catalog.append(tomlkit.item(entry.model_dump()))
        doc["catalog"] = catalog

        seasonal = tomlkit.aot()
        for entry in self.seasonal:
            seasonal.append(tomlkit.item(entry.model_dump()))
        doc["seasonal"] = seasonal

        return tomlkit.dumps(doc)

    def save(self, path: Path) -> None:
        """Serialize the config to ``path``, replacing it atomically."""
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=".tmp_", suffix=".toml")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(self.to_toml())
            Path(tmp_name).replace(path)
        except Exception:
            Path(tmp_name).unlink(missing_ok=True)
            raise

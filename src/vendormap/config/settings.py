# src/vendormap/config/settings.py
"""
Application settings (Pydantic).

Settings are loaded from `src/vendormap/config/defaults.yaml`, then optionally overridden by:
- an external YAML file via `VENDORMAP_CONFIG_PATH` (replaces the packaged defaults)
- environment variables (`VENDORMAP_LOG_LEVEL`, `VENDORMAP_VENDORS_PATH`, `VENDORMAP_USER_PATH`)

Design rule:
- Display and map tuning knobs live in YAML; the pure functions in `core`, `recommender`
  and `mapping` receive them as arguments and never read settings themselves.
"""

from __future__ import annotations

import copy
import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, model_validator

from vendormap.core.env import load_dotenv_if_present


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `vendormap.config`."""
    text = resources.files("vendormap.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


class AppSettings(BaseModel):
    name: str = "VendorMap"
    log_level: str = "INFO"


class CatalogSettings(BaseModel):
    user_path: str = "data/catalogs/user.json"
    vendors_path: str = "data/catalogs/vendors.json"


class MapSettings(BaseModel):
    plot_radius: float = Field(300, gt=0)
    # Share of the plot radius the farthest vendor may reach; the rest is a visual margin.
    edge_margin: float = Field(0.8, gt=0, le=1)
    max_distance_fallback: float = Field(1.0, gt=0)
    legend_default_max_km: float = Field(50, gt=0)


class ProximityBandSettings(BaseModel):
    very_close: float = Field(0.3, ge=0, le=1)
    close: float = Field(0.6, ge=0, le=1)

    @model_validator(mode="after")
    def _validate_order(self) -> "ProximityBandSettings":
        if self.close < self.very_close:
            raise ValueError("display.proximity_bands.close must be >= very_close")
        return self


class DisplaySettings(BaseModel):
    contact_for_pricing: str = "Contact for pricing"
    proximity_bands: ProximityBandSettings = Field(default_factory=ProximityBandSettings)


class ListingSettings(BaseModel):
    default_sort: Literal["distance", "rating", "price"] = "distance"
    default_filter: Literal["all", "recommended", "available", "verified"] = "all"


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)
    map: MapSettings = Field(default_factory=MapSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)
    listing: ListingSettings = Field(default_factory=ListingSettings)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload.

    Note: We intentionally keep this whitelist small.
    """
    load_dotenv_if_present()
    data = dict(data)

    log_level = os.getenv("VENDORMAP_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level

    vendors_path = os.getenv("VENDORMAP_VENDORS_PATH")
    if vendors_path:
        data.setdefault("catalog", {})["vendors_path"] = vendors_path

    user_path = os.getenv("VENDORMAP_USER_PATH")
    if user_path:
        data.setdefault("catalog", {})["user_path"] = user_path

    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("VENDORMAP_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def _packaged_logging_config() -> dict[str, Any]:
    return _read_package_yaml("logging.yaml")


def get_logging_config() -> dict[str, Any]:
    """Return a fresh copy of the packaged logging configuration (callers may mutate it)."""
    return copy.deepcopy(_packaged_logging_config())

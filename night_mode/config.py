"""Configuration loading and validation for Night Mode."""

import dataclasses
import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, Optional

from .core.theme import THEME_MODES, ThemeConfig

logger = logging.getLogger(__name__)

# Default paths to search for config
CONFIG_PATHS = [
    Path("config.json"),
    Path.home() / ".config" / "night-mode" / "config.json",
    Path("/etc/night-mode/config.json"),
]

LOCATION_SOURCES = ("static", "geocoder", "openweather")


@dataclass
class LocationConfig:
    """Where the observer is and how to find out."""

    source: Literal["static", "geocoder", "openweather"] = "static"
    name: str = "Unknown"
    query: str = ""
    timezone: str = "UTC"
    latitude: float = 0.0
    longitude: float = 0.0
    allow_network_lookup: bool = False

    def validate(self) -> list[str]:
        """Return list of validation errors, empty if valid."""
        errors = []
        if self.source not in LOCATION_SOURCES:
            errors.append(
                f"Invalid location source '{self.source}': must be one of "
                + ", ".join(LOCATION_SOURCES)
            )
        if self.source == "static":
            for name, limit in (("latitude", 90), ("longitude", 180)):
                value = getattr(self, name)
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    errors.append(f"Invalid {name} {value!r}: must be a number")
                elif not -limit <= value <= limit:
                    errors.append(
                        f"Invalid {name} {value}: must be -{limit} to {limit}"
                    )
        if self.source == "openweather" and not self.query:
            errors.append("Location query must not be empty for openweather source")
        if not self.timezone:
            errors.append("Timezone must not be empty")
        return errors


@dataclass
class AppearanceConfig:
    """Theme settings."""

    day_theme_id: int = 0
    night_theme_id: int = 0
    theme_mode: Literal["auto", "day", "night"] = "auto"

    def validate(self) -> list[str]:
        # Zero ids are accepted here and rejected when a theme is resolved
        errors = []
        for name in ("day_theme_id", "night_theme_id"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                errors.append(f"Invalid {name} {value!r}: must be a non-negative integer")
        if self.theme_mode not in THEME_MODES:
            errors.append(
                f"Invalid theme_mode '{self.theme_mode}': must be 'auto', 'day', or 'night'"
            )
        return errors

    def to_theme_config(self) -> ThemeConfig:
        return ThemeConfig(
            day_theme_id=self.day_theme_id, night_theme_id=self.night_theme_id
        )


@dataclass
class Config:
    """Main configuration container."""

    location: LocationConfig = field(default_factory=LocationConfig)
    appearance: AppearanceConfig = field(default_factory=AppearanceConfig)

    def validate(self) -> list[str]:
        """Validate all configuration sections. Returns list of errors."""
        errors = []
        errors.extend(self.location.validate())
        errors.extend(self.appearance.validate())
        return errors


def _dataclass_from_dict(cls, data: dict):
    """Create a dataclass instance from a dict, using field defaults for missing keys."""
    kwargs = {}
    for f in dataclasses.fields(cls):
        if f.name in data:
            kwargs[f.name] = data[f.name]
        elif f.default is not dataclasses.MISSING:
            kwargs[f.name] = f.default
        elif f.default_factory is not dataclasses.MISSING:
            kwargs[f.name] = f.default_factory()
    unknown = set(data) - {f.name for f in dataclasses.fields(cls)}
    if unknown:
        logger.warning(f"Ignoring unknown {cls.__name__} keys: {sorted(unknown)}")
    return cls(**kwargs)


# Mapping from config JSON keys to their dataclass types
_CONFIG_SECTIONS = {
    "location": ("location", LocationConfig),
    "appearance": ("appearance", AppearanceConfig),
}


def _dict_to_config(data: dict) -> Config:
    """Convert a dictionary to a Config object."""
    config = Config()
    for key, (attr, cls) in _CONFIG_SECTIONS.items():
        if key in data:
            setattr(config, attr, _dataclass_from_dict(cls, data[key]))
    return config


def load_config(config_path: Optional[Path] = None) -> Config:
    """
    Load configuration from JSON file.

    Args:
        config_path: Explicit path to config file. If None, searches default paths.

    Returns:
        Config object with loaded settings.

    Raises:
        FileNotFoundError: If no config file found and config_path was explicit.
        ValueError: If config file has validation errors.
    """
    if config_path is not None:
        paths_to_try = [config_path]
    else:
        paths_to_try = CONFIG_PATHS

    found_path = None
    for path in paths_to_try:
        if path.exists():
            found_path = path
            break

    if found_path is None:
        if config_path is not None:
            raise FileNotFoundError(f"Config file not found: {config_path}")
        logger.warning("No config file found, using defaults")
        return Config()

    logger.info(f"Loading config from {found_path}")
    try:
        with open(found_path, "r") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file {found_path}: {e}")

    if not isinstance(data, dict):
        raise ValueError(f"Config file {found_path} must contain a JSON object")

    config = _dict_to_config(data)

    errors = config.validate()
    if errors:
        error_msg = "Config validation errors:\n" + "\n".join(
            f"  - {e}" for e in errors
        )
        raise ValueError(error_msg)

    return config


def get_api_key() -> Optional[str]:
    """
    Get OpenWeatherMap API key from environment.

    Returns:
        API key string, or None if not set.
    """
    return os.environ.get("OPENWEATHER_API_KEY") or None

"""Theme selection from the day/night classification."""

import logging
from dataclasses import dataclass
from typing import Literal

from ..errors import ConfigurationError

logger = logging.getLogger(__name__)

ThemeMode = Literal["auto", "day", "night"]

THEME_MODES = ("auto", "day", "night")


@dataclass(frozen=True)
class ThemeConfig:
    """Pair of opaque theme identifiers supplied by the caller."""

    day_theme_id: int = 0
    night_theme_id: int = 0

    def validate(self) -> list[str]:
        """Return list of validation errors, empty if both ids are set."""
        errors = []
        if self.day_theme_id == 0:
            errors.append("day_theme_id was not initialized")
        if self.night_theme_id == 0:
            errors.append("night_theme_id was not initialized")
        return errors


def resolve_theme(is_night_flag: bool, config: ThemeConfig) -> int:
    """
    Pick the theme for the current classification.

    Args:
        is_night_flag: Result of the day/night classification
        config: Theme identifiers

    Returns:
        night_theme_id at night, day_theme_id otherwise

    Raises:
        ConfigurationError: If either theme id is zero
    """
    errors = config.validate()
    if errors:
        raise ConfigurationError("; ".join(errors))

    return config.night_theme_id if is_night_flag else config.day_theme_id


def select_theme(mode: ThemeMode, is_night_flag: bool, config: ThemeConfig) -> int:
    """
    Pick a theme honouring a manual override.

    Args:
        mode: "auto" follows is_night_flag, "day" or "night" force that theme
        is_night_flag: Result of the day/night classification
        config: Theme identifiers

    Raises:
        ConfigurationError: If either theme id is zero
        ValueError: If mode is not a known theme mode
    """
    if mode not in THEME_MODES:
        raise ValueError(f"Invalid theme mode: {mode}")

    if mode == "day":
        is_night_flag = False
    elif mode == "night":
        is_night_flag = True

    theme_id = resolve_theme(is_night_flag, config)
    logger.debug(f"Theme mode {mode}: resolved theme {theme_id}")
    return theme_id

"""Pure sunrise/sunset, day/night and theme computations."""

from .solar import (
    GeoCoordinate,
    TimeOfDay,
    PolarAnomaly,
    EventKind,
    SolarEvent,
    SunTimes,
    compute_sunrise,
    compute_sunset,
    get_sun_times,
)
from .classifier import is_night
from .theme import ThemeConfig, resolve_theme, select_theme
from .formatter import format_sunrise, format_sunset, format_event, parse_display_time

__all__ = [
    "GeoCoordinate",
    "TimeOfDay",
    "PolarAnomaly",
    "EventKind",
    "SolarEvent",
    "SunTimes",
    "compute_sunrise",
    "compute_sunset",
    "get_sun_times",
    "is_night",
    "ThemeConfig",
    "resolve_theme",
    "select_theme",
    "format_sunrise",
    "format_sunset",
    "format_event",
    "parse_display_time",
]

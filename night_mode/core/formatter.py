"""Display formatting for sunrise and sunset times."""

import re

from ..errors import AnomalousLabelError
from .solar import EventKind, PolarAnomaly, SolarEvent, TimeOfDay

NOON = TimeOfDay(12, 0)

_DISPLAY_PATTERN = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*(AM|PM)\s*$", re.IGNORECASE)

_ANOMALY_LABELS = {
    PolarAnomaly.ALWAYS_NIGHT: "Sun never rises",
    PolarAnomaly.ALWAYS_DAY: "Sun never sets",
}


def _to_12_hour(time: TimeOfDay) -> str:
    hour = time.hour % 12 or 12
    return f"{hour}:{time.minute:02d}"


def format_sunrise(time: TimeOfDay) -> str:
    """
    Format a sunrise as "H:MM AM".

    Raises:
        AnomalousLabelError: If the sunrise is at or after noon
    """
    if time >= NOON:
        raise AnomalousLabelError(f"Sunrise at {time} cannot be labelled AM")
    return f"{_to_12_hour(time)} AM"


def format_sunset(time: TimeOfDay, after_midnight: bool = False) -> str:
    """
    Format a sunset as "H:MM PM".

    A sunset flagged after_midnight is labelled "H:MM AM" instead.

    Raises:
        AnomalousLabelError: If the sunset is before noon and not after_midnight
    """
    if after_midnight and time < NOON:
        return f"{_to_12_hour(time)} AM"
    if time < NOON:
        raise AnomalousLabelError(f"Sunset at {time} cannot be labelled PM")
    return f"{_to_12_hour(time)} PM"


def format_event(event: SolarEvent) -> str:
    """Format a sunrise or sunset event, describing polar anomalies in words."""
    if event.is_anomaly:
        return _ANOMALY_LABELS[event.value]
    if event.kind is EventKind.SUNRISE:
        return format_sunrise(event.value)
    return format_sunset(event.value, after_midnight=event.after_midnight)


def parse_display_time(text: str) -> TimeOfDay:
    """Parse an "H:MM AM" / "H:MM PM" string back to a 24-hour TimeOfDay."""
    match = _DISPLAY_PATTERN.match(text)
    if match is None:
        raise ValueError(f"Invalid display time {text!r}: expected H:MM AM|PM")

    hour, minute, meridiem = int(match.group(1)), int(match.group(2)), match.group(3)
    if not 1 <= hour <= 12:
        raise ValueError(f"Invalid display hour {hour}: must be 1-12")

    hour %= 12
    if meridiem.upper() == "PM":
        hour += 12
    return TimeOfDay(hour, minute)

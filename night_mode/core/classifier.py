"""Day/night classification against sunrise and sunset."""

from typing import Union

from .solar import PolarAnomaly, SolarEvent, TimeOfDay

EventValue = Union[TimeOfDay, PolarAnomaly, SolarEvent]


def _unwrap(event: EventValue) -> Union[TimeOfDay, PolarAnomaly]:
    if isinstance(event, SolarEvent):
        return event.value
    return event


def is_night(current: TimeOfDay, sunrise: EventValue, sunset: EventValue) -> bool:
    """
    Determine whether the current time is night.

    Night is strictly before sunrise or strictly after sunset on the same
    day; a time equal to either boundary counts as day. When the sunset
    falls after local midnight (sunset earlier than sunrise) the day starts
    in daylight and night is strictly between sunset and sunrise. A polar
    anomaly on either event decides the result outright, ALWAYS_NIGHT taking
    precedence.

    Args:
        current: Current local time
        sunrise: Sunrise time, PolarAnomaly, or SolarEvent wrapping either
        sunset: Sunset time, PolarAnomaly, or SolarEvent wrapping either

    Returns:
        True if night, False if day
    """
    sunrise = _unwrap(sunrise)
    sunset = _unwrap(sunset)

    if PolarAnomaly.ALWAYS_NIGHT in (sunrise, sunset):
        return True
    if PolarAnomaly.ALWAYS_DAY in (sunrise, sunset):
        return False

    if sunset < sunrise:
        return sunset < current < sunrise
    return current < sunrise or current > sunset

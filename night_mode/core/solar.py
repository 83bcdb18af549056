"""Official sunrise/sunset calculation using astral's solar hour-angle method."""

import datetime
import enum
import logging
import math
from dataclasses import dataclass
from typing import Callable, Union

from astral import Observer
from astral.sun import elevation, noon, sunrise, sunset

logger = logging.getLogger(__name__)

# Sun centre below the horizon at official sunrise/sunset: refraction plus semi-diameter
OFFICIAL_DEPRESSION = 0.833


@dataclass(frozen=True)
class GeoCoordinate:
    """Observer position in decimal degrees."""

    latitude: float
    longitude: float

    def __post_init__(self):
        for name, value, limit in (
            ("latitude", self.latitude, 90),
            ("longitude", self.longitude, 180),
        ):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"Invalid {name} {value!r}: must be a number")
            if not math.isfinite(value) or not -limit <= value <= limit:
                raise ValueError(
                    f"Invalid {name} {value}: must be -{limit} to {limit}"
                )


@dataclass(frozen=True, order=True)
class TimeOfDay:
    """Wall-clock time with minute resolution."""

    hour: int
    minute: int

    def __post_init__(self):
        if not 0 <= self.hour <= 23:
            raise ValueError(f"Invalid hour {self.hour}: must be 0-23")
        if not 0 <= self.minute <= 59:
            raise ValueError(f"Invalid minute {self.minute}: must be 0-59")

    @classmethod
    def parse(cls, text: str) -> "TimeOfDay":
        """Parse a 24-hour ``HH:MM`` string."""
        try:
            hour, minute = text.strip().split(":")
            return cls(int(hour), int(minute))
        except (AttributeError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid time {text!r}: expected HH:MM") from e

    @classmethod
    def from_datetime(cls, dt: datetime.datetime) -> "TimeOfDay":
        return cls(dt.hour, dt.minute)

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


class PolarAnomaly(enum.Enum):
    """The sun does not cross the horizon on the given day."""

    ALWAYS_DAY = "always_day"
    ALWAYS_NIGHT = "always_night"


class EventKind(enum.Enum):
    SUNRISE = "sunrise"
    SUNSET = "sunset"


@dataclass(frozen=True)
class SolarEvent:
    """
    A sunrise or sunset: either a time of day or a polar anomaly.

    after_midnight marks a sunset that falls in the small hours of the day,
    before that day's sunrise.
    """

    kind: EventKind
    value: Union[TimeOfDay, PolarAnomaly]
    after_midnight: bool = False

    @property
    def is_anomaly(self) -> bool:
        return isinstance(self.value, PolarAnomaly)


@dataclass(frozen=True)
class SunTimes:
    """Sunrise and sunset for one calendar day."""

    sunrise: SolarEvent
    sunset: SolarEvent

    @property
    def wraps_midnight(self) -> bool:
        """True when the sun sets after local midnight and rises later that day."""
        return self.sunset.after_midnight


def _tzinfo(timezone_offset: int) -> datetime.tzinfo:
    return datetime.timezone(datetime.timedelta(minutes=timezone_offset))


def _polar_anomaly(
    observer: Observer, date: datetime.date, tzinfo: datetime.tzinfo
) -> PolarAnomaly:
    """Decide polar day or night from the sun's elevation at solar noon."""
    solar_noon = noon(observer, date, tzinfo=tzinfo)
    noon_elevation = elevation(observer, solar_noon, with_refraction=False)
    logger.debug(f"No horizon crossing on {date}: noon elevation {noon_elevation:.2f}")
    if noon_elevation > -OFFICIAL_DEPRESSION:
        return PolarAnomaly.ALWAYS_DAY
    return PolarAnomaly.ALWAYS_NIGHT


def _compute_event(
    event: Callable[..., datetime.datetime],
    coord: GeoCoordinate,
    date: datetime.date,
    timezone_offset: int,
) -> Union[TimeOfDay, PolarAnomaly]:
    """
    Compute one solar event in local time.

    Args:
        event: astral.sun.sunrise or astral.sun.sunset
        coord: Observer position
        date: Calendar date of the event
        timezone_offset: Minutes east of UTC

    Returns:
        Local TimeOfDay truncated to the minute, or a PolarAnomaly
    """
    observer = Observer(latitude=coord.latitude, longitude=coord.longitude)
    tzinfo = _tzinfo(timezone_offset)
    try:
        when = event(observer, date, tzinfo=tzinfo)
    except ValueError as e:
        # astral raises when the sun stays above or below the horizon all day
        logger.debug(f"{event.__name__} on {date} at {coord}: {e}")
        return _polar_anomaly(observer, date, tzinfo)

    # Truncate, never round, to the minute
    return TimeOfDay.from_datetime(when)


def compute_sunrise(
    coord: GeoCoordinate, date: datetime.date, timezone_offset: int
) -> Union[TimeOfDay, PolarAnomaly]:
    """
    Compute official sunrise for a coordinate and date.

    Args:
        coord: Observer position
        date: Calendar date
        timezone_offset: Fixed offset from UTC in minutes (e.g. -240 for UTC-4)

    Returns:
        Local sunrise time, or PolarAnomaly when the sun does not rise or set
    """
    return _compute_event(sunrise, coord, date, timezone_offset)


def compute_sunset(
    coord: GeoCoordinate, date: datetime.date, timezone_offset: int
) -> Union[TimeOfDay, PolarAnomaly]:
    """Compute official sunset. Arguments as for compute_sunrise."""
    return _compute_event(sunset, coord, date, timezone_offset)


def get_sun_times(
    coord: GeoCoordinate, date: datetime.date, timezone_offset: int
) -> SunTimes:
    """
    Compute both events for a day, tagged as SolarEvents.

    At high latitudes in summer the sunset can fall just after local
    midnight; that sunset comes before the day's sunrise and is flagged
    after_midnight.
    """
    rise = compute_sunrise(coord, date, timezone_offset)
    set_ = compute_sunset(coord, date, timezone_offset)
    after_midnight = (
        isinstance(rise, TimeOfDay) and isinstance(set_, TimeOfDay) and set_ < rise
    )
    return SunTimes(
        sunrise=SolarEvent(EventKind.SUNRISE, rise),
        sunset=SolarEvent(EventKind.SUNSET, set_, after_midnight=after_midnight),
    )

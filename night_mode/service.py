"""NightMode: resolves collaborators once and runs the sunrise/theme pipeline."""

import datetime
import logging
from dataclasses import dataclass
from typing import NamedTuple, Optional

from .clock import ClockSource
from .core.classifier import is_night
from .core.formatter import format_event
from .core.solar import GeoCoordinate, SolarEvent, TimeOfDay, get_sun_times
from .core.theme import ThemeConfig, ThemeMode, select_theme
from .errors import AnomalousLabelError, ConfigurationError, LocationUnavailable
from .location import LocationProvider
from .notifier import LogNotifier, Notifier

logger = logging.getLogger(__name__)

LOCATION_ERROR_MESSAGE = "Error: Can't Retrieve Location"


class SolarState(NamedTuple):
    current: TimeOfDay
    offset: int
    location: Optional[GeoCoordinate]
    sunrise: Optional[SolarEvent]
    sunset: Optional[SolarEvent]
    is_night: bool


@dataclass(frozen=True)
class NightModeStatus:
    """Result of one evaluation."""

    date: datetime.date
    current_time: TimeOfDay
    timezone_offset: int
    location: Optional[GeoCoordinate]
    sunrise: Optional[SolarEvent]
    sunset: Optional[SolarEvent]
    sunrise_label: Optional[str]
    sunset_label: Optional[str]
    is_night: bool
    theme_id: int

    @property
    def location_available(self) -> bool:
        return self.location is not None

    def to_dict(self) -> dict:
        """Plain representation for JSON output."""

        def event_value(event: Optional[SolarEvent]) -> Optional[str]:
            if event is None:
                return None
            if event.is_anomaly:
                return event.value.value
            return str(event.value)

        return {
            "date": self.date.isoformat(),
            "current_time": str(self.current_time),
            "timezone_offset": self.timezone_offset,
            "location_available": self.location_available,
            "latitude": self.location.latitude if self.location else None,
            "longitude": self.location.longitude if self.location else None,
            "sunrise": event_value(self.sunrise),
            "sunset": event_value(self.sunset),
            "sunrise_label": self.sunrise_label,
            "sunset_label": self.sunset_label,
            "is_night": self.is_night,
            "theme_id": self.theme_id,
        }


class NightMode:
    """
    Chooses the day or night theme for the observer's location.

    The location is resolved once per evaluation and passed into the pure
    core functions. When it cannot be resolved the user is notified and the
    time is treated as day.
    """

    def __init__(
        self,
        location_provider: LocationProvider,
        clock: ClockSource,
        theme_config: ThemeConfig,
        notifier: Optional[Notifier] = None,
        mode: ThemeMode = "auto",
    ):
        """
        Initialize NightMode.

        Args:
            location_provider: Source of the observer coordinate
            clock: Source of the current local time and UTC offset
            theme_config: Day and night theme identifiers
            notifier: Where to report problems (default: log warnings)
            mode: "auto", "day", or "night"
        """
        self.location_provider = location_provider
        self.clock = clock
        self.theme_config = theme_config
        self.notifier = notifier or LogNotifier()
        self.mode = mode
        self._status: Optional[NightModeStatus] = None

    def _check_theme_config(self) -> None:
        """Reject unset theme ids before any location lookup."""
        errors = self.theme_config.validate()
        if errors:
            message = "; ".join(errors)
            self.notifier.notify(f"Error: {message}")
            raise ConfigurationError(message)

    def _solar_state(self, now: datetime.datetime, date: datetime.date) -> SolarState:
        """Resolve the location and compute events and classification."""
        current = TimeOfDay.from_datetime(now)
        offset = self.clock.utc_offset_minutes(date)

        location = self.location_provider.get_location()
        if isinstance(location, LocationUnavailable):
            logger.warning(f"Location unavailable ({location.reason}), assuming day")
            self.notifier.notify(LOCATION_ERROR_MESSAGE)
            return SolarState(current, offset, None, None, None, False)

        sun_times = get_sun_times(location, date, offset)
        night = is_night(current, sun_times.sunrise, sun_times.sunset)
        return SolarState(
            current, offset, location, sun_times.sunrise, sun_times.sunset, night
        )

    def evaluate(self, date: Optional[datetime.date] = None) -> NightModeStatus:
        """
        Run the full pipeline.

        The theme ids are checked first, then the location is resolved once.
        The result is kept as the current status read by the properties.

        Args:
            date: Calendar date for sunrise/sunset (default: clock's today)

        Returns:
            NightModeStatus with events, labels, classification and theme

        Raises:
            ConfigurationError: If a theme id is zero (after notifying the user)
        """
        self._check_theme_config()

        now = self.clock.now()
        if date is None:
            date = now.date()
        current, offset, coord, sunrise, sunset, night = self._solar_state(now, date)

        theme_id = select_theme(self.mode, night, self.theme_config)

        self._status = NightModeStatus(
            date=date,
            current_time=current,
            timezone_offset=offset,
            location=coord,
            sunrise=sunrise,
            sunset=sunset,
            sunrise_label=self._label(sunrise),
            sunset_label=self._label(sunset),
            is_night=night,
            theme_id=theme_id,
        )
        return self._status

    @staticmethod
    def _label(event: Optional[SolarEvent]) -> Optional[str]:
        if event is None:
            return None
        try:
            return format_event(event)
        except AnomalousLabelError as e:
            logger.warning(f"Not labelling {event.kind.value}: {e}")
            return None

    @property
    def status(self) -> NightModeStatus:
        """Status from the last evaluate(), evaluating once if there is none."""
        if self._status is None:
            return self.evaluate()
        return self._status

    @property
    def is_night(self) -> bool:
        """True if it is night at the observer's location."""
        return self.status.is_night

    @property
    def sunrise(self) -> str:
        """Sunrise for display, empty when unavailable."""
        return self.status.sunrise_label or ""

    @property
    def sunset(self) -> str:
        """Sunset for display, empty when unavailable."""
        return self.status.sunset_label or ""

    @property
    def theme(self) -> int:
        """Theme id for the evaluated time of day."""
        return self.status.theme_id

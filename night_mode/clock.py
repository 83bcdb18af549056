"""Clock sources supplying the current local time and UTC offset."""

import datetime
import logging
from abc import ABC, abstractmethod
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .core.solar import TimeOfDay

logger = logging.getLogger(__name__)


def get_timezone(name: str) -> ZoneInfo:
    """
    Look up an IANA timezone.

    Raises:
        ValueError: If the timezone is unknown
    """
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone '{name}'") from e


class ClockSource(ABC):
    """Provides the current local date, time and timezone offset."""

    @property
    @abstractmethod
    def tz(self) -> datetime.tzinfo:
        """Timezone used for local times."""

    @abstractmethod
    def now(self) -> datetime.datetime:
        """Return the current timezone-aware local datetime."""

    def today(self) -> datetime.date:
        return self.now().date()

    def current_time(self) -> TimeOfDay:
        return TimeOfDay.from_datetime(self.now())

    def utc_offset_minutes(self, date: Optional[datetime.date] = None) -> int:
        """
        Get the fixed UTC offset in effect on a date.

        The offset is taken at local noon so that a DST switch in the early
        morning does not leak into the previous day's value.

        Args:
            date: Date to resolve the offset for (default: today)

        Returns:
            Minutes east of UTC
        """
        if date is None:
            date = self.today()

        noon = datetime.datetime.combine(date, datetime.time(12, 0), tzinfo=self.tz)
        offset = noon.utcoffset()
        if offset is None:
            return 0
        return int(offset.total_seconds() // 60)


class SystemClock(ClockSource):
    """Reads the system clock in a configured IANA timezone."""

    def __init__(self, timezone: str = "UTC"):
        """
        Initialize system clock.

        Args:
            timezone: Timezone string (e.g., "America/New_York")

        Raises:
            ValueError: If the timezone is unknown
        """
        self._tz = get_timezone(timezone)

    @property
    def tz(self) -> datetime.tzinfo:
        return self._tz

    def now(self) -> datetime.datetime:
        return datetime.datetime.now(self._tz)


class FixedClock(ClockSource):
    """Always reports the same instant. Used for --at/--date and in tests."""

    def __init__(self, moment: datetime.datetime):
        if moment.tzinfo is None:
            raise ValueError("FixedClock requires a timezone-aware datetime")
        self._moment = moment

    @property
    def tz(self) -> datetime.tzinfo:
        return self._moment.tzinfo

    def now(self) -> datetime.datetime:
        return self._moment

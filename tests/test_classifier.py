"""Tests for day/night classification."""

import datetime

import pytest

from night_mode.core.classifier import is_night
from night_mode.core.solar import (
    EventKind,
    GeoCoordinate,
    PolarAnomaly,
    SolarEvent,
    TimeOfDay,
    compute_sunrise,
    compute_sunset,
)

SUNRISE = TimeOfDay(5, 25)
SUNSET = TimeOfDay(20, 30)


class TestIsNight:
    """Tests for is_night with ordinary sunrise/sunset."""

    @pytest.mark.parametrize(
        "current,expected",
        [
            (TimeOfDay(0, 0), True),
            (TimeOfDay(4, 0), True),
            (TimeOfDay(5, 24), True),
            (TimeOfDay(5, 26), False),
            (TimeOfDay(12, 0), False),
            (TimeOfDay(20, 29), False),
            (TimeOfDay(20, 31), True),
            (TimeOfDay(23, 59), True),
        ],
    )
    def test_classification(self, current, expected):
        """Test night is strictly before sunrise or strictly after sunset."""
        assert is_night(current, SUNRISE, SUNSET) is expected

    def test_sunrise_boundary_is_day(self):
        """Test a time equal to sunrise counts as day."""
        assert is_night(SUNRISE, SUNRISE, SUNSET) is False

    def test_sunset_boundary_is_day(self):
        """Test a time equal to sunset counts as day."""
        assert is_night(SUNSET, SUNRISE, SUNSET) is False

    def test_matches_definition_for_every_minute(self):
        """Test the classification for every minute of the day."""
        for hour in range(24):
            for minute in range(60):
                t = TimeOfDay(hour, minute)
                assert is_night(t, SUNRISE, SUNSET) == (t < SUNRISE or t > SUNSET)

    def test_accepts_solar_events(self):
        """Test SolarEvent wrappers are unwrapped."""
        sunrise = SolarEvent(EventKind.SUNRISE, SUNRISE)
        sunset = SolarEvent(EventKind.SUNSET, SUNSET)
        assert is_night(TimeOfDay(4, 0), sunrise, sunset) is True
        assert is_night(TimeOfDay(12, 0), sunrise, sunset) is False

    def test_new_york_scenario(self, new_york):
        """Test NYC on the 2023 summer solstice."""
        date = datetime.date(2023, 6, 21)
        sunrise = compute_sunrise(new_york, date, -240)
        sunset = compute_sunset(new_york, date, -240)

        assert is_night(TimeOfDay(4, 0), sunrise, sunset) is True
        assert is_night(TimeOfDay(12, 0), sunrise, sunset) is False


class TestPolarClassification:
    """Tests for is_night with polar anomalies."""

    def test_always_night(self):
        """Test ALWAYS_NIGHT is night at every minute."""
        for hour in range(24):
            for minute in (0, 30, 59):
                assert is_night(
                    TimeOfDay(hour, minute),
                    PolarAnomaly.ALWAYS_NIGHT,
                    PolarAnomaly.ALWAYS_NIGHT,
                )

    def test_always_day(self):
        """Test ALWAYS_DAY is never night."""
        for hour in range(24):
            assert not is_night(
                TimeOfDay(hour, 0), PolarAnomaly.ALWAYS_DAY, PolarAnomaly.ALWAYS_DAY
            )

    def test_single_anomaly_decides(self):
        """Test an anomaly on one event alone decides the outcome."""
        assert is_night(TimeOfDay(12, 0), SUNRISE, PolarAnomaly.ALWAYS_NIGHT) is True
        assert is_night(TimeOfDay(2, 0), PolarAnomaly.ALWAYS_DAY, SUNSET) is False

    def test_85_north_winter(self):
        """Test 85N on 2023-12-21 is night all day."""
        coord = GeoCoordinate(85.0, 0.0)
        date = datetime.date(2023, 12, 21)
        sunrise = compute_sunrise(coord, date, 0)
        sunset = compute_sunset(coord, date, 0)

        for hour in range(24):
            assert is_night(TimeOfDay(hour, 15), sunrise, sunset) is True


class TestSunsetAfterMidnight:
    """Tests for is_night when the sunset falls after local midnight."""

    WRAP_SUNRISE = TimeOfDay(2, 55)
    WRAP_SUNSET = TimeOfDay(0, 4)

    @pytest.mark.parametrize(
        "current,expected",
        [
            (TimeOfDay(0, 2), False),
            (TimeOfDay(0, 5), True),
            (TimeOfDay(1, 0), True),
            (TimeOfDay(2, 54), True),
            (TimeOfDay(2, 56), False),
            (TimeOfDay(12, 0), False),
            (TimeOfDay(23, 59), False),
        ],
    )
    def test_classification(self, current, expected):
        """Test night is only the gap between sunset and the next sunrise."""
        assert is_night(current, self.WRAP_SUNRISE, self.WRAP_SUNSET) is expected

    def test_boundaries_are_day(self):
        """Test times equal to either event count as day."""
        assert is_night(self.WRAP_SUNRISE, self.WRAP_SUNRISE, self.WRAP_SUNSET) is False
        assert is_night(self.WRAP_SUNSET, self.WRAP_SUNRISE, self.WRAP_SUNSET) is False

    def test_reykjavik_scenario(self):
        """Test Reykjavik on the 2024 summer solstice at UTC+0."""
        coord = GeoCoordinate(64.1466, -21.9426)
        date = datetime.date(2024, 6, 21)
        sunrise = compute_sunrise(coord, date, 0)
        sunset = compute_sunset(coord, date, 0)

        assert is_night(TimeOfDay(12, 0), sunrise, sunset) is False
        assert is_night(TimeOfDay(22, 0), sunrise, sunset) is False
        assert is_night(TimeOfDay(1, 30), sunrise, sunset) is True

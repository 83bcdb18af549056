"""Pytest fixtures for Night Mode tests."""

import datetime
import json
import sys
from pathlib import Path
from unittest.mock import MagicMock
from zoneinfo import ZoneInfo

import pytest

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from night_mode.clock import FixedClock  # noqa: E402
from night_mode.core.solar import GeoCoordinate  # noqa: E402
from night_mode.core.theme import ThemeConfig  # noqa: E402
from night_mode.location import LocationProvider  # noqa: E402


@pytest.fixture
def sample_config_dict():
    """Sample configuration dictionary."""
    return {
        "location": {
            "source": "static",
            "name": "Test City",
            "timezone": "America/New_York",
            "latitude": 40.7128,
            "longitude": -74.0060,
        },
        "appearance": {
            "day_theme_id": 3,
            "night_theme_id": 7,
            "theme_mode": "auto",
        },
    }


@pytest.fixture
def temp_config_file(tmp_path, sample_config_dict):
    """Create a temporary config file."""
    config_path = tmp_path / "config.json"
    with open(config_path, "w") as f:
        json.dump(sample_config_dict, f)
    return config_path


@pytest.fixture
def sample_config(sample_config_dict):
    """Create a Config object from sample data."""
    from night_mode.config import _dict_to_config

    return _dict_to_config(sample_config_dict)


@pytest.fixture
def new_york():
    """New York City coordinate."""
    return GeoCoordinate(40.7128, -74.0060)


@pytest.fixture
def theme_config():
    """Valid theme configuration."""
    return ThemeConfig(day_theme_id=3, night_theme_id=7)


@pytest.fixture
def make_clock():
    """Factory for a fixed New York clock on the summer solstice."""

    def _make(hour: int, minute: int = 0, date=datetime.date(2023, 6, 21)):
        moment = datetime.datetime.combine(
            date,
            datetime.time(hour, minute),
            tzinfo=ZoneInfo("America/New_York"),
        )
        return FixedClock(moment)

    return _make


@pytest.fixture
def mock_location_provider(new_york):
    """Location provider returning New York."""
    provider = MagicMock(spec=LocationProvider)
    provider.get_location.return_value = new_york
    return provider


@pytest.fixture
def mock_notifier():
    """Notifier that records messages."""
    return MagicMock()

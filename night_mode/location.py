"""Location providers and the permission broker that guards network lookups."""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional, Union

import requests
from astral.geocoder import database, lookup

from .core.solar import GeoCoordinate
from .errors import LocationUnavailable

logger = logging.getLogger(__name__)

LocationResult = Union[GeoCoordinate, LocationUnavailable]

GEOCODING_URL = "https://api.openweathermap.org/geo/1.0/direct"


class PermissionBroker(ABC):
    """Decides whether the user consents to location lookups."""

    @abstractmethod
    def is_granted(self) -> bool:
        """Return True if permission has already been granted."""

    @abstractmethod
    def request(self) -> bool:
        """Ask for permission. Returns True if granted."""

    def ensure(self) -> bool:
        """Request permission only if it is not already granted."""
        return self.is_granted() or self.request()


class StaticPermissionBroker(PermissionBroker):
    """Permission fixed by configuration or a command-line flag."""

    def __init__(self, granted: bool = False):
        self._granted = granted

    def is_granted(self) -> bool:
        return self._granted

    def request(self) -> bool:
        return self._granted


class PromptPermissionBroker(PermissionBroker):
    """Asks the user on the terminal, remembering the answer."""

    PROMPT = "Allow looking up your location over the network? [y/N] "

    def __init__(self, input_func: Callable[[str], str] = input):
        self._input = input_func
        self._granted: Optional[bool] = None

    def is_granted(self) -> bool:
        return bool(self._granted)

    def request(self) -> bool:
        if self._granted is None:
            try:
                answer = self._input(self.PROMPT)
            except EOFError:
                answer = ""
            self._granted = answer.strip().lower() in ("y", "yes")
            logger.info(f"Location permission {'granted' if self._granted else 'denied'}")
        return self._granted


class LocationProvider(ABC):
    """Resolves the observer's coordinate."""

    @abstractmethod
    def get_location(self) -> LocationResult:
        """Return the coordinate, or LocationUnavailable."""


class StaticLocationProvider(LocationProvider):
    """Fixed coordinate from configuration."""

    def __init__(self, latitude: float, longitude: float):
        self.latitude = latitude
        self.longitude = longitude

    def get_location(self) -> LocationResult:
        try:
            return GeoCoordinate(self.latitude, self.longitude)
        except ValueError as e:
            logger.warning(f"Configured coordinate rejected: {e}")
            return LocationUnavailable(str(e))


class GeocoderLocationProvider(LocationProvider):
    """
    Looks up a city in astral's built-in geocoder database.

    Names may be plain ("London") or qualified with the region
    ("London, England").
    """

    def __init__(self, name: str):
        self.name = name

    def get_location(self) -> LocationResult:
        try:
            info = lookup(self.name, database())
        except KeyError:
            logger.warning(f"Location '{self.name}' not found in geocoder database")
            return LocationUnavailable(f"unknown location '{self.name}'")

        # A bare region name returns a dict of its cities rather than one location
        if isinstance(info, dict):
            logger.warning(f"'{self.name}' is a region, not a city")
            return LocationUnavailable(f"'{self.name}' is a region, not a city")

        try:
            return GeoCoordinate(info.latitude, info.longitude)
        except ValueError as e:
            return LocationUnavailable(str(e))


class OpenWeatherGeocodingProvider(LocationProvider):
    """
    Resolves a place name through the OpenWeatherMap geocoding API.

    The query leaves the machine, so the permission broker is consulted
    before every lookup.
    """

    def __init__(
        self,
        query: str,
        api_key: str,
        permission_broker: PermissionBroker,
        timeout: float = 10,
    ):
        """
        Initialize geocoding provider.

        Args:
            query: Place name (e.g., "New York,NY,US")
            api_key: OpenWeatherMap API key
            permission_broker: Consent check for network lookups
            timeout: Request timeout in seconds
        """
        self.query = query
        self.api_key = api_key
        self.permission_broker = permission_broker
        self.timeout = timeout

    def get_location(self) -> LocationResult:
        if not self.permission_broker.ensure():
            logger.warning("Location permission not granted, skipping lookup")
            return LocationUnavailable("permission denied")

        if not self.api_key:
            logger.warning("No API key configured, skipping geocoding lookup")
            return LocationUnavailable("no API key")

        try:
            resp = requests.get(
                GEOCODING_URL,
                params={"q": self.query, "limit": 1, "appid": self.api_key},
                timeout=self.timeout,
            )
            resp.raise_for_status()
            results = resp.json()

            if not results:
                logger.warning(f"No geocoding results for '{self.query}'")
                return LocationUnavailable(f"no results for '{self.query}'")

            place = results[0]
            coord = GeoCoordinate(float(place["lat"]), float(place["lon"]))
            logger.debug(f"Geocoded '{self.query}' to {coord}")
            return coord

        except requests.Timeout:
            logger.warning("Geocoding API request timed out")
            return LocationUnavailable("request timed out")
        except requests.HTTPError as e:
            logger.warning(f"Geocoding API HTTP error: {e}")
            return LocationUnavailable(f"HTTP error: {e}")
        except requests.RequestException as e:
            logger.warning(f"Geocoding API request failed: {e}")
            return LocationUnavailable(f"request failed: {e}")
        except (KeyError, ValueError, IndexError, TypeError) as e:
            logger.warning(f"Failed to parse geocoding data: {e}")
            return LocationUnavailable(f"bad response: {e}")

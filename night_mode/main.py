"""Main entry point for Night Mode."""

import argparse
import datetime
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .clock import ClockSource, FixedClock, SystemClock
from .config import Config, LocationConfig, get_api_key, load_config
from .core.solar import TimeOfDay
from .errors import ConfigurationError
from .location import (
    GeocoderLocationProvider,
    LocationProvider,
    OpenWeatherGeocodingProvider,
    PermissionBroker,
    PromptPermissionBroker,
    StaticLocationProvider,
    StaticPermissionBroker,
)
from .notifier import ConsoleNotifier
from .service import NightMode, NightModeStatus

logger = logging.getLogger(__name__)


def build_location_provider(
    location: LocationConfig, permission_broker: PermissionBroker
) -> LocationProvider:
    """Create the location provider selected by the configuration."""
    if location.source == "geocoder":
        return GeocoderLocationProvider(location.query or location.name)
    if location.source == "openweather":
        return OpenWeatherGeocodingProvider(
            query=location.query,
            api_key=get_api_key() or "",
            permission_broker=permission_broker,
        )
    return StaticLocationProvider(location.latitude, location.longitude)


def build_clock(
    timezone: str,
    date: Optional[datetime.date] = None,
    at: Optional[TimeOfDay] = None,
) -> ClockSource:
    """Create a system clock, or a fixed one when --date or --at pin the instant."""
    clock = SystemClock(timezone)
    if date is None and at is None:
        return clock

    now = clock.now()
    moment = datetime.datetime.combine(
        date or now.date(),
        datetime.time(at.hour, at.minute) if at else now.time(),
        tzinfo=clock.tz,
    )
    return FixedClock(moment)


def build_night_mode(
    config: Config,
    date: Optional[datetime.date] = None,
    at: Optional[TimeOfDay] = None,
    assume_yes: bool = False,
) -> NightMode:
    """Wire the configured collaborators into a NightMode instance."""
    if assume_yes or config.location.allow_network_lookup:
        broker: PermissionBroker = StaticPermissionBroker(granted=True)
    else:
        broker = PromptPermissionBroker()

    return NightMode(
        location_provider=build_location_provider(config.location, broker),
        clock=build_clock(config.location.timezone, date, at),
        theme_config=config.appearance.to_theme_config(),
        notifier=ConsoleNotifier(),
        mode=config.appearance.theme_mode,
    )


def format_status(status: NightModeStatus) -> str:
    """Render a status as human-readable lines."""
    lines = [
        f"Date:    {status.date.isoformat()}",
        f"Time:    {status.current_time}",
        f"Sunrise: {status.sunrise_label or 'unavailable'}",
        f"Sunset:  {status.sunset_label or 'unavailable'}",
        f"Period:  {'night' if status.is_night else 'day'}",
        f"Theme:   {status.theme_id}",
    ]
    return "\n".join(lines)


def _parse_date(text: str) -> datetime.date:
    try:
        return datetime.date.fromisoformat(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid date '{text}': expected YYYY-MM-DD")


def _parse_time(text: str) -> TimeOfDay:
    try:
        return TimeOfDay.parse(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Night Mode - choose a day or night theme from sunrise and sunset"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config.json file",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--date",
        type=_parse_date,
        help="Calendar date to evaluate (YYYY-MM-DD, default: today)",
    )
    parser.add_argument(
        "--at",
        type=_parse_time,
        help="Local time to classify (HH:MM, default: now)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Allow network location lookups without asking",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )

    # Load configuration
    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        logger.error(f"Config file not found: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    try:
        night_mode = build_night_mode(config, args.date, args.at, args.yes)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    try:
        status = night_mode.evaluate(args.date)
    except ConfigurationError as e:
        logger.error(f"Theme configuration error: {e}")
        return 2

    if args.json:
        print(json.dumps(status.to_dict(), indent=2))
    else:
        print(format_status(status))

    return 0


if __name__ == "__main__":
    sys.exit(main())

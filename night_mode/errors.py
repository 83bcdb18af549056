"""Error kinds and non-exceptional outcomes for Night Mode."""

from dataclasses import dataclass


class NightModeError(Exception):
    """Base class for Night Mode errors."""


class ConfigurationError(NightModeError, ValueError):
    """Theme identifiers are missing (zero) at resolution time."""


class AnomalousLabelError(NightModeError, ValueError):
    """A sunrise/sunset falls on the wrong side of noon for its AM/PM label."""


@dataclass(frozen=True)
class LocationUnavailable:
    """Returned by location providers when no coordinate could be resolved."""

    reason: str = "unknown"

    def __bool__(self) -> bool:
        return False

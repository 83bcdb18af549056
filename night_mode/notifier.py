"""User notification adapters."""

import logging
import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO

logger = logging.getLogger(__name__)


class Notifier(ABC):
    """Surfaces problems to the user."""

    @abstractmethod
    def notify(self, message: str) -> None:
        """Show a short message to the user."""


class LogNotifier(Notifier):
    """Reports messages as log warnings."""

    def notify(self, message: str) -> None:
        logger.warning(message)


class ConsoleNotifier(Notifier):
    """Writes messages to a terminal stream (stderr by default)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    def notify(self, message: str) -> None:
        stream = self._stream or sys.stderr
        print(message, file=stream)

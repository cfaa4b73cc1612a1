"""Clock abstraction supplying the current date."""

from abc import ABC, abstractmethod
from datetime import date


class Clock(ABC):
    """Source of "today" for the recurring generator."""

    @abstractmethod
    def today(self) -> date:
        """Return the current date."""
        pass


class SystemClock(Clock):
    """Clock backed by the local system date."""

    def today(self) -> date:
        return date.today()


class FixedClock(Clock):
    """Clock that always returns the same date."""

    def __init__(self, current: date):
        self.current = current

    def today(self) -> date:
        return self.current

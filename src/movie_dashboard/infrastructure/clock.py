"""Clock implementations."""

from datetime import date, datetime, timedelta, timezone
from typing import Optional

from ..core.interfaces import IClock


class SystemClock(IClock):
    """Clock backed by the system time."""

    def now(self) -> datetime:
        """Get the current UTC time."""
        return datetime.now(timezone.utc)

    def today(self) -> date:
        """Get the current UTC date."""
        return self.now().date()


class FixedClock(IClock):
    """Clock frozen at a given moment, advanced manually."""

    def __init__(self, moment: Optional[datetime] = None) -> None:
        """Initialize fixed clock.

        Args:
            moment: Frozen time. Naive datetimes are taken as UTC.
        """
        moment = moment or datetime(2024, 1, 1, tzinfo=timezone.utc)
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        self._moment = moment

    def now(self) -> datetime:
        """Get the frozen time."""
        return self._moment

    def today(self) -> date:
        """Get the frozen date."""
        return self._moment.date()

    def advance(self, seconds: float = 0, days: float = 0) -> None:
        """Move the clock forward.

        Args:
            seconds: Seconds to advance.
            days: Days to advance.
        """
        self._moment += timedelta(seconds=seconds, days=days)

    def set(self, moment: datetime) -> None:
        """Jump to a given moment."""
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        self._moment = moment

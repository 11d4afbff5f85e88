"""Clock interface."""

from abc import ABC, abstractmethod
from datetime import date, datetime


class IClock(ABC):
    """Interface for reading the current time."""

    @abstractmethod
    def now(self) -> datetime:
        """Get the current time.

        Returns:
            Timezone-aware current datetime (UTC).
        """
        pass

    @abstractmethod
    def today(self) -> date:
        """Get the current date.

        Returns:
            Current calendar date (UTC).
        """
        pass

    def timestamp(self) -> float:
        """Current time as seconds since the epoch."""
        return self.now().timestamp()

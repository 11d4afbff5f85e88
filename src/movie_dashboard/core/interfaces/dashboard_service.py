"""Dashboard service interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models import DashboardFilters, DashboardReport


class IDashboardService(ABC):
    """Interface for building dashboards."""

    @abstractmethod
    async def build_dashboard(
        self, filters: Optional[DashboardFilters] = None, max_pages: Optional[int] = None
    ) -> DashboardReport:
        """Fetch movies and build a dashboard report.

        Args:
            filters: Dashboard filters, defaults when None.
            max_pages: Maximum discover pages, configured value when None.

        Returns:
            Dashboard report.

        Raises:
            CatalogServiceError: If fetching fails.
            TransformationError: If the transformation fails.
        """
        pass

    @abstractmethod
    def default_filters(self) -> DashboardFilters:
        """Filters without a date range."""
        pass

    @abstractmethod
    def last_months_filters(self, months: int) -> DashboardFilters:
        """Filters covering the last N months up to today."""
        pass

    @abstractmethod
    def last_year_filters(self) -> DashboardFilters:
        """Filters covering the last 365 days."""
        pass

    @abstractmethod
    def validate_prerequisites(self, filters: Optional[DashboardFilters] = None) -> List[str]:
        """Check configuration and filters before building.

        Args:
            filters: Filters to check, if any.

        Returns:
            List of problems; empty when ready.
        """
        pass

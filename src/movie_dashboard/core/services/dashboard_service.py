"""Dashboard service implementation."""

from typing import List, Optional

from ...config.models import Config
from ...infrastructure.logging import LoggerMixin
from ...infrastructure.trace_logger import measure_time
from ...utils import last_months_range, last_year_range, validate_date_range
from ..interfaces import IClock, IDashboardService, IMovieCatalog
from ..models import DashboardFilters, DashboardReport
from ..transformations import (
    get_transformation_summary,
    identify_trends,
    transform_dashboard_data,
    validate_dashboard_data,
)


class DashboardService(IDashboardService, LoggerMixin):
    """Builds dashboard reports from catalog data."""

    def __init__(self, config: Config, catalog: IMovieCatalog, clock: IClock) -> None:
        """Initialize dashboard service.

        Args:
            config: Application configuration.
            catalog: Movie source.
            clock: Clock for date presets and fallbacks.
        """
        self._config = config
        self._pipeline_config = config.pipeline
        self._catalog = catalog
        self._clock = clock

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
        filters = filters or self.default_filters()
        self.logger.info(
            f"Building dashboard (dates: {filters.start_date or '-'} to {filters.end_date or '-'}, "
            f"genres: {filters.genres or 'all'})"
        )

        genres = await self._catalog.get_genres()
        movies, fetch_ms = await measure_time(
            lambda: self._catalog.fetch_multiple_pages(filters, max_pages)
        )
        self.logger.info(f"Fetched {len(movies)} movies in {fetch_ms}ms")

        data = transform_dashboard_data(
            movies,
            genres,
            filters,
            clock=self._clock,
            window_size=self._pipeline_config.rolling_window,
            top_n=self._pipeline_config.top_n,
            criterion=self._pipeline_config.ranking_criterion,
        )

        validation = validate_dashboard_data(data)
        for error in validation.errors:
            self.logger.error(f"Dashboard validation error: {error}")
        for warning in validation.warnings:
            self.logger.warning(f"Dashboard validation warning: {warning}")

        return DashboardReport(
            data=data,
            validation=validation,
            trends=identify_trends(data.monthly_data),
            summary=get_transformation_summary(data),
        )

    def default_filters(self) -> DashboardFilters:
        """Filters without a date range."""
        return DashboardFilters(min_vote_count=self._pipeline_config.default_min_vote_count)

    def last_months_filters(self, months: int) -> DashboardFilters:
        """Filters covering the last N months up to today.

        Raises:
            ValueError: If months is lower than 1.
        """
        start_date, end_date = last_months_range(self._clock.today(), months)
        return self.default_filters().model_copy(
            update={"start_date": start_date, "end_date": end_date}
        )

    def last_year_filters(self) -> DashboardFilters:
        """Filters covering the last 365 days."""
        start_date, end_date = last_year_range(self._clock.today())
        return self.default_filters().model_copy(
            update={"start_date": start_date, "end_date": end_date}
        )

    def validate_prerequisites(self, filters: Optional[DashboardFilters] = None) -> List[str]:
        """Check configuration and filters before building.

        Args:
            filters: Filters to check, if any.

        Returns:
            List of problems; empty when ready.
        """
        problems = []

        if not self._config.app.use_mock_data and not self._config.tmdb.has_api_key:
            problems.append("TMDb API key is not configured (set TMDB_API_KEY or use --mock)")

        if filters and (filters.start_date or filters.end_date):
            if not filters.has_date_range:
                problems.append("Both start and end dates are required for a date range")
            else:
                date_error = validate_date_range(
                    filters.start_date, filters.end_date, self._clock.today()
                )
                if date_error:
                    problems.append(date_error)

        return problems

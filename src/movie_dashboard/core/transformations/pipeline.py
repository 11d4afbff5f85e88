"""Dashboard transformation pipeline.

Runs the five transformation stages in order and assembles a single
``DashboardData``:

    movies + genres
      -> aggregate_by_month        (monthly series)
      -> filter_by_date_range      (only when both filter dates are set)
      -> calculate_percentage_change
      -> calculate_rolling_average (window_size, default 3)
    movies + genres (unfiltered)
      -> get_top_movies            (criterion and top_n, default popularity top 10)
      -> analyze_genre_distribution

The date-range filter only narrows the monthly series; top movies and the
genre distribution always use the full input.
"""

import logging
import time
from datetime import datetime, timezone
from typing import List, Optional, Sequence, Tuple, Union

from ...utils.date_utils import parse_release_date
from ...utils.exceptions import TransformationError
from ..interfaces import IClock
from ..models import (
    DashboardData,
    DashboardFilters,
    DateRange,
    Genre,
    Movie,
    RankingCriterion,
    TransformationSummary,
    ValidationResult,
)
from .genre_analysis import analyze_genre_distribution
from .percentage_change import calculate_percentage_change
from .rolling_window import calculate_rolling_average
from .temporal_aggregation import aggregate_by_month, filter_by_date_range
from .top_movies import get_top_movies

logger = logging.getLogger(__name__)

# Allowed deviation of the genre percentage sum from 100
PERCENTAGE_SUM_TOLERANCE = 5.0


def transformation_labels(window_size: int = 3, top_n: int = 10) -> List[str]:
    """Names of the pipeline stages as run with the given settings."""
    return [
        "Monthly Temporal Aggregation",
        "Percentage Change Calculation",
        f"{window_size}-Period Moving Average",
        f"Top-{top_n} Movie Ranking",
        "Genre Distribution Analysis",
    ]


def transform_dashboard_data(
    movies: Sequence[Movie],
    genres: Sequence[Genre],
    filters: Optional[DashboardFilters] = None,
    clock: Optional[IClock] = None,
    window_size: int = 3,
    top_n: int = 10,
    criterion: Union[RankingCriterion, str] = RankingCriterion.POPULARITY,
) -> DashboardData:
    """Transform raw movies and genres into dashboard data.

    Args:
        movies: Movies from the catalog.
        genres: Known genres.
        filters: Filters that produced the movies; dates narrow the monthly series.
        clock: Clock used when no movie carries a valid release date.
        window_size: Moving average window.
        top_n: Number of top movies.
        criterion: Top movies ranking criterion.

    Returns:
        Dashboard aggregate.

    Raises:
        TransformationError: If any stage fails.
    """
    filters = filters or DashboardFilters()
    start_time = time.perf_counter()
    logger.debug("Starting dashboard transformations")

    try:
        logger.debug("Aggregating movies by month")
        monthly_data = aggregate_by_month(movies, genres)

        if filters.has_date_range:
            monthly_data = filter_by_date_range(monthly_data, filters.start_date, filters.end_date)

        logger.debug("Calculating percentage changes")
        monthly_data = calculate_percentage_change(monthly_data)

        logger.debug(f"Applying {window_size}-period moving average")
        monthly_data = calculate_rolling_average(monthly_data, window_size)

        logger.debug("Ranking top movies")
        top_movies = get_top_movies(movies, genres, criterion, top_n)

        logger.debug("Analyzing genre distribution")
        genre_distribution = analyze_genre_distribution(movies, genres)

        earliest, latest = _release_date_bounds(movies, clock)
        data = DashboardData(
            monthly_data=monthly_data,
            top_movies=top_movies,
            genre_distribution=genre_distribution,
            total_movies=len(movies),
            date_range=DateRange(
                start=filters.start_date or earliest,
                end=filters.end_date or latest,
            ),
            filters_applied=filters,
            window_size=window_size,
            top_n=top_n,
            ranking_criterion=criterion,
        )

    except Exception as e:
        error_msg = f"Transformation failed: {e}"
        logger.error(error_msg)
        raise TransformationError(error_msg) from e

    duration_ms = round((time.perf_counter() - start_time) * 1000)
    logger.info(
        f"Transformed {data.total_movies} movies into {len(data.monthly_data)} months "
        f"in {duration_ms}ms"
    )
    return data


def _release_date_bounds(movies: Sequence[Movie], clock: Optional[IClock]) -> Tuple[str, str]:
    """Earliest and latest valid release dates, today's date if there are none."""
    dates = [
        parsed for parsed in (parse_release_date(movie.release_date) for movie in movies) if parsed
    ]

    if not dates:
        today = (clock.today() if clock else datetime.now(timezone.utc).date()).isoformat()
        return today, today

    return min(dates).isoformat(), max(dates).isoformat()


def validate_dashboard_data(data: DashboardData) -> ValidationResult:
    """Check a dashboard for inconsistencies.

    Findings are advisory and never raised.

    Args:
        data: Dashboard aggregate.

    Returns:
        Validation result with errors and warnings.
    """
    errors: List[str] = []
    warnings: List[str] = []

    if not data.monthly_data:
        errors.append("No monthly data available")
    else:
        months = [record.month for record in data.monthly_data]
        if any(current < previous for previous, current in zip(months, months[1:])):
            warnings.append("Monthly data is not in chronological order")

    if not data.top_movies:
        warnings.append("No top movies available")

    if not data.genre_distribution:
        warnings.append("No genre distribution available")
    else:
        total_percentage = sum(entry.percentage for entry in data.genre_distribution)
        if abs(total_percentage - 100) > PERCENTAGE_SUM_TOLERANCE:
            warnings.append(
                f"Genre percentages do not add up to 100% (actual: {total_percentage:.2f}%)"
            )

    if data.date_range.start > data.date_range.end:
        errors.append("Invalid date range (start is after end)")

    return ValidationResult(is_valid=not errors, errors=errors, warnings=warnings)


def get_transformation_summary(data: DashboardData) -> TransformationSummary:
    """Summarize what a pipeline run produced."""
    return TransformationSummary(
        total_movies_processed=data.total_movies,
        months_analyzed=len(data.monthly_data),
        genres_found=len(data.genre_distribution),
        top_movies_selected=len(data.top_movies),
        date_range_covered=f"{data.date_range.start} to {data.date_range.end}",
        transformations_applied=transformation_labels(data.window_size, data.top_n),
    )

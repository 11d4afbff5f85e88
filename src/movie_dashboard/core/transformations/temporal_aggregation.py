"""Monthly aggregation of movie releases.

Groups movies by release month (``YYYY-MM``) and computes per-month averages.
Movies without a usable release date are left out silently.
"""

import logging
from typing import Dict, List, Sequence

from ...utils.date_utils import month_key, parse_release_date
from ...utils.number_utils import round_half_up
from ..models import Genre, MonthlyRecord, Movie

logger = logging.getLogger(__name__)

MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]


def aggregate_by_month(movies: Sequence[Movie], genres: Sequence[Genre]) -> List[MonthlyRecord]:
    """Aggregate movies into one record per release month.

    Args:
        movies: Movies to aggregate.
        genres: Known genres. Not used yet; reserved for per-month genre breakdowns.

    Returns:
        Monthly records sorted by month key, oldest first.
    """
    movies_by_month: Dict[str, List[Movie]] = {}
    skipped = 0

    for movie in movies:
        release_date = parse_release_date(movie.release_date)
        if release_date is None:
            skipped += 1
            continue
        movies_by_month.setdefault(month_key(release_date), []).append(movie)

    if skipped:
        logger.debug(f"Skipped {skipped} movies without a valid release date")

    monthly_data = []
    for key, month_movies in movies_by_month.items():
        count = len(month_movies)
        total_popularity = sum(movie.popularity for movie in month_movies)
        total_vote_average = sum(movie.vote_average for movie in month_movies)

        monthly_data.append(
            MonthlyRecord(
                month=key,
                year=int(key[:4]),
                movies_count=count,
                avg_popularity=round_half_up(total_popularity / count),
                avg_vote_average=round_half_up(total_vote_average / count),
                total_vote_count=sum(movie.vote_count for movie in month_movies),
            )
        )

    # Zero-padded keys sort chronologically
    monthly_data.sort(key=lambda record: record.month)
    return monthly_data


def filter_by_date_range(
    monthly_data: Sequence[MonthlyRecord], start_date: str, end_date: str
) -> List[MonthlyRecord]:
    """Keep months within an inclusive date range.

    Args:
        monthly_data: Monthly records.
        start_date: Start date; only its ``YYYY-MM`` prefix is used.
        end_date: End date; only its ``YYYY-MM`` prefix is used.

    Returns:
        Records whose month lies within the range.
    """
    start = start_date[:7]
    end = end_date[:7]
    return [record for record in monthly_data if start <= record.month <= end]


def get_month_name(key: str) -> str:
    """Readable name for a month key, e.g. ``2024-03`` -> ``March 2024``."""
    year, month = key.split("-")
    return f"{MONTH_NAMES[int(month) - 1]} {year}"

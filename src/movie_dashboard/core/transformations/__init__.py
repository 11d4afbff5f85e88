"""Dashboard data transformations."""

from .genre_analysis import (
    analyze_genre_distribution,
    enrich_movies_with_genre_names,
    filter_genres,
    get_genre_stats,
    get_genres_by_popularity,
    get_top_genres,
    get_top_rated_genres,
)
from .percentage_change import (
    calculate_percent_change,
    calculate_percentage_change,
    get_average_popularity_change,
    get_average_vote_change,
    get_top_growth_periods,
)
from .pipeline import (
    get_transformation_summary,
    transform_dashboard_data,
    transformation_labels,
    validate_dashboard_data,
)
from .rolling_window import (
    calculate_exponential_moving_average,
    calculate_rolling_average,
    identify_trends,
)
from .temporal_aggregation import aggregate_by_month, filter_by_date_range, get_month_name
from .top_movies import (
    MIN_VOTE_COUNT,
    get_top_movies,
    get_top_movies_by_genre,
    get_top_movies_stats,
    get_top_rated_movies,
)

__all__ = [
    "aggregate_by_month",
    "filter_by_date_range",
    "get_month_name",
    "calculate_percentage_change",
    "calculate_percent_change",
    "get_average_popularity_change",
    "get_average_vote_change",
    "get_top_growth_periods",
    "calculate_rolling_average",
    "calculate_exponential_moving_average",
    "identify_trends",
    "MIN_VOTE_COUNT",
    "get_top_movies",
    "get_top_rated_movies",
    "get_top_movies_by_genre",
    "get_top_movies_stats",
    "analyze_genre_distribution",
    "get_top_genres",
    "get_genres_by_popularity",
    "get_top_rated_genres",
    "enrich_movies_with_genre_names",
    "get_genre_stats",
    "filter_genres",
    "transform_dashboard_data",
    "validate_dashboard_data",
    "get_transformation_summary",
    "transformation_labels",
]

"""Core data models."""

from .dashboard import (
    DashboardData,
    DashboardFilters,
    DashboardReport,
    DateRange,
    GenreCount,
    GenreDistribution,
    GenreStats,
    MonthlyRecord,
    RankingCriterion,
    SortOption,
    TopMovie,
    TopMoviesStats,
    TransformationSummary,
    TrendAnalysis,
    TrendDirection,
    ValidationResult,
)
from .movie import EnrichedMovie, Genre, Movie, MovieDetails, MoviePage
from .trace import CacheStats, HttpTrace, WebhookEvent, WebhookPayload

__all__ = [
    "Movie",
    "Genre",
    "EnrichedMovie",
    "MovieDetails",
    "MoviePage",
    "DashboardFilters",
    "SortOption",
    "RankingCriterion",
    "TrendDirection",
    "MonthlyRecord",
    "TopMovie",
    "GenreDistribution",
    "DateRange",
    "DashboardData",
    "ValidationResult",
    "TrendAnalysis",
    "GenreCount",
    "TopMoviesStats",
    "GenreStats",
    "TransformationSummary",
    "DashboardReport",
    "HttpTrace",
    "WebhookEvent",
    "WebhookPayload",
    "CacheStats",
]

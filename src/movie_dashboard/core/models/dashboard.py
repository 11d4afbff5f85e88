"""Dashboard aggregate data models."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SortOption(str, Enum):
    """TMDb discover sort options."""

    POPULARITY_DESC = "popularity.desc"
    POPULARITY_ASC = "popularity.asc"
    VOTE_AVERAGE_DESC = "vote_average.desc"
    VOTE_AVERAGE_ASC = "vote_average.asc"
    RELEASE_DATE_DESC = "release_date.desc"
    RELEASE_DATE_ASC = "release_date.asc"


class RankingCriterion(str, Enum):
    """Top movies ranking criterion."""

    POPULARITY = "popularity"
    VOTE_AVERAGE = "vote_average"
    VOTE_COUNT = "vote_count"
    COMBINED = "combined"


class TrendDirection(str, Enum):
    """Direction of a smoothed series."""

    ASCENDING = "ascending"
    DESCENDING = "descending"
    STABLE = "stable"


class DashboardFilters(BaseModel):
    """Filters that produced a dashboard."""

    model_config = ConfigDict(frozen=True)

    start_date: str = Field(default="", description="Start date (YYYY-MM-DD), empty for none")
    end_date: str = Field(default="", description="End date (YYYY-MM-DD), empty for none")
    genres: List[int] = Field(
        default_factory=list, description="Genre IDs, applied by the catalog fetch only"
    )
    sort_by: SortOption = Field(default=SortOption.POPULARITY_DESC, description="Discover sort")
    min_vote_count: int = Field(default=100, ge=0, description="Minimum vote count")

    @property
    def has_date_range(self) -> bool:
        """Whether both date bounds are set."""
        return bool(self.start_date and self.end_date)


class MonthlyRecord(BaseModel):
    """Aggregated figures for one release month."""

    model_config = ConfigDict(frozen=True)

    month: str = Field(..., description="Month key (YYYY-MM)")
    year: int = Field(..., description="Calendar year")
    movies_count: int = Field(..., description="Movies released in the month")
    avg_popularity: float = Field(..., description="Average popularity")
    avg_vote_average: float = Field(..., description="Average vote average")
    total_vote_count: int = Field(..., description="Summed vote count")
    popularity_change_percent: Optional[float] = Field(
        None, description="Popularity change vs previous month (%)"
    )
    vote_change_percent: Optional[float] = Field(
        None, description="Vote average change vs previous month (%)"
    )
    popularity_moving_avg: Optional[float] = Field(None, description="Popularity moving average")
    vote_moving_avg: Optional[float] = Field(None, description="Vote average moving average")


class TopMovie(BaseModel):
    """Ranked movie entry."""

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    popularity: float
    vote_average: float
    poster_path: Optional[str] = None
    genre_names: List[str] = Field(default_factory=list)
    release_date: str


class GenreDistribution(BaseModel):
    """Share of movies carrying one genre."""

    model_config = ConfigDict(frozen=True)

    genre_id: int
    genre_name: str
    count: int
    percentage: float = Field(..., description="Share of all input movies (0-100)")
    avg_popularity: float
    avg_vote_average: float


class DateRange(BaseModel):
    """Date range covered by a dashboard."""

    start: str
    end: str


class DashboardData(BaseModel):
    """Complete dashboard aggregate."""

    monthly_data: List[MonthlyRecord] = Field(default_factory=list)
    top_movies: List[TopMovie] = Field(default_factory=list)
    genre_distribution: List[GenreDistribution] = Field(default_factory=list)
    total_movies: int = Field(default=0, description="Movies in the input set")
    date_range: DateRange
    filters_applied: DashboardFilters = Field(default_factory=DashboardFilters)
    window_size: int = Field(default=3, ge=1, description="Moving average window used")
    top_n: int = Field(default=10, gt=0, description="Top movies limit used")
    ranking_criterion: RankingCriterion = Field(
        default=RankingCriterion.POPULARITY, description="Top movies criterion used"
    )


class ValidationResult(BaseModel):
    """Advisory validation findings for a dashboard."""

    is_valid: bool
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)


class TrendAnalysis(BaseModel):
    """Trend classification of the smoothed monthly series."""

    popularity_trend: TrendDirection = TrendDirection.STABLE
    vote_trend: TrendDirection = TrendDirection.STABLE
    trend_strength: float = Field(default=0.0, ge=0.0, le=1.0)


class GenreCount(BaseModel):
    """Genre name with an occurrence count."""

    genre: str
    count: int


class TopMoviesStats(BaseModel):
    """Summary statistics over a top movies list."""

    avg_popularity: float = 0.0
    avg_vote_average: float = 0.0
    most_common_genres: List[GenreCount] = Field(default_factory=list)
    total_movies: int = 0


class GenreStats(BaseModel):
    """Summary statistics over a genre distribution."""

    total_genres: int = 0
    avg_movies_per_genre: float = 0.0
    most_popular_genre: Optional[GenreDistribution] = None
    least_popular_genre: Optional[GenreDistribution] = None
    genre_with_highest_rating: Optional[GenreDistribution] = None


class TransformationSummary(BaseModel):
    """Human readable summary of a pipeline run."""

    total_movies_processed: int
    months_analyzed: int
    genres_found: int
    top_movies_selected: int
    date_range_covered: str
    transformations_applied: List[str] = Field(default_factory=list)


class DashboardReport(BaseModel):
    """Dashboard aggregate together with its derived diagnostics."""

    data: DashboardData
    validation: ValidationResult
    trends: TrendAnalysis
    summary: TransformationSummary

"""Movie catalog data models."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Genre(BaseModel):
    """Movie genre reference entry."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="TMDb genre ID")
    name: str = Field(..., description="Genre display name")


class Movie(BaseModel):
    """Movie record as returned by TMDb discover.

    ``release_date`` is kept as the raw string; it may be empty or malformed
    and is only interpreted by the transformation stages.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int = Field(..., description="TMDb movie ID")
    title: str = Field(default="", description="Movie title")
    original_title: Optional[str] = Field(None, description="Original title")
    overview: str = Field(default="", description="Movie overview/plot")
    poster_path: Optional[str] = Field(None, description="Poster image path")
    backdrop_path: Optional[str] = Field(None, description="Backdrop image path")
    release_date: Optional[str] = Field(None, description="Release date (YYYY-MM-DD)")
    adult: bool = Field(default=False, description="Adult content flag")
    genre_ids: List[int] = Field(default_factory=list, description="TMDb genre IDs")
    original_language: Optional[str] = Field(None, description="Original language")
    popularity: float = Field(default=0.0, ge=0.0, description="TMDb popularity score")
    vote_average: float = Field(default=0.0, description="Average rating")
    vote_count: int = Field(default=0, ge=0, description="Number of votes")
    video: bool = Field(default=False, description="Video flag")


class EnrichedMovie(Movie):
    """Movie with resolved genre names."""

    genre_names: List[str] = Field(default_factory=list, description="Resolved genre names")


class MovieDetails(BaseModel):
    """Full movie details from the TMDb movie endpoint."""

    model_config = ConfigDict(extra="ignore")

    id: int = Field(..., description="TMDb movie ID")
    title: str = Field(..., description="Movie title")
    original_title: Optional[str] = Field(None, description="Original title")
    overview: str = Field(default="", description="Movie overview/plot")
    poster_path: Optional[str] = Field(None, description="Poster image path")
    backdrop_path: Optional[str] = Field(None, description="Backdrop image path")
    release_date: Optional[str] = Field(None, description="Release date (YYYY-MM-DD)")
    genres: List[Genre] = Field(default_factory=list, description="Movie genres")
    original_language: Optional[str] = Field(None, description="Original language")
    popularity: float = Field(default=0.0, description="TMDb popularity score")
    vote_average: float = Field(default=0.0, description="Average rating")
    vote_count: int = Field(default=0, description="Number of votes")
    runtime: Optional[int] = Field(None, description="Runtime in minutes")
    budget: int = Field(default=0, description="Budget in USD")
    revenue: int = Field(default=0, description="Revenue in USD")
    homepage: Optional[str] = Field(None, description="Official homepage")
    imdb_id: Optional[str] = Field(None, description="IMDb ID")
    status: Optional[str] = Field(None, description="Release status")
    tagline: Optional[str] = Field(None, description="Tagline")

    @property
    def genre_names(self) -> List[str]:
        """Genre names in TMDb order."""
        return [genre.name for genre in self.genres]


class MoviePage(BaseModel):
    """One page of discover results."""

    page: int = Field(default=1, description="Page number")
    results: List[Movie] = Field(default_factory=list, description="Movies on this page")
    total_pages: int = Field(default=0, description="Total pages available")
    total_results: int = Field(default=0, description="Total results available")

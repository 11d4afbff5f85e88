"""Offline movie catalog backed by bundled sample data."""

import math
from typing import List, Optional

from ...config.models import Config
from ...infrastructure.logging import LoggerMixin
from ..interfaces import IMovieCatalog
from ..models import DashboardFilters, Genre, Movie, MovieDetails, MoviePage

PAGE_SIZE = 20

MOCK_GENRES = [
    Genre(id=28, name="Action"),
    Genre(id=12, name="Adventure"),
    Genre(id=16, name="Animation"),
    Genre(id=35, name="Comedy"),
    Genre(id=80, name="Crime"),
    Genre(id=99, name="Documentary"),
    Genre(id=18, name="Drama"),
    Genre(id=10751, name="Family"),
    Genre(id=14, name="Fantasy"),
    Genre(id=36, name="History"),
    Genre(id=27, name="Horror"),
    Genre(id=10402, name="Music"),
    Genre(id=9648, name="Mystery"),
    Genre(id=10749, name="Romance"),
    Genre(id=878, name="Science Fiction"),
    Genre(id=10770, name="TV Movie"),
    Genre(id=53, name="Thriller"),
    Genre(id=10752, name="War"),
    Genre(id=37, name="Western"),
]


def _mock_movie(
    movie_id: int,
    title: str,
    release_date: str,
    genre_ids: List[int],
    popularity: float,
    vote_average: float,
    vote_count: int,
    overview: str = "",
) -> Movie:
    return Movie(
        id=movie_id,
        title=title,
        original_title=title,
        overview=overview,
        poster_path=f"/mock/poster_{movie_id}.jpg",
        backdrop_path=f"/mock/backdrop_{movie_id}.jpg",
        release_date=release_date,
        genre_ids=genre_ids,
        original_language="en",
        popularity=popularity,
        vote_average=vote_average,
        vote_count=vote_count,
    )


MOCK_MOVIES = [
    _mock_movie(
        1,
        "Avatar: The Way of Water",
        "2022-12-16",
        [878, 12, 28],
        8547.326,
        7.6,
        8934,
        "More than a decade after the events of the first film...",
    ),
    _mock_movie(
        2,
        "Top Gun: Maverick",
        "2022-05-27",
        [28, 18],
        7234.521,
        8.3,
        7542,
        "After more than thirty years of service as one of the Navy's top aviators...",
    ),
    _mock_movie(
        3,
        "Black Panther: Wakanda Forever",
        "2022-11-11",
        [28, 12, 18],
        6821.445,
        7.3,
        6234,
        "Queen Ramonda, Shuri, M'Baku, Okoye and the Dora Milaje fight to protect their nation...",
    ),
    _mock_movie(
        4,
        "Spider-Man: No Way Home",
        "2021-12-17",
        [28, 12, 878],
        6234.123,
        8.1,
        18543,
        "Peter Parker is unmasked and no longer able to separate his normal life...",
    ),
    _mock_movie(
        5,
        "Encanto",
        "2021-11-24",
        [16, 35, 10751],
        5987.654,
        7.6,
        9876,
        "The tale of an extraordinary family, the Madrigals...",
    ),
    _mock_movie(
        6,
        "Dune",
        "2021-10-22",
        [878, 12],
        5654.321,
        7.8,
        11234,
        "Paul Atreides, a brilliant and gifted young man...",
    ),
    _mock_movie(7, "The Batman", "2022-03-04", [80, 9648, 53], 5321.987, 7.7, 9123),
    _mock_movie(
        8,
        "Doctor Strange in the Multiverse of Madness",
        "2022-05-06",
        [14, 28, 12],
        4987.234,
        7.3,
        7654,
    ),
    _mock_movie(9, "Turning Red", "2022-03-11", [16, 10751, 35, 14], 3456.789, 7.4, 4321),
    _mock_movie(10, "Nope", "2022-07-22", [27, 9648, 878], 2345.678, 6.9, 3456),
    _mock_movie(
        11, "Glass Onion: A Knives Out Mystery", "2022-12-23", [35, 80, 9648], 2987.456, 7.1, 5432
    ),
    _mock_movie(12, "Eternals", "2021-11-05", [28, 12, 14], 3876.543, 7.2, 6789),
]


class MockCatalog(IMovieCatalog, LoggerMixin):
    """Movie catalog serving bundled sample data, for offline runs."""

    def __init__(self, config: Config) -> None:
        """Initialize mock catalog.

        Args:
            config: Application configuration.
        """
        self._config = config

    async def get_genres(self) -> List[Genre]:
        """Get the bundled genres."""
        return list(MOCK_GENRES)

    async def discover_movies(self, filters: DashboardFilters, page: int = 1) -> MoviePage:
        """Get one page of sample movies.

        Only the genre filter is applied; a movie matches when it carries any
        of the requested genres.

        Args:
            filters: Discover filters.
            page: Page number, starting at 1.

        Returns:
            Page of sample movies.
        """
        page = max(page, 1)
        movies = MOCK_MOVIES
        if filters.genres:
            wanted = set(filters.genres)
            movies = [movie for movie in movies if wanted.intersection(movie.genre_ids)]

        start = (page - 1) * PAGE_SIZE
        return MoviePage(
            page=page,
            results=movies[start : start + PAGE_SIZE],
            total_pages=math.ceil(len(movies) / PAGE_SIZE),
            total_results=len(movies),
        )

    async def fetch_multiple_pages(
        self, filters: DashboardFilters, max_pages: Optional[int] = None
    ) -> List[Movie]:
        """Get sample movies from several pages."""
        page_limit = max_pages or self._config.tmdb.max_pages

        first_page = await self.discover_movies(filters, 1)
        movies = list(first_page.results)
        for page in range(2, min(first_page.total_pages, page_limit) + 1):
            movie_page = await self.discover_movies(filters, page)
            movies.extend(movie_page.results)

        self.logger.info(f"Serving {len(movies)} mock movies")
        return movies

    async def get_movie_details(self, movie_id: int) -> Optional[MovieDetails]:
        """Get details of a sample movie, None if unknown."""
        movie = next((movie for movie in MOCK_MOVIES if movie.id == movie_id), None)
        if movie is None:
            return None

        genres_by_id = {genre.id: genre for genre in MOCK_GENRES}
        return MovieDetails(
            **movie.model_dump(exclude={"adult", "genre_ids", "video"}),
            genres=[genres_by_id[genre_id] for genre_id in movie.genre_ids],
            status="Released",
        )

"""TMDb service implementation."""

import asyncio
import json
import time
from typing import Any, Awaitable, Callable, Dict, List, Optional, TypeVar

import aiohttp
from pydantic import ValidationError
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from ... import __version__
from ...config.models import Config
from ...infrastructure.cache import cache_with_loader, generate_cache_key
from ...infrastructure.logging import LoggerMixin
from ...utils import CatalogServiceError
from ..interfaces import ICache, IMovieCatalog, ITraceLogger
from ..models import DashboardFilters, Genre, Movie, MovieDetails, MoviePage

T = TypeVar("T")

GENRES_CACHE_KEY = "tmdb:genres"
DISCOVER_CACHE_PREFIX = "tmdb:movies:discover"
DETAILS_CACHE_PREFIX = "tmdb:movie:details"


def is_retryable_error(error: BaseException) -> bool:
    """Check whether a failed TMDb request should be retried.

    Transport errors, timeouts, rate limiting (429) and server errors (5xx)
    are retried; other HTTP errors are not.
    """
    if isinstance(error, aiohttp.ClientResponseError):
        return error.status == 429 or error.status >= 500
    return isinstance(error, (aiohttp.ClientError, asyncio.TimeoutError))


class TMDbService(IMovieCatalog, LoggerMixin):
    """TMDb API client with caching, retries and HTTP tracing."""

    def __init__(self, config: Config, cache: ICache, trace_logger: ITraceLogger) -> None:
        """Initialize TMDb service.

        Args:
            config: Application configuration.
            cache: Response cache.
            trace_logger: HTTP trace recorder.
        """
        self._config = config
        self._tmdb_config = config.tmdb
        self._cache_config = config.cache
        self._cache = cache
        self._trace_logger = trace_logger
        self._session: Optional[aiohttp.ClientSession] = None
        self._retry_wait = wait_exponential(multiplier=0.5, min=0.5, max=8)

    async def get_genres(self) -> List[Genre]:
        """Get all movie genres.

        Returns:
            List of genres.

        Raises:
            CatalogServiceError: If request fails.
        """
        try:
            genres = await self._cached(
                GENRES_CACHE_KEY,
                self._cache_config.genres_ttl_seconds,
                self._load_genres,
                ["tmdb", "genres"],
            )
            self.logger.info(f"Fetched {len(genres)} genres")
            return genres

        except Exception as e:
            error_msg = f"Failed to get genres: {e}"
            self.logger.error(error_msg)
            raise CatalogServiceError(error_msg) from e

    async def discover_movies(self, filters: DashboardFilters, page: int = 1) -> MoviePage:
        """Get one page of movies matching filters.

        Args:
            filters: Discover filters.
            page: Page number, clamped to the configured page limit.

        Returns:
            Page of movies with complete data.

        Raises:
            CatalogServiceError: If request fails.
        """
        params = self.build_discover_params(filters, page)
        cache_key = generate_cache_key(DISCOVER_CACHE_PREFIX, params)

        try:
            movie_page = await self._cached(
                cache_key,
                self._cache_config.movies_ttl_seconds,
                lambda: self._load_discover_page(params, filters.min_vote_count),
                ["tmdb", "movies"],
            )
            self.logger.debug(
                f"Discover page {movie_page.page}: {len(movie_page.results)} movies "
                f"({movie_page.total_results} total)"
            )
            return movie_page

        except Exception as e:
            error_msg = f"Failed to discover movies (page {params['page']}): {e}"
            self.logger.error(error_msg)
            raise CatalogServiceError(error_msg) from e

    async def fetch_multiple_pages(
        self, filters: DashboardFilters, max_pages: Optional[int] = None
    ) -> List[Movie]:
        """Get movies from several discover pages.

        The first page is fetched alone to learn the page count; the remaining
        pages are fetched concurrently.

        Args:
            filters: Discover filters.
            max_pages: Maximum number of pages, capped by the configured limit.

        Returns:
            Movies from all fetched pages, in page order.

        Raises:
            CatalogServiceError: If request fails.
        """
        page_limit = min(max_pages or self._tmdb_config.max_pages, self._tmdb_config.max_pages)

        first_page = await self.discover_movies(filters, 1)
        movies = list(first_page.results)

        last_page = min(first_page.total_pages, page_limit)
        if last_page > 1:
            tasks = [
                asyncio.ensure_future(self.discover_movies(filters, page))
                for page in range(2, last_page + 1)
            ]
            try:
                pages = await asyncio.gather(*tasks)
            except Exception:
                # Stop sibling requests before the session can be closed under them
                for task in tasks:
                    task.cancel()
                await asyncio.gather(*tasks, return_exceptions=True)
                raise
            for movie_page in pages:
                movies.extend(movie_page.results)

        self.logger.info(f"Fetched {len(movies)} movies from {max(last_page, 1)} pages")
        return movies

    async def get_movie_details(self, movie_id: int) -> Optional[MovieDetails]:
        """Get detailed movie information.

        Args:
            movie_id: TMDb movie ID.

        Returns:
            Movie details or None if not found.

        Raises:
            CatalogServiceError: If request fails.
        """
        try:
            return await self._cached(
                f"{DETAILS_CACHE_PREFIX}:{movie_id}",
                self._cache_config.details_ttl_seconds,
                lambda: self._load_movie_details(movie_id),
                ["tmdb", "movie", "details"],
            )

        except Exception as e:
            error_msg = f"Failed to get movie details for TMDb ID {movie_id}: {e}"
            self.logger.error(error_msg)
            raise CatalogServiceError(error_msg) from e

    def build_discover_params(self, filters: DashboardFilters, page: int = 1) -> Dict[str, Any]:
        """Build TMDb discover query parameters, without credentials.

        Args:
            filters: Discover filters.
            page: Requested page.

        Returns:
            Query parameters.
        """
        params: Dict[str, Any] = {
            "page": max(1, min(page, self._tmdb_config.max_pages)),
            "include_adult": "false",
            "include_video": "false",
            "language": self._tmdb_config.language,
            "sort_by": filters.sort_by.value,
            "vote_count.gte": filters.min_vote_count,
        }

        if filters.start_date:
            params["primary_release_date.gte"] = filters.start_date
        if filters.end_date:
            params["primary_release_date.lte"] = filters.end_date
        if filters.genres:
            params["with_genres"] = ",".join(str(genre_id) for genre_id in filters.genres)

        return params

    async def _load_genres(self) -> List[Genre]:
        data = await self._get_json("/genre/movie/list", {"language": self._tmdb_config.language})
        return [Genre.model_validate(genre) for genre in (data or {}).get("genres", [])]

    async def _load_discover_page(self, params: Dict[str, Any], min_vote_count: int) -> MoviePage:
        data = await self._get_json("/discover/movie", params) or {}

        results = []
        for item in data.get("results", []):
            try:
                movie = Movie.model_validate(item)
            except ValidationError as e:
                self.logger.warning(f"Skipping invalid movie {item.get('id')}: {e}")
                continue

            if (
                movie.poster_path
                and movie.title
                and movie.release_date
                and movie.vote_count >= min_vote_count
            ):
                results.append(movie)

        return MoviePage(
            page=data.get("page", params["page"]),
            results=results,
            total_pages=data.get("total_pages", 0),
            total_results=data.get("total_results", 0),
        )

    async def _load_movie_details(self, movie_id: int) -> Optional[MovieDetails]:
        data = await self._get_json(
            f"/movie/{movie_id}", {"language": self._tmdb_config.language}, allow_not_found=True
        )
        if data is None:
            self.logger.info(f"Movie {movie_id} not found")
            return None
        return MovieDetails.model_validate(data)

    async def _cached(
        self,
        key: str,
        ttl_seconds: int,
        loader: Callable[[], Awaitable[T]],
        tags: List[str],
    ) -> T:
        """Load through the cache when caching is enabled."""
        if not self._cache_config.enabled:
            return await loader()
        return await cache_with_loader(self._cache, key, ttl_seconds, loader, tags)

    async def _get_json(
        self, path: str, params: Dict[str, Any], allow_not_found: bool = False
    ) -> Optional[Dict[str, Any]]:
        """GET a TMDb endpoint with retries.

        Args:
            path: Endpoint path below the base URL.
            params: Query parameters, without credentials.
            allow_not_found: Return None on 404 instead of raising.

        Returns:
            Decoded JSON body, or None on an allowed 404.
        """
        url = f"{self._tmdb_config.base_url}{path}"

        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self._tmdb_config.retries),
            wait=self._retry_wait,
            retry=retry_if_exception(is_retryable_error),
            reraise=True,
        ):
            with attempt:
                attempt_number = attempt.retry_state.attempt_number
                if attempt_number > 1:
                    self.logger.warning(f"Retrying GET {path} (attempt {attempt_number})")
                return await self._send(url, params, allow_not_found)

        return None

    async def _send(
        self, url: str, params: Dict[str, Any], allow_not_found: bool
    ) -> Optional[Dict[str, Any]]:
        """Perform a single GET and record its trace."""
        query = {"api_key": self._tmdb_config.api_key, **params}
        start_time = time.perf_counter()
        status = 0
        response_size = 0
        error: Optional[str] = None

        try:
            async with self._get_session().get(url, params=query) as response:
                status = response.status
                body = await response.read()
                response_size = len(body)

                if status == 404 and allow_not_found:
                    return None

                response.raise_for_status()
                return json.loads(body)

        except Exception as e:
            error = str(e) or e.__class__.__name__
            raise

        finally:
            await self._trace_logger.log_http_trace(
                "GET",
                url,
                status,
                (time.perf_counter() - start_time) * 1000,
                payload_size=0,
                response_size=response_size,
                params=params,
                error=error,
            )

    def _get_session(self) -> aiohttp.ClientSession:
        """Get or create HTTP session.

        Returns:
            HTTP session.
        """
        if self._session is None:
            timeout = aiohttp.ClientTimeout(total=self._tmdb_config.timeout)
            self._session = aiohttp.ClientSession(
                timeout=timeout,
                headers={
                    "Accept": "application/json",
                    "User-Agent": f"MovieDashboard/{__version__}",
                },
            )
        return self._session

    async def close(self) -> None:
        """Close HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> "TMDbService":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

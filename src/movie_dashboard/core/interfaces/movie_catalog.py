"""Movie catalog interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models import DashboardFilters, Genre, Movie, MovieDetails, MoviePage


class IMovieCatalog(ABC):
    """Interface for movie catalog sources."""

    @abstractmethod
    async def get_genres(self) -> List[Genre]:
        """Get all movie genres.

        Returns:
            List of genres.

        Raises:
            CatalogServiceError: If request fails.
        """
        pass

    @abstractmethod
    async def discover_movies(self, filters: DashboardFilters, page: int = 1) -> MoviePage:
        """Get one page of movies matching filters.

        Args:
            filters: Discover filters.
            page: Page number, starting at 1.

        Returns:
            Page of movies.

        Raises:
            CatalogServiceError: If request fails.
        """
        pass

    @abstractmethod
    async def fetch_multiple_pages(
        self, filters: DashboardFilters, max_pages: Optional[int] = None
    ) -> List[Movie]:
        """Get movies from several discover pages.

        Args:
            filters: Discover filters.
            max_pages: Maximum number of pages, configured value when None.

        Returns:
            Movies from all fetched pages, in page order.

        Raises:
            CatalogServiceError: If request fails.
        """
        pass

    @abstractmethod
    async def get_movie_details(self, movie_id: int) -> Optional[MovieDetails]:
        """Get detailed movie information.

        Args:
            movie_id: TMDb movie ID.

        Returns:
            Movie details or None if not found.

        Raises:
            CatalogServiceError: If request fails.
        """
        pass

    async def close(self) -> None:
        """Release held resources."""
        pass

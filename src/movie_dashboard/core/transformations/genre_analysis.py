"""Genre name resolution and genre distribution analysis."""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from ...utils.number_utils import round_half_up
from ..models import EnrichedMovie, Genre, GenreDistribution, GenreStats, Movie


@dataclass
class _GenreAccumulator:
    count: int = 0
    total_popularity: float = 0.0
    total_vote_average: float = 0.0
    total_vote_count: int = 0


def analyze_genre_distribution(
    movies: Sequence[Movie], genres: Sequence[Genre]
) -> List[GenreDistribution]:
    """Count movies per genre and average their figures.

    Genre ids that are not in ``genres`` are ignored. Genres without any
    matching movie are left out of the result. Percentages are relative to the
    full input movie count, so they can add up to more than 100.

    Args:
        movies: Movies to analyze.
        genres: Known genres.

    Returns:
        Genre distribution sorted by movie count, highest first.
    """
    genre_names = {genre.id: genre.name for genre in genres}
    stats: Dict[int, _GenreAccumulator] = {genre.id: _GenreAccumulator() for genre in genres}

    for movie in movies:
        if not movie.genre_ids:
            continue

        for genre_id in movie.genre_ids:
            accumulator = stats.get(genre_id)
            if accumulator is None:
                continue
            accumulator.count += 1
            accumulator.total_popularity += movie.popularity
            accumulator.total_vote_average += movie.vote_average
            accumulator.total_vote_count += movie.vote_count

    total_movies = len(movies)
    distribution = [
        GenreDistribution(
            genre_id=genre_id,
            genre_name=genre_names.get(genre_id, f"Genre {genre_id}"),
            count=accumulator.count,
            percentage=round_half_up(accumulator.count / total_movies * 100),
            avg_popularity=round_half_up(accumulator.total_popularity / accumulator.count),
            avg_vote_average=round_half_up(accumulator.total_vote_average / accumulator.count),
        )
        for genre_id, accumulator in stats.items()
        if accumulator.count > 0
    ]

    distribution.sort(key=lambda entry: entry.count, reverse=True)
    return distribution


def get_top_genres(
    distribution: Sequence[GenreDistribution], top_n: int = 5
) -> List[GenreDistribution]:
    """Genres with the most movies."""
    return sorted(distribution, key=lambda entry: entry.count, reverse=True)[:top_n]


def get_genres_by_popularity(
    distribution: Sequence[GenreDistribution], min_movies: int = 3, top_n: int = 5
) -> List[GenreDistribution]:
    """Genres with the highest average popularity among those with enough movies."""
    eligible = [entry for entry in distribution if entry.count >= min_movies]
    return sorted(eligible, key=lambda entry: entry.avg_popularity, reverse=True)[:top_n]


def get_top_rated_genres(
    distribution: Sequence[GenreDistribution], min_movies: int = 5, top_n: int = 5
) -> List[GenreDistribution]:
    """Genres with the highest average rating among those with enough movies."""
    eligible = [entry for entry in distribution if entry.count >= min_movies]
    return sorted(eligible, key=lambda entry: entry.avg_vote_average, reverse=True)[:top_n]


def enrich_movies_with_genre_names(
    movies: Sequence[Movie], genres: Sequence[Genre]
) -> List[EnrichedMovie]:
    """Attach resolved genre names to each movie.

    Unknown genre ids are dropped; the order of known ones is kept.
    """
    genre_names = {genre.id: genre.name for genre in genres}
    return [
        EnrichedMovie(
            **movie.model_dump(),
            genre_names=[
                genre_names[genre_id] for genre_id in movie.genre_ids if genre_id in genre_names
            ],
        )
        for movie in movies
    ]


def get_genre_stats(distribution: Sequence[GenreDistribution]) -> GenreStats:
    """Headline statistics of a genre distribution.

    Args:
        distribution: Genre distribution.

    Returns:
        Genre count, average movies per genre and the standout genres.
    """
    if not distribution:
        return GenreStats()

    total_across_genres = sum(entry.count for entry in distribution)

    return GenreStats(
        total_genres=len(distribution),
        avg_movies_per_genre=round_half_up(total_across_genres / len(distribution)),
        most_popular_genre=max(distribution, key=lambda entry: entry.count),
        least_popular_genre=min(distribution, key=lambda entry: entry.count),
        genre_with_highest_rating=max(distribution, key=lambda entry: entry.avg_vote_average),
    )


def filter_genres(
    distribution: Sequence[GenreDistribution],
    min_count: Optional[int] = None,
    max_count: Optional[int] = None,
    min_popularity: Optional[float] = None,
    min_rating: Optional[float] = None,
    genre_names: Optional[List[str]] = None,
) -> List[GenreDistribution]:
    """Filter a genre distribution.

    Criteria left unset (or zero) do not filter.
    """
    result = []
    for entry in distribution:
        if min_count and entry.count < min_count:
            continue
        if max_count and entry.count > max_count:
            continue
        if min_popularity and entry.avg_popularity < min_popularity:
            continue
        if min_rating and entry.avg_vote_average < min_rating:
            continue
        if genre_names and entry.genre_name not in genre_names:
            continue
        result.append(entry)
    return result

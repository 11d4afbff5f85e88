"""Top-N movie rankings."""

from collections import Counter
from typing import Callable, Dict, List, Sequence, Union

from ...utils.number_utils import mean, round_half_up
from ..models import Genre, GenreCount, Movie, RankingCriterion, TopMovie, TopMoviesStats

# Quality floor for ranked movies; callers wanting another floor pre-filter.
MIN_VOTE_COUNT = 100

# Minimum rating for get_top_rated_movies
MIN_TOP_RATED_AVERAGE = 7.0


def _popularity(movie: TopMovie) -> float:
    return movie.popularity


def _vote_average(movie: TopMovie) -> float:
    return movie.vote_average


def _combined_score(movie: TopMovie) -> float:
    return movie.popularity / 100 + movie.vote_average * 10


# TopMovie does not carry vote_count, so that criterion ranks by popularity.
_SORT_KEYS: Dict[str, Callable[[TopMovie], float]] = {
    RankingCriterion.POPULARITY.value: _popularity,
    RankingCriterion.VOTE_AVERAGE.value: _vote_average,
    RankingCriterion.VOTE_COUNT.value: _popularity,
    RankingCriterion.COMBINED.value: _combined_score,
}


def get_top_movies(
    movies: Sequence[Movie],
    genres: Sequence[Genre],
    criterion: Union[RankingCriterion, str] = RankingCriterion.POPULARITY,
    top_n: int = 10,
) -> List[TopMovie]:
    """Rank movies by a criterion and keep the best N.

    Only movies with a title, poster, release date, positive popularity and at
    least ``MIN_VOTE_COUNT`` votes are ranked.

    Args:
        movies: Movies to rank.
        genres: Known genres used to resolve genre names.
        criterion: Ranking criterion; unknown values rank by popularity.
        top_n: Maximum number of movies to return.

    Returns:
        Ranked movies, best first.
    """
    genre_names = {genre.id: genre.name for genre in genres}

    valid_movies = [
        movie
        for movie in movies
        if movie.title
        and movie.poster_path
        and movie.release_date
        and movie.popularity > 0
        and movie.vote_count >= MIN_VOTE_COUNT
    ]

    enriched = [_to_top_movie(movie, genre_names) for movie in valid_movies]

    key = criterion.value if isinstance(criterion, RankingCriterion) else str(criterion)
    sort_key = _SORT_KEYS.get(key, _popularity)

    # sorted() is stable, ties keep input order
    ranked = sorted(enriched, key=sort_key, reverse=True)
    return ranked[: max(top_n, 0)]


def _to_top_movie(movie: Movie, genre_names: Dict[int, str]) -> TopMovie:
    return TopMovie(
        id=movie.id,
        title=movie.title,
        popularity=round_half_up(movie.popularity),
        vote_average=round_half_up(movie.vote_average),
        poster_path=movie.poster_path,
        genre_names=[
            genre_names[genre_id] for genre_id in movie.genre_ids if genre_id in genre_names
        ],
        release_date=movie.release_date or "",
    )


def get_top_rated_movies(
    movies: Sequence[Movie],
    genres: Sequence[Genre],
    min_votes: int = 500,
    top_n: int = 10,
) -> List[TopMovie]:
    """Best rated movies with a substantial number of votes."""
    highly_voted = [
        movie
        for movie in movies
        if movie.vote_count >= min_votes and movie.vote_average >= MIN_TOP_RATED_AVERAGE
    ]
    return get_top_movies(highly_voted, genres, RankingCriterion.VOTE_AVERAGE, top_n)


def get_top_movies_by_genre(
    movies: Sequence[Movie],
    genres: Sequence[Genre],
    genre_id: int,
    top_n: int = 5,
) -> List[TopMovie]:
    """Most popular movies carrying a given genre."""
    in_genre = [movie for movie in movies if genre_id in movie.genre_ids]
    return get_top_movies(in_genre, genres, RankingCriterion.POPULARITY, top_n)


def get_top_movies_stats(top_movies: Sequence[TopMovie]) -> TopMoviesStats:
    """Averages and most common genres of a ranked list.

    Args:
        top_movies: Ranked movies.

    Returns:
        Summary statistics; all zero for an empty list.
    """
    if not top_movies:
        return TopMoviesStats()

    genre_counter: Counter = Counter()
    for movie in top_movies:
        genre_counter.update(movie.genre_names)

    return TopMoviesStats(
        avg_popularity=round_half_up(mean(movie.popularity for movie in top_movies)),
        avg_vote_average=round_half_up(mean(movie.vote_average for movie in top_movies)),
        most_common_genres=[
            GenreCount(genre=genre, count=occurrences)
            for genre, occurrences in genre_counter.most_common(5)
        ],
        total_movies=len(top_movies),
    )

"""Test genre distribution analysis."""

from movie_dashboard.core.models import Genre, GenreStats
from movie_dashboard.core.transformations import (
    analyze_genre_distribution,
    enrich_movies_with_genre_names,
    filter_genres,
    get_genre_stats,
    get_genres_by_popularity,
    get_top_genres,
    get_top_rated_genres,
)


def test_analyze_genre_distribution(sample_movies, sample_genres):
    """Test counts, percentages and averages per genre."""
    distribution = analyze_genre_distribution(sample_movies, sample_genres)

    assert [(entry.genre_name, entry.count) for entry in distribution] == [
        ("Action", 3),
        ("Comedy", 3),
        ("Drama", 2),
    ]

    action, comedy, drama = distribution
    assert action.genre_id == 28
    assert action.percentage == 50.0
    assert action.avg_popularity == 90.0
    assert action.avg_vote_average == 7.17
    assert comedy.avg_popularity == 46.67
    assert comedy.avg_vote_average == 6.5
    assert drama.percentage == 33.33
    assert drama.avg_popularity == 75.0
    assert drama.avg_vote_average == 6.25


def test_analyze_genre_distribution_counts_cover_all_movies(sample_movies, sample_genres):
    """Test genre counts add up to at least the movie count."""
    distribution = analyze_genre_distribution(sample_movies, sample_genres)

    assert sum(entry.count for entry in distribution) >= len(sample_movies)


def test_analyze_genre_distribution_drops_empty_and_unknown_genres(make_movie):
    """Test unused genres are dropped and unknown ids ignored."""
    genres = [Genre(id=28, name="Action"), Genre(id=99, name="Documentary")]
    movies = [make_movie(1, genre_ids=[28, 12345]), make_movie(2, genre_ids=[])]

    distribution = analyze_genre_distribution(movies, genres)

    assert len(distribution) == 1
    assert distribution[0].genre_name == "Action"
    assert distribution[0].count == 1
    # Movies without genres still count towards the total
    assert distribution[0].percentage == 50.0


def test_analyze_genre_distribution_empty(sample_genres):
    """Test empty input."""
    assert analyze_genre_distribution([], sample_genres) == []


def test_genre_rankings(sample_movies, sample_genres):
    """Test top, popular and top rated genre helpers."""
    distribution = analyze_genre_distribution(sample_movies, sample_genres)

    assert [e.genre_name for e in get_top_genres(distribution, 2)] == ["Action", "Comedy"]
    assert [e.genre_name for e in get_genres_by_popularity(distribution, min_movies=3)] == [
        "Action",
        "Comedy",
    ]
    assert [e.genre_name for e in get_top_rated_genres(distribution, min_movies=2)] == [
        "Action",
        "Comedy",
        "Drama",
    ]


def test_enrich_movies_with_genre_names(make_movie, sample_genres):
    """Test genre names are attached in id order."""
    enriched = enrich_movies_with_genre_names(
        [make_movie(1, genre_ids=[35, 77, 28])], sample_genres
    )

    assert enriched[0].genre_names == ["Comedy", "Action"]
    assert enriched[0].genre_ids == [35, 77, 28]
    assert enriched[0].title == "Movie 1"


def test_get_genre_stats(sample_movies, sample_genres):
    """Test headline genre statistics."""
    stats = get_genre_stats(analyze_genre_distribution(sample_movies, sample_genres))

    assert stats.total_genres == 3
    assert stats.avg_movies_per_genre == 2.67
    assert stats.most_popular_genre.genre_name == "Action"
    assert stats.least_popular_genre.genre_name == "Drama"
    assert stats.genre_with_highest_rating.genre_name == "Action"


def test_get_genre_stats_empty():
    """Test statistics of an empty distribution."""
    assert get_genre_stats([]) == GenreStats()


def test_filter_genres(sample_movies, sample_genres):
    """Test each filter criterion."""
    distribution = analyze_genre_distribution(sample_movies, sample_genres)

    def names(entries):
        return [entry.genre_name for entry in entries]

    assert names(filter_genres(distribution)) == ["Action", "Comedy", "Drama"]
    assert names(filter_genres(distribution, min_count=3)) == ["Action", "Comedy"]
    assert names(filter_genres(distribution, max_count=2)) == ["Drama"]
    assert names(filter_genres(distribution, min_popularity=50)) == ["Action", "Drama"]
    assert names(filter_genres(distribution, min_rating=6.4)) == ["Action", "Comedy"]
    assert names(filter_genres(distribution, genre_names=["Drama"])) == ["Drama"]

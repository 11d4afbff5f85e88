"""Pytest configuration and fixtures."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, Mock

import pytest

from movie_dashboard.config import ConfigManager
from movie_dashboard.core.interfaces import ITraceLogger
from movie_dashboard.core.models import Genre, Movie
from movie_dashboard.infrastructure import Container, FixedClock


@pytest.fixture
def temp_config_file(tmp_path):
    """Create a temporary configuration file."""
    config_content = f"""
tmdb:
  api_key: "test-tmdb-key"
  base_url: "https://api.example.test/3"
  retries: 2
  max_pages: 3

traces:
  directory: "{(tmp_path / 'logs').as_posix()}"

pipeline:
  rolling_window: 3
  top_n: 10
"""
    config_file = tmp_path / "config.yaml"
    config_file.write_text(config_content)
    return config_file


@pytest.fixture
def config_manager(temp_config_file):
    """Create a configuration manager with test config."""
    return ConfigManager(temp_config_file)


@pytest.fixture
def config(config_manager):
    """Load test configuration."""
    return config_manager.load_config()


@pytest.fixture
def container(config_manager):
    """Create a test container."""
    container = Container(config_manager)
    return container


@pytest.fixture
def clock():
    """Clock frozen at 2024-06-15 12:00 UTC."""
    return FixedClock(datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def mock_trace_logger():
    """Trace logger that records nothing."""
    trace_logger = Mock(spec=ITraceLogger)
    trace_logger.log_http_trace = AsyncMock()
    return trace_logger


@pytest.fixture
def sample_genres():
    """Three known genres."""
    return [
        Genre(id=28, name="Action"),
        Genre(id=35, name="Comedy"),
        Genre(id=18, name="Drama"),
    ]


@pytest.fixture
def sample_movies():
    """Six movies over two months, all eligible for ranking."""
    return [
        Movie(
            id=1,
            title="Alpha",
            poster_path="/a.jpg",
            release_date="2024-01-05",
            genre_ids=[28],
            popularity=100.0,
            vote_average=8.0,
            vote_count=500,
        ),
        Movie(
            id=2,
            title="Bravo",
            poster_path="/b.jpg",
            release_date="2024-01-20",
            genre_ids=[28, 35],
            popularity=50.0,
            vote_average=7.0,
            vote_count=300,
        ),
        Movie(
            id=3,
            title="Charlie",
            poster_path="/c.jpg",
            release_date="2024-01-28",
            genre_ids=[18],
            popularity=30.0,
            vote_average=6.0,
            vote_count=200,
        ),
        Movie(
            id=4,
            title="Delta",
            poster_path="/d.jpg",
            release_date="2024-02-03",
            genre_ids=[35],
            popularity=80.0,
            vote_average=7.5,
            vote_count=400,
        ),
        Movie(
            id=5,
            title="Echo",
            poster_path="/e.jpg",
            release_date="2024-02-14",
            genre_ids=[28, 18],
            popularity=120.0,
            vote_average=6.5,
            vote_count=800,
        ),
        Movie(
            id=6,
            title="Foxtrot",
            poster_path="/f.jpg",
            release_date="2024-02-25",
            genre_ids=[35],
            popularity=10.0,
            vote_average=5.0,
            vote_count=150,
        ),
    ]


@pytest.fixture
def make_movie():
    """Factory building an eligible movie with overridable fields."""

    def _make_movie(movie_id: int, release_date: str = "2024-01-15", **overrides) -> Movie:
        values = dict(
            id=movie_id,
            title=f"Movie {movie_id}",
            poster_path=f"/{movie_id}.jpg",
            release_date=release_date,
            genre_ids=[28],
            popularity=10.0,
            vote_average=7.0,
            vote_count=200,
        )
        values.update(overrides)
        return Movie(**values)

    return _make_movie

"""End-to-end integration tests."""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from movie_dashboard.config import ConfigManager
from movie_dashboard.core.interfaces import IDashboardService, IMovieCatalog, ITraceLogger
from movie_dashboard.core.models import DashboardFilters, TrendDirection
from movie_dashboard.infrastructure import Container


def _fake_session(*payloads):
    """aiohttp session stand-in answering GETs with JSON payloads in order."""
    contexts = []
    for payload in payloads:
        response = MagicMock()
        response.status = 200
        response.read = AsyncMock(return_value=json.dumps(payload).encode("utf-8"))
        context = MagicMock()
        context.__aenter__.return_value = response
        contexts.append(context)

    session = MagicMock()
    session.get.side_effect = contexts
    session.close = AsyncMock()
    return session


@pytest.mark.integration
@pytest.mark.asyncio
async def test_mock_dashboard(integration_container):
    """Test building a dashboard from the bundled catalog."""
    service = integration_container.get(IDashboardService)

    report = await service.build_dashboard()

    data = report.data
    assert data.total_movies == 12
    assert [record.month for record in data.monthly_data] == [
        "2021-10",
        "2021-11",
        "2021-12",
        "2022-03",
        "2022-05",
        "2022-07",
        "2022-11",
        "2022-12",
    ]
    assert data.monthly_data[1].movies_count == 2
    assert data.monthly_data[1].popularity_moving_avg is None
    assert all(record.popularity_moving_avg is not None for record in data.monthly_data[2:])
    assert data.top_movies[0].title == "Avatar: The Way of Water"
    assert len(data.top_movies) == 10
    assert data.genre_distribution[0].genre_name == "Action"
    assert data.genre_distribution[0].count == 6

    assert report.validation.errors == []
    assert report.trends.popularity_trend in set(TrendDirection)
    assert 0.0 <= report.trends.trend_strength <= 1.0
    assert report.summary.months_analyzed == 8


@pytest.mark.integration
@pytest.mark.asyncio
async def test_mock_dashboard_date_filter(integration_container):
    """Test the date range narrows months but not rankings."""
    service = integration_container.get(IDashboardService)
    filters = service.default_filters().model_copy(
        update={"start_date": "2022-01-01", "end_date": "2022-06-30"}
    )

    report = await service.build_dashboard(filters)

    assert [record.month for record in report.data.monthly_data] == ["2022-03", "2022-05"]
    assert report.data.monthly_data[0].popularity_change_percent is None
    assert report.data.total_movies == 12
    assert report.data.date_range.start == "2022-01-01"


@pytest.mark.integration
@pytest.mark.asyncio
async def test_tmdb_dashboard_records_traces(integration_config):
    """Test a live-style run through TMDb service, cache and trace log."""
    container = Container(ConfigManager(integration_config))
    container.configure_default_services()

    catalog = container.get(IMovieCatalog)
    catalog._session = _fake_session(
        {"genres": [{"id": 28, "name": "Action"}, {"id": 35, "name": "Comedy"}]},
        {
            "page": 1,
            "total_pages": 1,
            "total_results": 3,
            "results": [
                {
                    "id": movie_id,
                    "title": f"Movie {movie_id}",
                    "poster_path": f"/{movie_id}.jpg",
                    "release_date": f"2024-0{movie_id}-10",
                    "genre_ids": [28] if movie_id % 2 else [35],
                    "popularity": 10.0 * movie_id,
                    "vote_average": 7.0,
                    "vote_count": 300,
                }
                for movie_id in (1, 2, 3)
            ],
        },
    )

    service = container.get(IDashboardService)
    filters = DashboardFilters(min_vote_count=100)

    report = await service.build_dashboard(filters)
    # Second run is served from the cache
    await service.build_dashboard(filters)

    assert report.data.total_movies == 3
    assert [movie.title for movie in report.data.top_movies] == ["Movie 3", "Movie 2", "Movie 1"]
    assert len(report.data.monthly_data) == 3
    assert report.data.monthly_data[2].popularity_moving_avg == 20.0

    trace_logger = container.get(ITraceLogger)
    traces = await trace_logger.get_recent_traces()
    assert [trace.url for trace in traces] == [
        "https://api.example.test/3/discover/movie",
        "https://api.example.test/3/genre/movie/list",
    ]
    assert all(trace.status == 200 for trace in traces)
    assert all("api_key" not in (trace.params or {}) for trace in traces)

    await container.close()
    assert catalog._session is None

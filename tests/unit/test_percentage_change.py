"""Test percentage change calculation."""

import pytest

from movie_dashboard.core.models import MonthlyRecord
from movie_dashboard.core.transformations import (
    calculate_percent_change,
    calculate_percentage_change,
    get_average_popularity_change,
    get_average_vote_change,
    get_top_growth_periods,
)


def _record(month: str, popularity: float, vote_average: float = 7.0) -> MonthlyRecord:
    return MonthlyRecord(
        month=month,
        year=int(month[:4]),
        movies_count=1,
        avg_popularity=popularity,
        avg_vote_average=vote_average,
        total_vote_count=100,
    )


@pytest.mark.parametrize(
    "previous,current,expected",
    [
        (0, 0, 0.0),
        (0, 50, 100.0),
        (80, 92, 15.0),
        (100, 85, -15.0),
        (60, 70, 16.67),
    ],
)
def test_calculate_percent_change(previous, current, expected):
    """Test percent change including the zero saturation policy."""
    assert calculate_percent_change(previous, current) == expected


def test_calculate_percentage_change_annotates_from_second_month():
    """Test the first month has no change and later months do."""
    monthly = [_record("2024-01", 80, 8.0), _record("2024-02", 92, 6.0), _record("2024-03", 46)]

    result = calculate_percentage_change(monthly)

    assert result[0].popularity_change_percent is None
    assert result[0].vote_change_percent is None
    assert result[1].popularity_change_percent == 15.0
    assert result[1].vote_change_percent == -25.0
    assert result[2].popularity_change_percent == -50.0


def test_calculate_percentage_change_does_not_mutate_input():
    """Test input records are left untouched."""
    monthly = [_record("2024-01", 80), _record("2024-02", 92)]
    snapshot = [record.model_copy() for record in monthly]

    calculate_percentage_change(monthly)

    assert monthly == snapshot
    assert monthly[1].popularity_change_percent is None


@pytest.mark.parametrize("length", [0, 1])
def test_calculate_percentage_change_short_series_unchanged(length):
    """Test series shorter than two months come back unchanged."""
    monthly = [_record("2024-01", 80)][:length]

    assert calculate_percentage_change(monthly) == monthly


def test_average_changes():
    """Test averages over the months that carry a change."""
    monthly = calculate_percentage_change(
        [_record("2024-01", 100, 8.0), _record("2024-02", 110, 8.0), _record("2024-03", 99, 6.0)]
    )

    assert get_average_popularity_change(monthly) == 0.0
    assert get_average_vote_change(monthly) == -12.5
    assert get_average_popularity_change([]) == 0.0


def test_get_top_growth_periods():
    """Test months ranked by growth."""
    monthly = calculate_percentage_change(
        [
            _record("2024-01", 100, 5.0),
            _record("2024-02", 150, 6.0),
            _record("2024-03", 120, 7.5),
            _record("2024-04", 240, 7.5),
        ]
    )

    popularity_growth = get_top_growth_periods(monthly, "popularity", top_n=2)
    vote_growth = get_top_growth_periods(monthly, "vote", top_n=1)

    assert [record.month for record in popularity_growth] == ["2024-04", "2024-02"]
    assert [record.month for record in vote_growth] == ["2024-03"]

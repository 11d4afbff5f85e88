"""Test numeric helpers."""

import pytest

from movie_dashboard.utils.number_utils import mean, pearson_correlation, round_half_up


@pytest.mark.parametrize(
    "value,expected",
    [
        (2.125, 2.13),
        (-2.125, -2.12),
        (16.666666, 16.67),
        (7.0, 7.0),
        (0.0, 0.0),
    ],
)
def test_round_half_up(value, expected):
    """Test half-up rounding to 2 decimals."""
    assert round_half_up(value) == expected


def test_round_half_up_with_decimals():
    """Test custom decimal places."""
    assert round_half_up(2.5, 0) == 3.0
    assert round_half_up(3.14159, 3) == 3.142


def test_mean():
    """Test arithmetic mean."""
    assert mean([1.0, 2.0, 3.0]) == 2.0
    assert mean([]) == 0.0


def test_pearson_correlation_perfect():
    """Test perfectly correlated series."""
    assert pearson_correlation([0.0, 1.0, 2.0], [1.0, 2.0, 3.0]) == pytest.approx(1.0)
    assert pearson_correlation([0.0, 1.0, 2.0], [3.0, 2.0, 1.0]) == pytest.approx(-1.0)


def test_pearson_correlation_degenerate():
    """Test zero variance and mismatched lengths."""
    assert pearson_correlation([0.0, 1.0, 2.0], [5.0, 5.0, 5.0]) == 0.0
    assert pearson_correlation([0.0, 1.0], [1.0]) == 0.0
    assert pearson_correlation([], []) == 0.0

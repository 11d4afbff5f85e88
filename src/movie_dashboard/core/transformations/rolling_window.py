"""Rolling-window smoothing and trend detection for monthly series."""

from typing import List, Optional, Sequence

from ...utils.number_utils import pearson_correlation, round_half_up
from ..models import MonthlyRecord, TrendAnalysis, TrendDirection

# Minimum absolute change (%) between first and last value to call a trend
TREND_THRESHOLD_PERCENT = 5.0


def calculate_rolling_average(
    monthly_data: Sequence[MonthlyRecord], window_size: int = 3
) -> List[MonthlyRecord]:
    """Simple moving average of popularity and vote average.

    Months before the first full window get no moving average. Series shorter
    than the window are returned unchanged.

    Args:
        monthly_data: Chronologically sorted monthly records.
        window_size: Number of months per window.

    Returns:
        New list of records with moving averages.
    """
    if window_size < 1 or len(monthly_data) < window_size:
        return list(monthly_data)

    result = list(monthly_data[: window_size - 1])
    for i in range(window_size - 1, len(monthly_data)):
        window = monthly_data[i - window_size + 1 : i + 1]
        popularity_sum = sum(record.avg_popularity for record in window)
        vote_sum = sum(record.avg_vote_average for record in window)

        result.append(
            monthly_data[i].model_copy(
                update={
                    "popularity_moving_avg": round_half_up(popularity_sum / window_size),
                    "vote_moving_avg": round_half_up(vote_sum / window_size),
                }
            )
        )

    return result


def calculate_exponential_moving_average(
    monthly_data: Sequence[MonthlyRecord], alpha: float = 0.3
) -> List[MonthlyRecord]:
    """Exponential moving average of popularity and vote average.

    The first month seeds the average with its own values. Each step is
    rounded to 2 decimals before feeding the next one.

    Args:
        monthly_data: Chronologically sorted monthly records.
        alpha: Smoothing factor in (0, 1].

    Returns:
        New list of records whose moving average fields hold the EMA.
    """
    if alpha <= 0 or alpha > 1 or not monthly_data:
        return list(monthly_data)

    first = monthly_data[0]
    result = [
        first.model_copy(
            update={
                "popularity_moving_avg": first.avg_popularity,
                "vote_moving_avg": first.avg_vote_average,
            }
        )
    ]

    for current in monthly_data[1:]:
        previous = result[-1]
        previous_popularity = (
            previous.popularity_moving_avg
            if previous.popularity_moving_avg is not None
            else previous.avg_popularity
        )
        previous_vote = (
            previous.vote_moving_avg
            if previous.vote_moving_avg is not None
            else previous.avg_vote_average
        )

        result.append(
            current.model_copy(
                update={
                    "popularity_moving_avg": round_half_up(
                        alpha * current.avg_popularity + (1 - alpha) * previous_popularity
                    ),
                    "vote_moving_avg": round_half_up(
                        alpha * current.avg_vote_average + (1 - alpha) * previous_vote
                    ),
                }
            )
        )

    return result


def identify_trends(monthly_data: Sequence[MonthlyRecord], min_periods: int = 3) -> TrendAnalysis:
    """Classify the direction and strength of the smoothed series.

    Args:
        monthly_data: Records carrying moving averages.
        min_periods: Minimum smoothed months required to report a trend.

    Returns:
        Trend directions for popularity and vote average plus a strength score.
    """
    valid = [
        record
        for record in monthly_data
        if record.popularity_moving_avg is not None and record.vote_moving_avg is not None
    ]

    if len(valid) < min_periods:
        return TrendAnalysis()

    popularity_values = [record.popularity_moving_avg for record in valid]
    vote_values = [record.vote_moving_avg for record in valid]

    return TrendAnalysis(
        popularity_trend=_trend_direction(popularity_values),
        vote_trend=_trend_direction(vote_values),
        trend_strength=_trend_strength(popularity_values),
    )


def _trend_direction(values: List[Optional[float]]) -> TrendDirection:
    if len(values) < 2:
        return TrendDirection.STABLE

    first = values[0] or 0.0
    last = values[-1] or 0.0

    if first == 0:
        if last == 0:
            return TrendDirection.STABLE
        return TrendDirection.ASCENDING if last > first else TrendDirection.DESCENDING

    if abs((last - first) / first * 100) < TREND_THRESHOLD_PERCENT:
        return TrendDirection.STABLE

    return TrendDirection.ASCENDING if last > first else TrendDirection.DESCENDING


def _trend_strength(values: List[Optional[float]]) -> float:
    """Absolute correlation between time index and value."""
    if len(values) < 3:
        return 0.0

    time_points = [float(i) for i in range(len(values))]
    series = [value or 0.0 for value in values]
    return round_half_up(abs(pearson_correlation(time_points, series)))

"""Period-over-period percent change of monthly figures."""

from typing import List, Optional, Sequence

from ...utils.number_utils import mean, round_half_up
from ..models import MonthlyRecord


def calculate_percentage_change(monthly_data: Sequence[MonthlyRecord]) -> List[MonthlyRecord]:
    """Annotate each month with its change against the previous month.

    The first month never gets a change value. The input is not modified.

    Args:
        monthly_data: Chronologically sorted monthly records.

    Returns:
        New list of records carrying popularity and vote change percentages.
    """
    if len(monthly_data) < 2:
        return list(monthly_data)

    result = [monthly_data[0]]
    for previous, current in zip(monthly_data, monthly_data[1:]):
        result.append(
            current.model_copy(
                update={
                    "popularity_change_percent": calculate_percent_change(
                        previous.avg_popularity, current.avg_popularity
                    ),
                    "vote_change_percent": calculate_percent_change(
                        previous.avg_vote_average, current.avg_vote_average
                    ),
                }
            )
        )

    return result


def calculate_percent_change(previous_value: float, current_value: float) -> float:
    """Percent change from one value to the next, rounded to 2 decimals.

    A zero previous value saturates to 0 (no change) or 100 instead of dividing
    by zero.

    Args:
        previous_value: Earlier value.
        current_value: Later value.

    Returns:
        Percent change.
    """
    if previous_value == 0:
        return 0.0 if current_value == 0 else 100.0

    return round_half_up((current_value - previous_value) / previous_value * 100)


def _average_change(values: List[float]) -> float:
    return round_half_up(mean(values))


def get_average_popularity_change(monthly_data: Sequence[MonthlyRecord]) -> float:
    """Mean popularity change over the months that have one."""
    return _average_change(
        [
            record.popularity_change_percent
            for record in monthly_data
            if record.popularity_change_percent is not None
        ]
    )


def get_average_vote_change(monthly_data: Sequence[MonthlyRecord]) -> float:
    """Mean vote average change over the months that have one."""
    return _average_change(
        [
            record.vote_change_percent
            for record in monthly_data
            if record.vote_change_percent is not None
        ]
    )


def get_top_growth_periods(
    monthly_data: Sequence[MonthlyRecord], metric: str = "popularity", top_n: int = 3
) -> List[MonthlyRecord]:
    """Months with the largest growth.

    Args:
        monthly_data: Change-annotated monthly records.
        metric: ``popularity`` or ``vote``.
        top_n: Number of months to return.

    Returns:
        Months sorted by the chosen change percentage, highest first.
    """

    def change_of(record: MonthlyRecord) -> Optional[float]:
        if metric == "popularity":
            return record.popularity_change_percent
        return record.vote_change_percent

    with_change = [record for record in monthly_data if change_of(record) is not None]
    with_change.sort(key=lambda record: change_of(record) or 0.0, reverse=True)
    return with_change[:top_n]

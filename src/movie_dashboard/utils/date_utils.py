"""Date parsing and date-range helpers."""

from datetime import date, datetime, timedelta
from typing import Optional, Tuple

MIN_RELEASE_DATE = date(1900, 1, 1)


def parse_release_date(value: Optional[str]) -> Optional[date]:
    """Parse a TMDb release date string.

    Accepts ``YYYY-MM-DD`` optionally followed by a ``T`` or space separated
    time part. Anything else yields None.

    Args:
        value: Raw release date string.

    Returns:
        Parsed date or None if the value is missing or malformed.
    """
    if not value or len(value) < 10:
        return None

    if len(value) > 10 and value[10] not in ("T", " "):
        return None

    try:
        return datetime.strptime(value[:10], "%Y-%m-%d").date()
    except ValueError:
        return None


def month_key(value: date) -> str:
    """Format a date as a zero-padded ``YYYY-MM`` key."""
    return f"{value.year:04d}-{value.month:02d}"


def subtract_months(value: date, months: int) -> date:
    """Move a date back by a number of calendar months.

    The day is clamped to the last day of the target month.
    """
    total = value.year * 12 + (value.month - 1) - months
    year, month = divmod(total, 12)
    month += 1

    # Last day of target month
    if month == 12:
        next_month = date(year + 1, 1, 1)
    else:
        next_month = date(year, month + 1, 1)
    last_day = (next_month - timedelta(days=1)).day

    return date(year, month, min(value.day, last_day))


def last_months_range(today: date, months: int) -> Tuple[str, str]:
    """Date range covering the last ``months`` months up to today.

    Args:
        today: Current date.
        months: Number of months to go back.

    Returns:
        Tuple of ISO start and end dates.
    """
    if months < 1:
        raise ValueError(f"Months must be positive, got {months}")
    return subtract_months(today, months).isoformat(), today.isoformat()


def last_year_range(today: date) -> Tuple[str, str]:
    """Date range covering the last 365 days up to today."""
    return (today - timedelta(days=365)).isoformat(), today.isoformat()


def validate_date_range(start_date: str, end_date: str, today: date) -> Optional[str]:
    """Validate a user supplied date range.

    Args:
        start_date: ISO start date.
        end_date: ISO end date.
        today: Current date; neither bound may lie after it.

    Returns:
        Error message, or None if the range is valid.
    """
    start = parse_release_date(start_date)
    end = parse_release_date(end_date)

    if start is None or end is None:
        return f"Invalid date range: {start_date!r} - {end_date!r} (expected YYYY-MM-DD)"

    if start > end:
        return f"Start date {start_date} is after end date {end_date}"

    if start < MIN_RELEASE_DATE:
        return f"Start date {start_date} is before {MIN_RELEASE_DATE.isoformat()}"

    if start > today or end > today:
        return "Date range cannot be in the future"

    return None

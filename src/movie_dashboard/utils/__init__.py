"""Utility functions and classes."""

from .date_utils import (
    last_months_range,
    last_year_range,
    month_key,
    parse_release_date,
    validate_date_range,
)
from .exceptions import (
    CatalogServiceError,
    ConfigurationError,
    MovieDashboardError,
    TransformationError,
)
from .number_utils import mean, pearson_correlation, round_half_up

__all__ = [
    "MovieDashboardError",
    "ConfigurationError",
    "CatalogServiceError",
    "TransformationError",
    "parse_release_date",
    "month_key",
    "last_months_range",
    "last_year_range",
    "validate_date_range",
    "round_half_up",
    "mean",
    "pearson_correlation",
]

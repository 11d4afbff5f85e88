"""Custom exceptions for the application."""


class MovieDashboardError(Exception):
    """Base exception for all application errors."""

    pass


class ConfigurationError(MovieDashboardError):
    """Configuration-related errors."""

    pass


class CatalogServiceError(MovieDashboardError):
    """Movie catalog (TMDb) errors."""

    pass


class TransformationError(MovieDashboardError):
    """Dashboard transformation pipeline errors."""

    pass

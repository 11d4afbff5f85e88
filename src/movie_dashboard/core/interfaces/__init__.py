"""Core interfaces for dependency injection."""

from .cache import ICache
from .clock import IClock
from .dashboard_service import IDashboardService
from .movie_catalog import IMovieCatalog
from .trace_logger import ITraceLogger

__all__ = [
    "IClock",
    "ICache",
    "ITraceLogger",
    "IMovieCatalog",
    "IDashboardService",
]

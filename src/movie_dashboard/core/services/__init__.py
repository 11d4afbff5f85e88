"""Core service implementations."""

from .dashboard_service import DashboardService
from .mock_catalog import MockCatalog
from .tmdb_service import TMDbService

__all__ = [
    "TMDbService",
    "MockCatalog",
    "DashboardService",
]

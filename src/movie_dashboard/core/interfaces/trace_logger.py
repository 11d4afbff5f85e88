"""HTTP trace logger interface."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..models import HttpTrace


class ITraceLogger(ABC):
    """Interface for recording outbound HTTP calls."""

    @abstractmethod
    async def log_http_trace(
        self,
        method: str,
        url: str,
        status: int,
        duration_ms: float,
        payload_size: int = 0,
        response_size: int = 0,
        params: Optional[Dict[str, Any]] = None,
        error: Optional[str] = None,
    ) -> HttpTrace:
        """Record one HTTP call.

        Failures to persist or forward the trace never propagate.

        Args:
            method: HTTP method.
            url: Request URL.
            status: Response status, 0 when no response was received.
            duration_ms: Call duration in milliseconds.
            payload_size: Request body size in bytes.
            response_size: Response body size in bytes.
            params: Query parameters, without credentials.
            error: Error message if the call failed.

        Returns:
            The recorded trace.
        """
        pass

    @abstractmethod
    async def get_recent_traces(self, limit: int = 100) -> List[HttpTrace]:
        """Get the most recent traces.

        Args:
            limit: Maximum number of traces.

        Returns:
            Traces, newest first.
        """
        pass

    @abstractmethod
    async def clean_old_logs(self, retention_days: Optional[int] = None) -> int:
        """Drop traces older than the retention period.

        Args:
            retention_days: Days to keep, configured value when None.

        Returns:
            Number of removed traces.
        """
        pass

"""HTTP trace data models."""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class WebhookEvent(str, Enum):
    """Webhook event type."""

    API_CALL = "api_call"
    ERROR = "error"
    SUCCESS = "success"


class HttpTrace(BaseModel):
    """Single outbound HTTP call record."""

    id: str = Field(..., description="Trace ID")
    timestamp: str = Field(..., description="ISO timestamp")
    method: str = Field(..., description="HTTP method")
    url: str = Field(..., description="Request URL without query string")
    base_url: str = Field(..., description="Scheme and host of the URL")
    status: int = Field(..., description="HTTP status, 0 if no response")
    duration: int = Field(..., description="Duration in milliseconds")
    payload_size: int = Field(default=0, description="Request body size in bytes")
    response_size: int = Field(default=0, description="Response body size in bytes")
    params: Optional[Dict[str, Any]] = Field(None, description="Query parameters")
    error: Optional[str] = Field(None, description="Error message if the call failed")

    @property
    def is_error(self) -> bool:
        """Whether the call failed."""
        return self.status >= 400 or self.status == 0 or self.error is not None


class WebhookPayload(BaseModel):
    """Body posted to the trace webhook."""

    event: WebhookEvent
    trace: HttpTrace
    metadata: Dict[str, Any] = Field(default_factory=dict)


class CacheStats(BaseModel):
    """In-memory cache statistics."""

    total_entries: int = 0
    valid_entries: int = 0
    expired_entries: int = 0
    memory_usage: int = Field(default=0, description="Approximate size in bytes")

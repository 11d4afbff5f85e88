"""Configuration data models."""

import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.models import RankingCriterion


class TMDbConfig(BaseModel):
    """TMDb API configuration."""

    api_key: str = Field(..., description="TMDb API key")
    base_url: str = Field(default="https://api.themoviedb.org/3", description="TMDb API base URL")
    image_base_url: str = Field(
        default="https://image.tmdb.org/t/p", description="TMDb image CDN base URL"
    )
    language: str = Field(default="en-US", description="Default language for requests")
    timeout: int = Field(default=30, gt=0, description="Request timeout in seconds")
    retries: int = Field(default=3, ge=1, description="Attempts per request, including the first")
    max_pages: int = Field(default=3, ge=1, description="Maximum discover pages to fetch")

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Expand environment variables in API key."""
        return os.path.expandvars(v)

    @field_validator("base_url", "image_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize base URLs."""
        return v.rstrip("/")

    @property
    def has_api_key(self) -> bool:
        """Whether an API key is actually set (not an unexpanded placeholder)."""
        return bool(self.api_key) and not self.api_key.startswith("${")


class CacheConfig(BaseModel):
    """In-memory cache configuration."""

    enabled: bool = Field(default=True, description="Enable response caching")
    genres_ttl_seconds: int = Field(default=600, gt=0, description="Genre list TTL")
    movies_ttl_seconds: int = Field(default=300, gt=0, description="Discover page TTL")
    details_ttl_seconds: int = Field(default=1800, gt=0, description="Movie details TTL")


class WebhookConfig(BaseModel):
    """Trace webhook configuration."""

    enabled: bool = Field(default=False, description="Send traces to the webhook")
    url: Optional[str] = Field(default=None, description="Webhook URL")
    timeout: int = Field(default=5, gt=0, description="Webhook timeout in seconds")

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: Optional[str]) -> Optional[str]:
        """Expand environment variables in webhook URL."""
        if v is None:
            return None
        return os.path.expandvars(v)


class TracesConfig(BaseModel):
    """HTTP trace log configuration."""

    enabled: bool = Field(default=True, description="Record outbound HTTP traces")
    directory: str = Field(default="server/logs", description="Trace log directory")
    file_name: str = Field(default="http_trace.jsonl", description="Trace log file name")
    retention_days: int = Field(default=7, gt=0, description="Days of traces to keep")
    webhook: WebhookConfig = Field(
        default_factory=WebhookConfig, description="Webhook configuration"
    )


class PipelineConfig(BaseModel):
    """Transformation pipeline configuration."""

    rolling_window: int = Field(default=3, ge=1, description="Moving average window size")
    top_n: int = Field(default=10, gt=0, description="Number of top movies")
    ranking_criterion: RankingCriterion = Field(
        default=RankingCriterion.POPULARITY, description="Top movies criterion"
    )
    default_min_vote_count: int = Field(
        default=100, ge=0, description="Default minimum vote count for discover queries"
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string",
    )
    file: Optional[str] = Field(default=None, description="Log file path")
    max_size_mb: int = Field(default=10, gt=0, description="Maximum log file size in MB")
    backup_count: int = Field(default=5, ge=0, description="Number of backup log files")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate logging level."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Logging level must be one of: {allowed}")
        return v.upper()


class AppConfig(BaseModel):
    """Application behavior configuration."""

    use_mock_data: bool = Field(default=False, description="Use bundled offline catalog")
    environment: str = Field(default="development", description="Deployment environment")
    service_name: str = Field(default="movie-dashboard", description="Service name in traces")


class Config(BaseModel):
    """Main configuration model."""

    tmdb: TMDbConfig = Field(..., description="TMDb configuration")
    cache: CacheConfig = Field(default_factory=CacheConfig, description="Cache configuration")
    traces: TracesConfig = Field(
        default_factory=TracesConfig, description="HTTP trace configuration"
    )
    pipeline: PipelineConfig = Field(
        default_factory=PipelineConfig, description="Pipeline configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    app: AppConfig = Field(default_factory=AppConfig, description="Application configuration")

    model_config = ConfigDict(
        validate_assignment=True,
        populate_by_name=True,
    )

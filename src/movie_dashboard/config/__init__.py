"""Configuration management module."""

from .config_manager import ConfigManager
from .models import (
    AppConfig,
    CacheConfig,
    Config,
    LoggingConfig,
    PipelineConfig,
    TMDbConfig,
    TracesConfig,
    WebhookConfig,
)

__all__ = [
    "ConfigManager",
    "Config",
    "AppConfig",
    "CacheConfig",
    "LoggingConfig",
    "PipelineConfig",
    "TMDbConfig",
    "TracesConfig",
    "WebhookConfig",
]

"""Infrastructure module for cross-cutting concerns."""

from .cache import MemoryCache, cache_with_loader, generate_cache_key
from .clock import FixedClock, SystemClock
from .container import Container
from .logging import LoggerMixin, setup_logging
from .trace_logger import TraceLogger, measure_time

__all__ = [
    "Container",
    "setup_logging",
    "LoggerMixin",
    "SystemClock",
    "FixedClock",
    "MemoryCache",
    "generate_cache_key",
    "cache_with_loader",
    "TraceLogger",
    "measure_time",
]

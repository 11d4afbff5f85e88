"""Dependency injection container."""

import logging
from functools import lru_cache
from typing import Any, Dict, Optional, Type, TypeVar

from ..config import Config, ConfigManager
from ..core.interfaces import ICache, IClock, IDashboardService, IMovieCatalog, ITraceLogger

T = TypeVar("T")


class Container:
    """Dependency injection container using registry pattern."""

    def __init__(self, config_manager: Optional[ConfigManager] = None) -> None:
        """Initialize container.

        Args:
            config_manager: Configuration manager instance. If None, creates default.
        """
        self._services: Dict[Type, Any] = {}
        self._singletons: Dict[Type, Any] = {}
        self._config_manager = config_manager or ConfigManager()
        self._logger = logging.getLogger(__name__)

    def register_singleton(self, interface: Type[T], implementation: Type[Any]) -> None:
        """Register a singleton service.

        Args:
            interface: Interface type.
            implementation: Implementation type.
        """
        self._services[interface] = implementation
        self._logger.debug(
            f"Registered singleton: {interface.__name__} -> {implementation.__name__}"
        )

    def register_instance(self, interface: Type[T], instance: T) -> None:
        """Register a specific instance.

        Args:
            interface: Interface type.
            instance: Pre-created instance.
        """
        self._singletons[interface] = instance
        self._logger.debug(f"Registered instance: {interface.__name__}")

    def get(self, interface: Type[T]) -> T:
        """Get service instance.

        Args:
            interface: Interface type to resolve.

        Returns:
            Service instance.

        Raises:
            ValueError: If service is not registered.
        """
        # Check for pre-registered instances
        if interface in self._singletons:
            return self._singletons[interface]  # type: ignore

        # Check for singleton services
        if interface in self._services:
            if interface not in self._singletons:
                implementation = self._services[interface]
                instance = self._create_instance(implementation)
                self._singletons[interface] = instance
            return self._singletons[interface]  # type: ignore

        raise ValueError(f"Service not registered: {interface.__name__}")

    def _create_instance(self, implementation: Type[T]) -> T:
        """Create instance with dependency injection.

        Args:
            implementation: Implementation class to instantiate.

        Returns:
            Created instance with dependencies injected.
        """
        # Get constructor signature and resolve dependencies
        import inspect

        sig = inspect.signature(implementation.__init__)
        kwargs = {}

        for param_name, param in sig.parameters.items():
            if param_name == "self":
                continue

            if param.annotation == Config:
                kwargs[param_name] = self._config_manager.get_config()
            elif hasattr(param.annotation, "__origin__"):
                # Skip generic types for now
                continue
            elif param.annotation in self._services or param.annotation in self._singletons:
                kwargs[param_name] = self.get(param.annotation)
            elif param.default is not inspect.Parameter.empty:
                # Has default value, skip
                continue
            else:
                self._logger.warning(
                    f"Cannot resolve dependency: {param_name} of type {param.annotation}"
                )

        return implementation(**kwargs)

    @lru_cache(maxsize=1)
    def get_config(self) -> Config:
        """Get configuration instance.

        Returns:
            Configuration instance.
        """
        return self._config_manager.get_config()

    def configure_default_services(self) -> None:
        """Configure default service registrations."""
        from ..core.services import DashboardService, MockCatalog, TMDbService
        from .cache import MemoryCache
        from .clock import SystemClock
        from .trace_logger import TraceLogger

        config = self.get_config()

        # Shared infrastructure
        self.register_singleton(IClock, SystemClock)  # type: ignore
        self.register_singleton(ICache, MemoryCache)  # type: ignore
        self.register_singleton(ITraceLogger, TraceLogger)  # type: ignore

        # Catalog source based on configuration
        if config.app.use_mock_data:
            self.register_singleton(IMovieCatalog, MockCatalog)  # type: ignore
        else:
            self.register_singleton(IMovieCatalog, TMDbService)  # type: ignore

        self.register_singleton(IDashboardService, DashboardService)  # type: ignore

        self._logger.info("Default services configured")

    async def close(self) -> None:
        """Release resources held by created services."""
        catalog = self._singletons.get(IMovieCatalog)
        if catalog is not None:
            await catalog.close()

    def reset(self) -> None:
        """Reset container state."""
        self._services.clear()
        self._singletons.clear()
        # Clear config cache
        self.get_config.cache_clear()
        self._logger.debug("Container reset")


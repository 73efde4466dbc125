"""Dependency injection container.

This module provides a simple DI container without external frameworks.
It allows registering and resolving dependencies for the application.

Design principles:
1. No magic - explicit registration and resolution
2. Testable - easy to swap implementations
3. Lazy loading - adapters instantiated on first use
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Optional, TextIO

from .config import AppConfig, get_config


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default(path=Path("roads.txt"))
        planner = container.resolve(RoutePlannerService)

        # Testing
        container = Container()
        container.register(RouteRendererPort, lambda: FakeRenderer())
        renderer = container.resolve(RouteRendererPort)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)
            self._singletons.pop(port_type, None)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    def clear_singletons(self) -> None:
        """Clear all cached singletons.

        Call this in tests to ensure fresh instances.
        """
        with self._lock:
            self._singletons.clear()

    @classmethod
    def create_default(
        cls,
        config: Optional[AppConfig] = None,
        *,
        path: Optional[Path] = None,
        stream: Optional[TextIO] = None,
    ) -> Container:
        """Create a container with default production bindings.

        Args:
            config: Optional configuration override.
            path: Road-map input file; overrides ``config.input.path``.
            stream: Open road-map input; takes precedence over any path.

        Returns:
            A configured Container instance.
        """
        from .adapters.graph import DijkstraRouteSolver, TextRoadMapRepository
        from .adapters.rendering import TextRouteRenderer
        from .ports.graph import RoadMapRepositoryPort, RouteSolverPort
        from .ports.rendering import RouteRendererPort
        from .services import RoutePlannerService

        config = config or get_config()
        container = cls(config=config)

        # Graph
        container.register(
            RoadMapRepositoryPort,
            lambda: TextRoadMapRepository(config.input, path=path, stream=stream),
        )
        container.register(
            RouteSolverPort,
            lambda: DijkstraRouteSolver(),
        )

        # Rendering
        container.register(
            RouteRendererPort,
            lambda: TextRouteRenderer(config.output),
        )

        # Main service
        def create_route_planner() -> RoutePlannerService:
            return RoutePlannerService(
                repository=container.resolve(RoadMapRepositoryPort),
                route_solver=container.resolve(RouteSolverPort),
                renderer=container.resolve(RouteRendererPort),
                require_strongly_connected=config.routing.require_strongly_connected,
            )

        container.register(RoutePlannerService, create_route_planner)

        return container

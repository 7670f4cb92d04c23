"""Dependency injection container.

Ports are bound to factories; ``resolve`` builds an instance on first
use and, for singleton bindings, hands the same instance back on every
later call. Production bindings come from ``Container.create_default``;
tests either start from an empty container or rebind single ports.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Set, Type, TypeVar, cast

from .config import AppConfig, get_config

T = TypeVar("T")


@dataclass
class Container:
    """Registry of port factories.

    Example:
        container = Container.create_default(dataset_path=Path("seoul.json"))
        planner = container.resolve(RoutePlannerService)

        container.register(NetworkRepositoryPort, lambda: FakeRepository())

    Attributes:
        config: Configuration the default bindings are built from
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[Type[Any], Callable[[], Any]] = field(default_factory=dict, repr=False)
    _instances: Dict[Type[Any], Any] = field(default_factory=dict, repr=False)
    _shared: Set[Type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: Type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Bind ``port_type`` to ``factory``, replacing any earlier binding.

        Args:
            port_type: Usually a Protocol from ``subway_router.ports``.
            factory: Zero-argument callable building the implementation.
            singleton: Build once and share, or build on every resolve.
        """
        with self._lock:
            self._factories[port_type] = factory
            self._instances.pop(port_type, None)
            if singleton:
                self._shared.add(port_type)
            else:
                self._shared.discard(port_type)

    def resolve(self, port_type: Type[T]) -> T:
        """Return an implementation of ``port_type``.

        Raises:
            KeyError: If nothing is bound to ``port_type``.
        """
        with self._lock:
            factory = self._factories.get(port_type)
            if factory is None:
                raise KeyError(f"Type not registered: {port_type}")
            if port_type not in self._shared:
                return cast(T, factory())
            if port_type not in self._instances:
                self._instances[port_type] = factory()
            return cast(T, self._instances[port_type])

    @classmethod
    def create_default(
        cls,
        config: Optional[AppConfig] = None,
        dataset_path: Optional[Path] = None,
    ) -> Container:
        """Wire the JSON dataset, geopy distances, the rapidfuzz resolver,
        the Dijkstra solver and the folium renderer into a planner.

        Args:
            config: Configuration to build adapters from; the cached
                application config when omitted.
            dataset_path: Station dataset overriding ``config.dataset``.
        """
        from .adapters.cache import InMemoryCache
        from .adapters.dataset import GreatCircleDistance, JSONStationRepository
        from .adapters.graph import DijkstraRouteSolver
        from .adapters.rendering import FoliumMapRenderer
        from .adapters.resolve import StationResolver
        from .ports.cache import CachePort
        from .ports.graph import (
            GeoDistancePort,
            NetworkRepositoryPort,
            RouteSolverPort,
            StationResolverPort,
        )
        from .ports.rendering import MapRendererPort
        from .services import RoutePlannerService

        config = config or get_config()
        container = cls(config=config)

        # station pair -> km
        container.register(CachePort, lambda: InMemoryCache[float](name="great_circle"))
        container.register(
            GeoDistancePort,
            lambda: GreatCircleDistance(config.dataset, container.resolve(CachePort)),
        )
        container.register(
            NetworkRepositoryPort,
            lambda: JSONStationRepository(
                config.dataset,
                path=dataset_path,
                geo=container.resolve(GeoDistancePort),
            ),
        )
        container.register(StationResolverPort, lambda: StationResolver(config.resolver))
        container.register(RouteSolverPort, DijkstraRouteSolver)
        container.register(MapRendererPort, lambda: FoliumMapRenderer(config.rendering))

        container.register(
            RoutePlannerService,
            lambda: RoutePlannerService(
                repository=container.resolve(NetworkRepositoryPort),
                resolver=container.resolve(StationResolverPort),
                solver=container.resolve(RouteSolverPort),
                map_renderer=container.resolve(MapRendererPort),
            ),
        )
        return container

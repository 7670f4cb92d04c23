"""Route planner service - Main orchestrator.

Loads the network, resolves the two user queries to stations, computes
the shortest route and optionally renders it on a map.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..domain.errors import SubwayRouterError
from ..domain.models import RouteResult
from ..ports.graph import NetworkRepositoryPort, RouteSolverPort, StationResolverPort
from ..ports.rendering import MapRendererPort


@dataclass
class RoutePlannerService:
    """Main service for planning a route between two stations.

    Attributes:
        repository: Loads the transit network
        resolver: Turns user queries into graph nodes
        solver: Computes shortest routes
        map_renderer: Optional map rendering
    """

    repository: NetworkRepositoryPort
    resolver: StationResolverPort
    solver: RouteSolverPort
    map_renderer: Optional[MapRendererPort] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def plan(
        self,
        departure: str,
        arrival: str,
        map_output_path: Optional[Path] = None,
    ) -> RouteResult:
        """Plan the shortest route between two stations.

        Args:
            departure: Departure station id or name.
            arrival: Arrival station id or name.
            map_output_path: If given, render the route to this HTML file.

        Returns:
            RouteResult with the computed route.

        Raises:
            DatasetError: If the network cannot be loaded.
            StationNotFoundError: If a query matches no station.
            NoRouteFoundError: If no path exists between the stations.
            RenderingError: If map generation fails.
        """
        network = self.repository.load()

        origin = self.resolver.resolve(network, departure)
        destination = self.resolver.resolve(network, arrival)
        self._logger.info(
            "Stations resolved",
            extra={
                "departure": network.station_at(origin).code,
                "arrival": network.station_at(destination).code,
            },
        )

        route = self.solver.solve(network, origin, destination)

        if map_output_path is not None:
            if self.map_renderer is None:
                self._logger.warning("No map renderer configured, skipping map")
            else:
                self.map_renderer.render(route.stations, map_output_path)

        return route

    def plan_safe(
        self,
        departure: str,
        arrival: str,
    ) -> tuple[Optional[RouteResult], Optional[str]]:
        """Plan a route, returning an error message instead of raising.

        Returns:
            Tuple of (RouteResult or None, error message or None).
        """
        try:
            return self.plan(departure, arrival), None
        except SubwayRouterError as e:
            return None, str(e)

    def format_result(self, route: RouteResult, map_path: Optional[Path] = None) -> str:
        """Format a route as human-readable text, one leg per line."""
        if route.is_empty:
            return "No route found."

        lines = []
        if not route.legs:
            lines.append(f"Already at {route.stations[0].name}.")
        for leg in route.legs:
            lines.append(
                f"{leg.origin.name} -> {leg.destination.name} "
                f"({leg.distance_km:.2f} km)"
            )
        lines.append(
            f"Total distance: {route.total_distance_km:.2f} km "
            f"over {route.num_stops} stops"
        )
        if map_path:
            lines.append(f"Map saved to: {map_path}")
        return "\n".join(lines)

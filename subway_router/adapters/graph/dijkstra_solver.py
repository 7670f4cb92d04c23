"""Dijkstra Route Solver adapter.

This adapter wraps graph/dijkstra.py and adds:
- Domain model output (RouteResult with one RouteLeg per edge)
- NoRouteFoundError for unreachable arrivals
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ...domain.errors import NoRouteFoundError
from ...domain.models import RouteLeg, RouteResult
from ...graph import Edge, FloatDistance, path_distance, shortest_path
from ...network import TransitNetwork


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(
        self,
        network: TransitNetwork,
        departure: int,
        arrival: int,
    ) -> RouteResult:
        """Find the shortest route between two stations.

        Args:
            network: The transit network.
            departure: Node slot of the departure station.
            arrival: Node slot of the arrival station.

        Returns:
            RouteResult with legs, stops and total distance.

        Raises:
            NoRouteFoundError: If the arrival cannot be reached.
        """
        self._logger.debug(
            "Solving route",
            extra={"departure": departure, "arrival": arrival},
        )

        route = self._solve(network, departure, arrival)
        if route is None:
            origin = network.station_at(departure)
            destination = network.station_at(arrival)
            self._logger.warning(
                "No route found",
                extra={"departure": origin.code, "arrival": destination.code},
            )
            raise NoRouteFoundError(
                f"No path from {origin.name} to {destination.name}",
                departure=origin.code,
                arrival=destination.code,
            )

        self._logger.info(
            "Route found",
            extra={
                "departure": route.path[0],
                "arrival": route.path[-1],
                "stops": route.num_stops,
                "distance_km": round(route.total_distance_km, 3),
            },
        )
        return route

    def solve_safe(
        self,
        network: TransitNetwork,
        departure: int,
        arrival: int,
    ) -> RouteResult:
        """Like solve(), but returns RouteResult.empty() when unreachable."""
        route = self._solve(network, departure, arrival)
        return route if route is not None else RouteResult.empty()

    def _solve(
        self, network: TransitNetwork, departure: int, arrival: int
    ) -> Optional[RouteResult]:
        graph = network.graph
        edges = shortest_path(graph, departure, arrival)
        if edges is None:
            return None

        legs = tuple(self._leg(network, edge) for edge in edges)
        total: FloatDistance = path_distance(graph, edges)
        return RouteResult(
            departure=network.station_at(departure),
            legs=legs,
            total_distance_km=float(total),
        )

    @staticmethod
    def _leg(network: TransitNetwork, edge: Edge[FloatDistance]) -> RouteLeg:
        return RouteLeg(
            origin=network.station_at(edge.source),
            destination=network.station_at(edge.target),
            distance_km=float(edge.distance),
        )


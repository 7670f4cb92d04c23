"""Graph ports - Abstractions for network loading, lookup and routing.

These protocols define the contracts for building the transit network,
resolving user-supplied station identifiers, and computing shortest
routes through it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import GeoLocation, RouteResult, Station
    from ..network import TransitNetwork


class NetworkRepositoryPort(Protocol):
    """Port for loading the transit network.

    Implementation: adapters/dataset/json_repository.py

    The repository is responsible for parsing the station dataset,
    assembling the adjacency matrix and caching the built network.
    """

    def load(self) -> TransitNetwork:
        """Load the transit network.

        Returns:
            The station graph with its lookup tables.
        """
        ...

    def get_station(self, station_id: str) -> Optional[Station]:
        """Get station details by id.

        Args:
            station_id: Any dataset id of the station, transfer ids included.

        Returns:
            The station, or None if not found.
        """
        ...

    def list_stations(self) -> Sequence[Station]:
        """List all stations of the network, one entry per node."""
        ...


class GeoDistancePort(Protocol):
    """Port for the distance between two coordinates.

    Implementation: adapters/dataset/great_circle.py
    """

    def distance_km(self, a: GeoLocation, b: GeoLocation) -> float:
        """Return the distance between ``a`` and ``b`` in kilometers."""
        ...


class StationResolverPort(Protocol):
    """Port for turning user input into a graph node.

    Implementation: adapters/resolve/station_resolver.py
    """

    def resolve(self, network: TransitNetwork, query: str) -> int:
        """Resolve a station id or name to a node slot.

        Args:
            network: The network to search.
            query: Station id, exact name or approximate name.

        Returns:
            The node slot of the matching station.
        """
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Wraps: graph/dijkstra.py (shortest_path)
    Implementation: adapters/graph/dijkstra_solver.py
    """

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
            RouteResult with legs and total distance.
        """
        ...

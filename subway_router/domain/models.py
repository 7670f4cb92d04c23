"""Immutable domain models for the Subway Router.

All models are frozen dataclasses with slots for memory efficiency.
These models have no external dependencies and represent the core
business concepts of the application.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True, slots=True)
class GeoLocation:
    """GPS coordinates representing a geographic location."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(
                f"Latitude must be between -90 and 90, got {self.latitude}"
            )
        if not -180 <= self.longitude <= 180:
            raise ValueError(
                f"Longitude must be between -180 and 180, got {self.longitude}"
            )

    def as_point(self) -> tuple[float, float]:
        """Return the coordinates as a ``(latitude, longitude)`` pair."""
        return (self.latitude, self.longitude)


@dataclass(frozen=True, slots=True)
class Station:
    """A physical subway station, possibly served by several lines.

    Transfer stations appear once per line in the raw dataset, each
    with its own identifier; they are merged into a single Station
    whose ``ids`` holds every identifier of the group.

    Attributes:
        ids: All dataset identifiers of this station, primary first
        name: Human-readable station name
        location: GPS coordinates of the station
        lines: Names of the lines serving the station
    """

    ids: tuple[str, ...]
    name: str
    location: GeoLocation
    lines: tuple[str, ...] = field(default_factory=tuple)

    @property
    def code(self) -> str:
        """Return the primary identifier."""
        return self.ids[0]

    @property
    def is_transfer(self) -> bool:
        """Check if more than one line serves the station."""
        return len(self.lines) > 1


@dataclass(frozen=True, slots=True)
class Line:
    """A subway line and its stations in dataset order.

    Attributes:
        name: Line name as it appears in the dataset
        station_ids: Primary ids of the stations on the line
    """

    name: str
    station_ids: tuple[str, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.station_ids)


@dataclass(frozen=True, slots=True)
class RouteLeg:
    """A single hop of a route between two stations.

    Attributes:
        origin: Station the leg starts from
        destination: Station the leg arrives at
        distance_km: Great-circle length of the leg in kilometers
    """

    origin: Station
    destination: Station
    distance_km: float


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of route computation between stations.

    A route from a station to itself has a departure and no legs. An
    empty result (no departure) means no route was found.

    Attributes:
        departure: Station the route starts from, None if no route
        legs: Ordered legs forming the route
        total_distance_km: Total distance of the route in kilometers
    """

    departure: Optional[Station]
    legs: tuple[RouteLeg, ...] = field(default_factory=tuple)
    total_distance_km: float = 0.0

    @classmethod
    def empty(cls) -> RouteResult:
        """Return the result used when no route exists."""
        return cls(departure=None, total_distance_km=float("inf"))

    @property
    def stations(self) -> tuple[Station, ...]:
        """Return every stop of the route, departure and arrival included."""
        if self.departure is None:
            return ()
        return (self.departure,) + tuple(leg.destination for leg in self.legs)

    @property
    def path(self) -> tuple[str, ...]:
        """Return the primary station ids along the route."""
        return tuple(station.code for station in self.stations)

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return self.departure is None

    @property
    def num_stops(self) -> int:
        """Return the number of stops in the route."""
        return len(self.stations)

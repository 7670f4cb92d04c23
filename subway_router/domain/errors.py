"""Typed domain errors for the Subway Router.

Graph construction errors are raised once, at build time, and are never
coerced into a different graph. Query-time unreachability is not an
error at the graph level; only the routing service turns it into
NoRouteFoundError.

All errors inherit from SubwayRouterError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class SubwayRouterError(Exception):
    """Base error for the subway router domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphBuildError(SubwayRouterError):
    """A graph could not be built from the given values and matrix."""


@dataclass
class ShapeError(GraphBuildError):
    """The adjacency matrix is not N x N for N node values.

    Attributes:
        expected: Number of node values (N)
        actual_rows: Number of rows found in the matrix
    """

    expected: int = 0
    actual_rows: int = 0


@dataclass
class SelfLoopError(GraphBuildError):
    """A diagonal entry of the adjacency matrix is present.

    Attributes:
        index: Node index whose diagonal cell is set
    """

    index: int = -1


@dataclass
class InvalidDistanceError(GraphBuildError, ValueError):
    """A distance value is NaN or otherwise breaks total ordering.

    Attributes:
        value: The rejected raw value
    """

    value: Any = None


@dataclass
class DatasetError(SubwayRouterError):
    """Station dataset loading or data integrity error.

    Attributes:
        file_path: Path to the dataset file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class StationNotFoundError(SubwayRouterError):
    """A user-supplied identifier does not match any station.

    Attributes:
        query: The identifier or name that was looked up
    """

    query: str = ""


@dataclass
class NoRouteFoundError(SubwayRouterError):
    """No path exists between the requested stations.

    Attributes:
        departure: Departure station id
        arrival: Arrival station id
    """

    departure: str = ""
    arrival: str = ""


@dataclass
class ConfigurationError(SubwayRouterError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None


@dataclass
class RenderingError(SubwayRouterError):
    """Map rendering failed.

    Attributes:
        output_path: Path where rendering was attempted
        renderer_type: Type of renderer that failed
    """

    output_path: Optional[str] = None
    renderer_type: str = ""

"""Domain layer - Core business models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    DatasetError,
    GraphBuildError,
    InvalidDistanceError,
    NoRouteFoundError,
    RenderingError,
    SelfLoopError,
    ShapeError,
    StationNotFoundError,
    SubwayRouterError,
)
from .models import GeoLocation, Line, RouteLeg, RouteResult, Station

__all__ = [
    # Models
    "GeoLocation",
    "Station",
    "Line",
    "RouteLeg",
    "RouteResult",
    # Errors
    "SubwayRouterError",
    "GraphBuildError",
    "ShapeError",
    "SelfLoopError",
    "InvalidDistanceError",
    "DatasetError",
    "StationNotFoundError",
    "NoRouteFoundError",
    "ConfigurationError",
    "RenderingError",
]

"""Services layer - Application orchestration.

Available services:
- RoutePlannerService: Plans the shortest route between two stations
"""

from .route_planner import RoutePlannerService

__all__ = ["RoutePlannerService"]

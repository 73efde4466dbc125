"""Services layer - Application orchestration.

Available services:
- RoutePlannerService: Loads a road map, solves its trips, renders routes
"""

from .route_planner import RoutePlannerService

__all__ = ["RoutePlannerService"]

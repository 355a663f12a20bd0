"""Services layer - Application orchestration.

Available services:
- RoutePlannerService: flight listing, route search and comparison
"""

from .route_planner import RoutePlannerService

__all__ = ["RoutePlannerService"]

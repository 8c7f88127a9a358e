"""Services layer - Application orchestration.

Available services:
- RouteQueryService: Resolves two station names and computes the route
"""

from .route_service import RouteQueryService, normalize_station_name

__all__ = ["RouteQueryService", "normalize_station_name"]

"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    CityNotFoundError,
    ConfigurationError,
    DatasetError,
    FlightFinderError,
    NoRouteFoundError,
    RenderingError,
)
from .models import (
    City,
    Connection,
    CostKey,
    Flight,
    GeoLocation,
    RankKey,
    RouteAlternative,
    RouteComparison,
    SortKey,
)

__all__ = [
    # Models
    "City",
    "Connection",
    "CostKey",
    "Flight",
    "GeoLocation",
    "RankKey",
    "RouteAlternative",
    "RouteComparison",
    "SortKey",
    # Errors
    "FlightFinderError",
    "DatasetError",
    "NoRouteFoundError",
    "CityNotFoundError",
    "ConfigurationError",
    "RenderingError",
]

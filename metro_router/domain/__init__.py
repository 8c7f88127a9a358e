"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    EmptyStationNameError,
    GraphLoadError,
    InvalidWeightError,
    MalformedEdgeError,
    MetroRouterError,
    SourceNotFoundError,
    StationLookupError,
    StationNotFoundError,
    UnknownStationError,
)
from .models import NO_EDGE, AdjacencyMatrix, Edge, RouteResult, Station

__all__ = [
    # Models
    "NO_EDGE",
    "AdjacencyMatrix",
    "Edge",
    "RouteResult",
    "Station",
    # Errors
    "MetroRouterError",
    "GraphLoadError",
    "SourceNotFoundError",
    "UnknownStationError",
    "InvalidWeightError",
    "MalformedEdgeError",
    "StationLookupError",
    "EmptyStationNameError",
    "StationNotFoundError",
    "ConfigurationError",
]

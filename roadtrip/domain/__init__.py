"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    DigraphError,
    DisconnectedMapError,
    InputFormatError,
    NoRouteFoundError,
    RoadMapLoadError,
    RoadTripError,
    VertexNotFoundError,
)
from .models import (
    RoadSegment,
    RouteLeg,
    RouteResult,
    Trip,
    TripMetric,
    distance_weight,
    time_weight,
)

__all__ = [
    # Models
    "RoadSegment",
    "Trip",
    "TripMetric",
    "RouteLeg",
    "RouteResult",
    "distance_weight",
    "time_weight",
    # Errors
    "RoadTripError",
    "DigraphError",
    "InputFormatError",
    "RoadMapLoadError",
    "VertexNotFoundError",
    "NoRouteFoundError",
    "DisconnectedMapError",
    "ConfigurationError",
]

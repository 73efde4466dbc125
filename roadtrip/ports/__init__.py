"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and its
adapters. They enable dependency injection and make the system testable.
"""

from .graph import RoadMap, RoadMapRepositoryPort, RouteSolverPort
from .rendering import RouteRendererPort

__all__ = [
    # Graph
    "RoadMap",
    "RoadMapRepositoryPort",
    "RouteSolverPort",
    # Rendering
    "RouteRendererPort",
]

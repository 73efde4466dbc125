"""Graph ports - Abstractions for road-map loading and routing.

These protocols define the contracts for graph operations, including
loading road networks and trip requests and computing routes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

from ..domain.models import RoadSegment
from ..graph.digraph import Digraph

if TYPE_CHECKING:
    from ..domain.models import RouteResult, Trip

# Maps vertex id -> location name, edge (from, to) -> RoadSegment
RoadMap = Digraph[str, RoadSegment]


class RoadMapRepositoryPort(Protocol):
    """Port for loading road-map and trip data.

    Implementation: adapters/graph/text_repository.py
    """

    def load_road_map(self) -> RoadMap:
        """Load the road map.

        Returns:
            The road network as a directed graph.
        """
        ...

    def load_trips(self) -> Sequence[Trip]:
        """Load the trip requests that accompany the road map.

        Returns:
            Trips in input order.
        """
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/dijkstra_solver.py
    """

    def solve(self, road_map: RoadMap, trip: Trip) -> RouteResult:
        """Find the best route for a trip.

        Args:
            road_map: The road network.
            trip: Start, destination and metric to minimize.

        Returns:
            RouteResult with the ordered legs of the route.
        """
        ...

"""Dijkstra Route Solver adapter.

This adapter runs the graph core's shortest-path search for a trip and
adds:
- Trip endpoint validation
- Metric-driven weight selection
- Route reconstruction into RouteResult
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from ...domain.errors import NoRouteFoundError, VertexNotFoundError
from ...domain.models import RouteLeg, RouteResult, Trip
from ...graph.dijkstra import path_to
from ...ports.graph import RoadMap


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, road_map: RoadMap, trip: Trip) -> RouteResult:
        """Find the best route for a trip.

        Args:
            road_map: The road network.
            trip: Start, destination and metric to minimize.

        Returns:
            RouteResult with the ordered legs of the route.

        Raises:
            VertexNotFoundError: If the start or end is not on the map.
            NoRouteFoundError: If the end cannot be reached from the start.
        """
        self._logger.debug(
            "Solving route",
            extra={
                "start": trip.start_vertex,
                "end": trip.end_vertex,
                "metric": trip.metric.name,
            },
        )

        # Validate inputs
        for vertex in (trip.start_vertex, trip.end_vertex):
            if vertex not in road_map:
                raise VertexNotFoundError(
                    f"Vertex not on the road map: {vertex}",
                    vertex=vertex,
                )

        predecessors = road_map.find_shortest_paths(
            trip.start_vertex, trip.metric.weight_function
        )
        path = path_to(predecessors, trip.start_vertex, trip.end_vertex)

        if not path:
            self._logger.warning(
                "No route found",
                extra={"start": trip.start_vertex, "end": trip.end_vertex},
            )
            raise NoRouteFoundError(
                f"No route from {trip.start_vertex} to {trip.end_vertex}",
                start_vertex=trip.start_vertex,
                end_vertex=trip.end_vertex,
            )

        legs: List[RouteLeg] = [
            RouteLeg(
                from_vertex=u,
                to_vertex=w,
                location=road_map.vertex_info(w),
                segment=road_map.edge_info(u, w),
            )
            for u, w in zip(path, path[1:])
        ]

        route = RouteResult(
            trip=trip,
            origin=road_map.vertex_info(trip.start_vertex),
            destination=road_map.vertex_info(trip.end_vertex),
            legs=tuple(legs),
        )

        self._logger.info(
            "Route found",
            extra={
                "start": trip.start_vertex,
                "end": trip.end_vertex,
                "stops": route.num_stops,
                "miles": route.total_miles,
            },
        )
        return route

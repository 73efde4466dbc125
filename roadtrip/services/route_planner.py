"""Route planner service - Main orchestrator.

Loads the road map and trip requests, checks that the map is usable,
solves every trip and renders the results.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from ..domain.errors import DisconnectedMapError
from ..domain.models import RouteResult
from ..ports.graph import RoadMapRepositoryPort, RouteSolverPort
from ..ports.rendering import RouteRendererPort


@dataclass
class RoutePlannerService:
    """Main service for planning trips on a road map.

    This service orchestrates the full pipeline:
    1. Road map and trip loading
    2. Connectivity check
    3. Route computation per trip
    4. Report rendering

    Attributes:
        repository: Loads the road map and trips
        route_solver: Computes the best route for a trip
        renderer: Turns routes into text
        require_strongly_connected: Refuse maps where some location
            cannot reach another
    """

    repository: RoadMapRepositoryPort
    route_solver: RouteSolverPort
    renderer: RouteRendererPort
    require_strongly_connected: bool = True

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def check_connectivity(self) -> bool:
        """Check whether every location can reach every other location.

        Returns:
            True if the road map is strongly connected.

        Raises:
            DisconnectedMapError: If it is not and the service requires it.
        """
        road_map = self.repository.load_road_map()
        connected = road_map.is_strongly_connected()
        self._logger.info(
            "Connectivity checked",
            extra={"vertices": road_map.vertex_count(), "connected": connected},
        )

        if not connected and self.require_strongly_connected:
            raise DisconnectedMapError(
                "Disconnected Map", vertex_count=road_map.vertex_count()
            )
        return connected

    def plan(self) -> List[RouteResult]:
        """Solve every trip.

        Raises:
            DisconnectedMapError: If the map is required to be, but is not,
                strongly connected.
            VertexNotFoundError: If a trip references an unknown location.
            NoRouteFoundError: If a trip's destination is unreachable.
        """
        self.check_connectivity()
        road_map = self.repository.load_road_map()
        trips = self.repository.load_trips()

        self._logger.info("Planning trips", extra={"trips": len(trips)})
        return [self.route_solver.solve(road_map, trip) for trip in trips]

    def report(self) -> str:
        """Plan every trip and render the results as one report."""
        return self.renderer.render_all(self.plan())

"""Plain-text route renderer.

Produces the route reports printed by the command line:

    Shortest distance from Irvine to Costa Mesa
      Begin at Irvine
      Continue to Tustin (4.20 miles)
      Continue to Costa Mesa (5.10 miles)
    Total distance: 9.30 miles
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from ...config import OutputConfig, get_config
from ...domain.models import RouteResult, TripMetric


def format_duration(seconds: float, precision: int = 2) -> str:
    """Format a duration as ``[H hrs ][M mins ]S secs``.

    Hours and minutes are only shown once they are non-zero; seconds are
    rounded to ``precision`` decimals before splitting so that 59.999
    seconds never prints as "60.00 secs".
    """
    total = round(seconds, precision)
    hours = int(total // 3600)
    minutes = int(total % 3600 // 60)
    secs = total - hours * 3600 - minutes * 60

    secs_text = f"{secs:.{precision}f} secs"
    if hours:
        return f"{hours} hrs {minutes} mins {secs_text}"
    if minutes:
        return f"{minutes} mins {secs_text}"
    return secs_text


@dataclass
class TextRouteRenderer:
    """Renders routes as indented text.

    This adapter implements RouteRendererPort.
    """

    config: OutputConfig = field(default_factory=lambda: get_config().output)

    def render(self, route: RouteResult) -> str:
        if route.trip.metric is TripMetric.DISTANCE:
            lines = self._render_distance(route)
        else:
            lines = self._render_time(route)
        return "\n".join(lines)

    def render_all(self, routes: Sequence[RouteResult]) -> str:
        return "\n\n".join(self.render(route) for route in routes)

    def _render_distance(self, route: RouteResult) -> List[str]:
        p = self.config.precision
        indent = self.config.indent
        lines = [
            f"Shortest distance from {route.origin} to {route.destination}",
            f"{indent}Begin at {route.origin}",
        ]
        for leg in route.legs:
            lines.append(
                f"{indent}Continue to {leg.location} ({leg.segment.miles:.{p}f} miles)"
            )
        lines.append(f"Total distance: {route.total_miles:.{p}f} miles")
        return lines

    def _render_time(self, route: RouteResult) -> List[str]:
        p = self.config.precision
        indent = self.config.indent
        lines = [
            f"Shortest driving time from {route.origin} to {route.destination}",
            f"{indent}Begin at {route.origin}",
        ]
        for leg in route.legs:
            duration = format_duration(leg.segment.hours * 3600, p)
            lines.append(
                f"{indent}Continue to {leg.location} "
                f"({leg.segment.miles:.{p}f} miles @ "
                f"{leg.segment.miles_per_hour:.{p}f}mph = {duration})"
            )
        lines.append(f"Total time: {format_duration(route.total_seconds, p)}")
        return lines

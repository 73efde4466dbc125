"""Immutable domain models for roadtrip.

Road segments carry the edge payload of the road map, trips describe
what the user asked for, and route results describe what the solver
found. All models are frozen dataclasses with slots.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable


@dataclass(frozen=True, slots=True)
class RoadSegment:
    """A one-way stretch of road between two locations.

    Attributes:
        miles: Length of the segment
        miles_per_hour: Average driving speed on the segment
    """

    miles: float
    miles_per_hour: float

    def __post_init__(self) -> None:
        """Validate segment values."""
        if self.miles < 0:
            raise ValueError(f"Distance must be non-negative, got {self.miles}")
        if self.miles_per_hour <= 0:
            raise ValueError(f"Speed must be positive, got {self.miles_per_hour}")

    @property
    def hours(self) -> float:
        return self.miles / self.miles_per_hour


def distance_weight(segment: RoadSegment) -> float:
    """Edge weight for shortest-distance routing."""
    return segment.miles


def time_weight(segment: RoadSegment) -> float:
    """Edge weight for shortest-time routing, in hours."""
    return segment.hours


class TripMetric(Enum):
    """What a trip wants to minimize."""

    DISTANCE = "D"
    TIME = "T"

    @classmethod
    def parse(cls, code: str) -> TripMetric:
        """Parse a metric code ('D' or 'T', case-insensitive).

        Raises:
            ValueError: If the code is not a known metric.
        """
        try:
            return cls(code.strip().upper())
        except ValueError:
            raise ValueError(f"Unknown trip metric: {code!r}") from None

    @property
    def weight_function(self) -> Callable[[RoadSegment], float]:
        if self is TripMetric.DISTANCE:
            return distance_weight
        return time_weight


@dataclass(frozen=True, slots=True)
class Trip:
    """A route request between two vertices of the road map."""

    start_vertex: int
    end_vertex: int
    metric: TripMetric = TripMetric.DISTANCE


@dataclass(frozen=True, slots=True)
class RouteLeg:
    """One driven segment of a route.

    Attributes:
        from_vertex: Vertex the leg starts at
        to_vertex: Vertex the leg ends at
        location: Name of the destination location
        segment: The road segment driven
    """

    from_vertex: int
    to_vertex: int
    location: str
    segment: RoadSegment


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of route computation for a single trip.

    Attributes:
        trip: The trip that was solved
        origin: Name of the start location
        destination: Name of the end location
        legs: Ordered legs from origin to destination
    """

    trip: Trip
    origin: str
    destination: str
    legs: tuple[RouteLeg, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        """Check if the route has no legs (start equals destination)."""
        return len(self.legs) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of locations visited, origin included."""
        return len(self.legs) + 1

    @property
    def path(self) -> tuple[int, ...]:
        return (self.trip.start_vertex,) + tuple(leg.to_vertex for leg in self.legs)

    @property
    def total_miles(self) -> float:
        return sum(leg.segment.miles for leg in self.legs)

    @property
    def total_hours(self) -> float:
        return sum(leg.segment.hours for leg in self.legs)

    @property
    def total_seconds(self) -> float:
        return self.total_hours * 3600

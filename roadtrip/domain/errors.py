"""Typed domain errors for roadtrip.

All errors inherit from RoadTripError and can optionally wrap a root
cause exception for debugging. They are raised at the point where a
contract is violated and are never retried internally.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass
class RoadTripError(Exception):
    """Base error for the roadtrip domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class DigraphError(RoadTripError):
    """A graph invariant would be violated.

    Raised for duplicate vertices or edges, references to missing
    vertices or edges, and self-loops. The graph is left unchanged.

    Attributes:
        vertex: The offending vertex id, if a single vertex is involved
        edge: The offending (from, to) pair, if an edge is involved
    """

    vertex: Optional[int] = None
    edge: Optional[Tuple[int, int]] = None


@dataclass
class InputFormatError(RoadTripError):
    """Malformed road-map or trip input.

    Attributes:
        line_number: Physical line where the problem was detected
    """

    line_number: Optional[int] = None


@dataclass
class RoadMapLoadError(RoadTripError):
    """The road-map input source could not be read.

    Attributes:
        source: Path or name of the input source
    """

    source: Optional[str] = None


@dataclass
class VertexNotFoundError(RoadTripError):
    """A trip references a vertex that is not on the road map."""

    vertex: Optional[int] = None


@dataclass
class NoRouteFoundError(RoadTripError):
    """No directed path exists between the requested vertices.

    Attributes:
        start_vertex: Trip start
        end_vertex: Trip destination
    """

    start_vertex: Optional[int] = None
    end_vertex: Optional[int] = None


@dataclass
class DisconnectedMapError(RoadTripError):
    """The road map is not strongly connected."""

    vertex_count: int = 0


@dataclass
class ConfigurationError(RoadTripError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None

"""Road-map loading from the text description.

Format (blank lines and ``#`` comments are ignored)::

    <vertex count>
    <vertex id> <location name>          one line per vertex
    <edge count>
    <from> <to> <miles> <miles per hour> one line per edge
"""

from __future__ import annotations

from ..domain.errors import DigraphError, InputFormatError
from ..domain.models import RoadSegment
from ..graph.digraph import Digraph
from ..ports.graph import RoadMap
from .input_reader import InputReader


def read_road_map(reader: InputReader) -> RoadMap:
    """Populate a new road map from ``reader``.

    Raises:
        InputFormatError: On malformed lines, invalid segments, or lines
            that would break a graph invariant (duplicate vertex, edge to
            an unknown vertex, ...).
    """
    road_map: RoadMap = Digraph()

    for _ in range(reader.read_count("vertex")):
        line = reader.read_line()
        fields = line.split(maxsplit=1)
        name = fields[1].strip() if len(fields) > 1 else ""
        try:
            road_map.add_vertex(int(fields[0]), name)
        except (ValueError, DigraphError) as e:
            raise InputFormatError(
                f"Invalid vertex on line {reader.line_number}: {line!r}",
                line_number=reader.line_number,
                cause=e,
            )

    for _ in range(reader.read_count("edge")):
        line = reader.read_line()
        fields = line.split()
        if len(fields) != 4:
            raise InputFormatError(
                f"Expected '<from> <to> <miles> <mph>' on line "
                f"{reader.line_number}, got {line!r}",
                line_number=reader.line_number,
            )
        try:
            segment = RoadSegment(miles=float(fields[2]), miles_per_hour=float(fields[3]))
            road_map.add_edge(int(fields[0]), int(fields[1]), segment)
        except (ValueError, DigraphError) as e:
            raise InputFormatError(
                f"Invalid road segment on line {reader.line_number}: {line!r}",
                line_number=reader.line_number,
                cause=e,
            )

    return road_map

"""Road-map serialization in the loader's text format."""

from __future__ import annotations

from typing import TextIO

from ..ports.graph import RoadMap


def _number(value: float) -> str:
    # repr keeps full precision and reads back to the same float
    return repr(float(value))


def write_road_map(road_map: RoadMap, stream: TextIO) -> None:
    """Write ``road_map`` so that ``read_road_map`` reproduces it.

    Vertices and edges are written in ascending id order.
    """
    vertices = sorted(road_map.vertices())

    stream.write(f"{len(vertices)}\n")
    for vertex in vertices:
        stream.write(f"{vertex} {road_map.vertex_info(vertex)}\n")

    edges = sorted(road_map.edges())
    stream.write(f"{len(edges)}\n")
    for from_vertex, to_vertex in edges:
        segment = road_map.edge_info(from_vertex, to_vertex)
        stream.write(
            f"{from_vertex} {to_vertex} "
            f"{_number(segment.miles)} {_number(segment.miles_per_hour)}\n"
        )

"""Single-source shortest paths using Dijkstra's algorithm.

The solver only reads the graph through its public API and never
mutates it. Edge weights come from a caller-supplied function of the
edge payload, so the same graph can be routed by distance, by time,
or by any other non-negative cost.
"""

from __future__ import annotations

import heapq
import math
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Mapping, Set, Tuple, TypeVar

from ..domain.errors import DigraphError

if TYPE_CHECKING:
    from .digraph import Digraph

E = TypeVar("E")


def _dijkstra(
    graph: Digraph[Any, E],
    start_vertex: int,
    edge_weight_func: Callable[[E], float],
) -> Tuple[Dict[int, float], Dict[int, int]]:
    if start_vertex not in graph:
        raise DigraphError(
            f"Start vertex does not exist: {start_vertex}", vertex=start_vertex
        )

    distances: Dict[int, float] = {vertex: math.inf for vertex in graph.vertices()}
    predecessors: Dict[int, int] = {vertex: vertex for vertex in distances}
    distances[start_vertex] = 0.0

    # (distance, vertex) tuples: equal distances settle the smallest id first
    heap: List[Tuple[float, int]] = [(0.0, start_vertex)]
    settled: Set[int] = set()

    while heap:
        current_distance, u = heapq.heappop(heap)

        if u in settled:
            continue

        settled.add(u)

        for _, w in graph.edges(u):
            new_distance = current_distance + edge_weight_func(graph.edge_info(u, w))
            if new_distance < distances[w]:
                distances[w] = new_distance
                predecessors[w] = u
                heapq.heappush(heap, (new_distance, w))

    return distances, predecessors


def find_shortest_paths(
    graph: Digraph[Any, E],
    start_vertex: int,
    edge_weight_func: Callable[[E], float],
) -> Dict[int, int]:
    """Compute the shortest-path predecessor tree rooted at ``start_vertex``.

    Parameters
    ----------
    graph:
        Graph to route through.
    start_vertex:
        Identifier of the vertex every path starts from.
    edge_weight_func:
        Maps an edge payload to a non-negative weight. Negative weights
        give unspecified results.

    Returns
    -------
    dict[int, int]
        Every vertex id mapped to its predecessor on a shortest path.
        ``start_vertex`` and every vertex it cannot reach map to
        themselves.

    Raises
    ------
    DigraphError
        If ``start_vertex`` is not in the graph.
    """
    _, predecessors = _dijkstra(graph, start_vertex, edge_weight_func)
    return predecessors


def shortest_distances(
    graph: Digraph[Any, E],
    start_vertex: int,
    edge_weight_func: Callable[[E], float],
) -> Dict[int, float]:
    """Like ``find_shortest_paths`` but return the total weight per vertex.

    Unreachable vertices get ``math.inf``.
    """
    distances, _ = _dijkstra(graph, start_vertex, edge_weight_func)
    return distances


def path_to(
    predecessors: Mapping[int, int],
    start_vertex: int,
    end_vertex: int,
) -> List[int]:
    """Walk a predecessor map back from ``end_vertex`` to ``start_vertex``.

    Parameters
    ----------
    predecessors:
        Result of ``find_shortest_paths`` for ``start_vertex``.
    start_vertex:
        The root the predecessor map was computed from.
    end_vertex:
        Destination vertex.

    Returns
    -------
    list[int]
        Vertex ids from ``start_vertex`` to ``end_vertex`` inclusive, or
        ``[]`` if ``end_vertex`` is unreachable.
    """
    if end_vertex not in predecessors:
        raise DigraphError(f"Vertex does not exist: {end_vertex}", vertex=end_vertex)

    path: List[int] = [end_vertex]
    current = end_vertex
    while current != start_vertex:
        previous = predecessors[current]
        if previous == current:
            return []
        path.append(previous)
        current = previous

    path.reverse()
    return path

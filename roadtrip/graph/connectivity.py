"""Strong-connectivity testing.

A directed graph is strongly connected when every vertex can reach
every other vertex. The check runs one breadth-first traversal per
vertex, O(V * (V + E)) overall, and stops at the first vertex that
cannot reach the whole graph.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Any, Set

if TYPE_CHECKING:
    from .digraph import Digraph


def reachable_from(graph: Digraph[Any, Any], vertex: int) -> Set[int]:
    """Return every vertex reachable from ``vertex``, including itself.

    Raises:
        DigraphError: If ``vertex`` does not exist.
    """
    seen = {vertex}
    queue = deque([vertex])

    # edges() validates the start vertex on the first iteration
    while queue:
        current = queue.popleft()
        for _, neighbor in graph.edges(current):
            if neighbor not in seen:
                seen.add(neighbor)
                queue.append(neighbor)

    return seen


def is_strongly_connected(graph: Digraph[Any, Any]) -> bool:
    """Return True if every vertex reaches every other vertex.

    An empty graph and a single isolated vertex are strongly connected.
    """
    total = graph.vertex_count()
    for vertex in graph.vertices():
        if len(reachable_from(graph, vertex)) < total:
            return False
    return True

"""Generic directed graph backed by adjacency mappings.

Each vertex is identified by a caller-assigned integer and owns an
ordered mapping of its outgoing edges (destination id -> edge payload).
Vertex and edge payloads are opaque to the graph, so the same container
serves road maps, test fixtures, or any other network.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, TypeVar

from ..domain.errors import DigraphError
from .connectivity import is_strongly_connected
from .dijkstra import find_shortest_paths

V = TypeVar("V")
E = TypeVar("E")

Edge = Tuple[int, int]


@dataclass
class _VertexEntry(Generic[V, E]):
    info: V
    outgoing: Dict[int, E] = field(default_factory=dict)


class Digraph(Generic[V, E]):
    """Mutable directed graph with vertex payloads ``V`` and edge payloads ``E``.

    Invariants after every successful call:

    - every edge references two vertices present in the graph;
    - there is at most one edge per ordered ``(from, to)`` pair;
    - no edge starts and ends at the same vertex.

    Every mutating method checks all of its preconditions before touching
    the store, so a call that raises ``DigraphError`` has no effect.
    Query methods return fresh lists, never live views.

    Example:
        graph: Digraph[str, float] = Digraph()
        graph.add_vertex(0, "Irvine")
        graph.add_vertex(1, "Tustin")
        graph.add_edge(0, 1, 4.2)
        graph.find_shortest_paths(0, lambda miles: miles)  # {0: 0, 1: 0}
    """

    def __init__(self) -> None:
        self._vertices: Dict[int, _VertexEntry[V, E]] = {}

    # ------------------------------------------------------------------
    # Copy and transfer
    # ------------------------------------------------------------------

    def copy(self) -> Digraph[V, E]:
        """Return a deep copy that shares no storage with this graph."""
        return copy.deepcopy(self)

    def __deepcopy__(self, memo: Dict[int, Any]) -> Digraph[V, E]:
        clone: Digraph[V, E] = type(self)()
        memo[id(self)] = clone
        clone._vertices = copy.deepcopy(self._vertices, memo)
        return clone

    def take(self) -> Digraph[V, E]:
        """Move the whole contents into a new graph, leaving this one empty."""
        moved: Digraph[V, E] = type(self)()
        moved._vertices, self._vertices = self._vertices, {}
        return moved

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def vertices(self) -> List[int]:
        return list(self._vertices)

    def edges(self, vertex: Optional[int] = None) -> List[Edge]:
        """Return ``(from, to)`` pairs, for one vertex or the whole graph.

        Raises:
            DigraphError: If ``vertex`` is given and does not exist.
        """
        if vertex is not None:
            entry = self._entry(vertex)
            return [(vertex, to_vertex) for to_vertex in entry.outgoing]

        return [
            (from_vertex, to_vertex)
            for from_vertex, entry in self._vertices.items()
            for to_vertex in entry.outgoing
        ]

    def vertex_info(self, vertex: int) -> V:
        return self._entry(vertex).info

    def edge_info(self, from_vertex: int, to_vertex: int) -> E:
        outgoing = self._entry(from_vertex).outgoing
        self._entry(to_vertex)
        if to_vertex not in outgoing:
            raise DigraphError(
                f"Edge does not exist: {from_vertex} -> {to_vertex}",
                edge=(from_vertex, to_vertex),
            )
        return outgoing[to_vertex]

    def vertex_count(self) -> int:
        return len(self._vertices)

    def edge_count(self, vertex: Optional[int] = None) -> int:
        """Count edges outgoing from ``vertex``, or all edges if omitted."""
        if vertex is not None:
            return len(self._entry(vertex).outgoing)
        return sum(len(entry.outgoing) for entry in self._vertices.values())

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._vertices

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={self.vertex_count()}, "
            f"edges={self.edge_count()})"
        )

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_vertex(self, vertex: int, info: V) -> None:
        if vertex in self._vertices:
            raise DigraphError(f"Vertex already exists: {vertex}", vertex=vertex)
        self._vertices[vertex] = _VertexEntry(info)

    def add_edge(self, from_vertex: int, to_vertex: int, info: E) -> None:
        outgoing = self._entry(from_vertex).outgoing
        self._entry(to_vertex)
        if from_vertex == to_vertex:
            raise DigraphError(
                f"Self-loops are not allowed: {from_vertex} -> {to_vertex}",
                edge=(from_vertex, to_vertex),
            )
        if to_vertex in outgoing:
            raise DigraphError(
                f"Edge already exists: {from_vertex} -> {to_vertex}",
                edge=(from_vertex, to_vertex),
            )
        outgoing[to_vertex] = info

    def remove_vertex(self, vertex: int) -> None:
        """Remove ``vertex`` together with all of its incoming and outgoing edges."""
        self._entry(vertex)
        del self._vertices[vertex]
        for entry in self._vertices.values():
            entry.outgoing.pop(vertex, None)

    def remove_edge(self, from_vertex: int, to_vertex: int) -> None:
        outgoing = self._entry(from_vertex).outgoing
        self._entry(to_vertex)
        if to_vertex not in outgoing:
            raise DigraphError(
                f"Edge does not exist: {from_vertex} -> {to_vertex}",
                edge=(from_vertex, to_vertex),
            )
        del outgoing[to_vertex]

    # ------------------------------------------------------------------
    # Algorithms
    # ------------------------------------------------------------------

    def is_strongly_connected(self) -> bool:
        """Return True if every vertex can reach every other vertex."""
        return is_strongly_connected(self)

    def find_shortest_paths(
        self,
        start_vertex: int,
        edge_weight_func: Callable[[E], float],
    ) -> Dict[int, int]:
        """Map every vertex to its predecessor on a shortest path from ``start_vertex``.

        See ``roadtrip.graph.dijkstra.find_shortest_paths``.
        """
        return find_shortest_paths(self, start_vertex, edge_weight_func)

    # ------------------------------------------------------------------

    def _entry(self, vertex: int) -> _VertexEntry[V, E]:
        try:
            return self._vertices[vertex]
        except KeyError:
            raise DigraphError(
                f"Vertex does not exist: {vertex}", vertex=vertex
            ) from None

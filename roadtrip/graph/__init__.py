"""Graph core: a generic directed graph and the algorithms that read it.

The container lives in ``digraph``; ``connectivity`` and ``dijkstra``
only use its public API and never mutate it.
"""

from .connectivity import is_strongly_connected, reachable_from
from .digraph import Digraph
from .dijkstra import find_shortest_paths, path_to, shortest_distances

__all__ = [
    "Digraph",
    "is_strongly_connected",
    "reachable_from",
    "find_shortest_paths",
    "shortest_distances",
    "path_to",
]

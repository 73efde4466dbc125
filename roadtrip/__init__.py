"""Top-level package for roadtrip.

The core is a generic directed graph (``roadtrip.graph``) with strong
connectivity testing and Dijkstra shortest paths. Around it sit the
text readers, the route solver and renderer adapters, and the command
line that together plan shortest-distance and shortest-time trips on a
road map.
"""

from .domain.errors import DigraphError
from .graph import Digraph

__all__ = ["Digraph", "DigraphError"]

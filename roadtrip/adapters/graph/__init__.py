"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- TextRoadMapRepository: Loads road map and trips from text input
- DijkstraRouteSolver: Finds shortest routes using Dijkstra's algorithm
"""

from .dijkstra_solver import DijkstraRouteSolver
from .text_repository import TextRoadMapRepository

__all__ = ["TextRoadMapRepository", "DijkstraRouteSolver"]

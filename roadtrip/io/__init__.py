"""Text input/output for road maps and trip requests.

These readers and writers only use the public graph API; the graph
itself knows nothing about text formats.
"""

from .input_reader import InputReader
from .road_map_reader import read_road_map
from .road_map_writer import write_road_map
from .trip_reader import read_trips

__all__ = ["InputReader", "read_road_map", "read_trips", "write_road_map"]

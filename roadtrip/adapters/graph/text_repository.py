"""Text road-map repository adapter.

Reads a road map followed by its trip requests from a single text
source, which is either a file path or an already-open stream such as
standard input. The trips are only parsed when asked for, so an input
holding just a road map is fine for callers that never need trips.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, TextIO

from ...config import InputConfig, get_config
from ...domain.errors import ConfigurationError, RoadMapLoadError
from ...domain.models import Trip
from ...io.input_reader import InputReader
from ...io.road_map_reader import read_road_map
from ...io.trip_reader import read_trips
from ...ports.graph import RoadMap


@dataclass
class TextRoadMapRepository:
    """Road-map repository that parses the text input format.

    This adapter implements RoadMapRepositoryPort.

    Attributes:
        config: Input configuration (default path, encoding, comment prefix)
        path: Input file; overrides ``config.path``
        stream: Open text stream; takes precedence over any path
    """

    config: InputConfig = field(default_factory=lambda: get_config().input)
    path: Optional[Path] = None
    stream: Optional[TextIO] = field(default=None, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _text: Optional[str] = field(default=None, repr=False)
    _road_map: Optional[RoadMap] = field(default=None, repr=False)
    _trips: Optional[List[Trip]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def source(self) -> str:
        if self.stream is not None:
            return getattr(self.stream, "name", "<stream>")
        resolved = self.path or self.config.path
        return str(resolved) if resolved is not None else "<unset>"

    def load_road_map(self) -> RoadMap:
        """Load the road map.

        Returns:
            The road network as a directed graph.

        Raises:
            ConfigurationError: If no input source is configured.
            RoadMapLoadError: If the input cannot be read.
            InputFormatError: If the road map is malformed.
        """
        if self._road_map is not None:
            return self._road_map

        road_map = read_road_map(self._new_reader())
        self._road_map = road_map
        self._logger.info(
            "Road map loaded",
            extra={
                "source": self.source,
                "vertices": road_map.vertex_count(),
                "edges": road_map.edge_count(),
            },
        )
        return road_map

    def load_trips(self) -> List[Trip]:
        """Load the trip requests that follow the road map.

        Raises:
            InputFormatError: If the trips are missing or malformed.
        """
        if self._trips is None:
            self.load_road_map()
            reader = self._new_reader()
            # positions the reader after the road map
            read_road_map(reader)
            self._trips = read_trips(reader)
            self._logger.info(
                "Trips loaded",
                extra={"source": self.source, "trips": len(self._trips)},
            )
        return list(self._trips)

    def _new_reader(self) -> InputReader:
        # every parse starts from the top of the cached text
        if self._text is None:
            self._text = self._read_text()
        return InputReader(
            io.StringIO(self._text), comment_prefix=self.config.comment_prefix
        )

    def _read_text(self) -> str:
        self._logger.debug("Reading road-map input", extra={"source": self.source})

        if self.stream is not None:
            try:
                return self.stream.read()
            except OSError as e:
                raise RoadMapLoadError(
                    f"Failed to read road map from {self.source}",
                    source=self.source,
                    cause=e,
                )

        path = self.path or self.config.path
        if path is None:
            raise ConfigurationError(
                "No road-map input configured",
                setting_name="ROADTRIP_INPUT_PATH",
                expected_type="path",
            )
        try:
            return Path(path).read_text(encoding=self.config.encoding)
        except OSError as e:
            raise RoadMapLoadError(
                f"Failed to read road map from {path}",
                source=str(path),
                cause=e,
            )

    def clear_cache(self) -> None:
        """Clear cached road map and trips.

        File input is read again on the next load; stream input cannot be
        re-read, so its text stays cached.
        """
        if self.stream is None:
            self._text = None
        self._road_map = None
        self._trips = None
        self._logger.debug("Road map cache cleared")

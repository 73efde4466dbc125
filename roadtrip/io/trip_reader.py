"""Trip-request reading.

Format::

    <trip count>
    <start vertex> <end vertex> <D|T>    one line per trip

``D`` asks for the shortest distance, ``T`` for the shortest driving time.
"""

from __future__ import annotations

from typing import List

from ..domain.errors import InputFormatError
from ..domain.models import Trip, TripMetric
from .input_reader import InputReader


def read_trips(reader: InputReader) -> List[Trip]:
    trips: List[Trip] = []

    for _ in range(reader.read_count("trip")):
        line = reader.read_line()
        fields = line.split()
        if len(fields) != 3:
            raise InputFormatError(
                f"Expected '<start> <end> <D|T>' on line {reader.line_number}, "
                f"got {line!r}",
                line_number=reader.line_number,
            )
        try:
            trips.append(
                Trip(
                    start_vertex=int(fields[0]),
                    end_vertex=int(fields[1]),
                    metric=TripMetric.parse(fields[2]),
                )
            )
        except ValueError as e:
            raise InputFormatError(
                f"Invalid trip on line {reader.line_number}: {line!r}",
                line_number=reader.line_number,
                cause=e,
            )

    return trips

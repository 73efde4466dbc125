"""Line-oriented reader for road-map and trip input.

Blank lines and comment lines are skipped so that input files can be
annotated freely. The reader keeps track of the physical line number
so that format errors point at the right place.
"""

from __future__ import annotations

from typing import TextIO

from ..domain.errors import InputFormatError


class InputReader:
    """Read meaningful lines from a text stream.

    Attributes:
        line_number: Physical number of the last line read (1-based)
    """

    def __init__(self, stream: TextIO, comment_prefix: str = "#") -> None:
        self._stream = stream
        self._comment_prefix = comment_prefix
        self.line_number = 0

    def read_line(self) -> str:
        """Return the next non-blank, non-comment line, stripped.

        Raises:
            InputFormatError: At end of input.
        """
        for raw in self._stream:
            self.line_number += 1
            line = raw.strip()
            if line and not line.startswith(self._comment_prefix):
                return line

        raise InputFormatError(
            "Unexpected end of input", line_number=self.line_number
        )

    def read_int(self) -> int:
        line = self.read_line()
        try:
            return int(line)
        except ValueError as e:
            raise InputFormatError(
                f"Expected an integer on line {self.line_number}, got {line!r}",
                line_number=self.line_number,
            ) from e

    def read_count(self, what: str) -> int:
        """Read a non-negative integer announcing how many ``what`` follow."""
        count = self.read_int()
        if count < 0:
            raise InputFormatError(
                f"Negative {what} count on line {self.line_number}: {count}",
                line_number=self.line_number,
            )
        return count

"""Slice specification: a begin/end boundary pair over a line stream.

A boundary may count from the start of the stream (non-negative) or from
its end (negative), the same way Python sequence slicing does.
"""

import re
import sys
from dataclasses import dataclass

from lineslice.errors import ParseFailure, SliceParseError

_INTEGER = re.compile(r"-?[0-9]+")


def _parse_bound(part: str) -> int | None:
    """Parse one side of an expression; None if it is not a usable integer."""
    if not _INTEGER.fullmatch(part):
        return None
    value = int(part)
    if abs(value) > sys.maxsize:
        return None
    return value


@dataclass(frozen=True)
class SliceSpec:
    """Selection rule for a contiguous range of lines.

    Attributes:
        begin: Lines to skip from the start when non-negative; size of the
            trailing window when negative.
        end: Exclusive absolute end index when non-negative; count of
            trailing lines to exclude when negative; ``None`` runs to the
            end of the stream.
    """

    begin: int = 0
    end: int | None = None

    @classmethod
    def parse(cls, text: str) -> "SliceSpec":
        """Parse a ``BEGIN:END`` expression."""
        parts = text.split(":")
        if len(parts) != 2:
            raise SliceParseError(text, ParseFailure.WRONG_PART_COUNT)

        begin_part, end_part = parts
        if not begin_part and not end_part:
            raise SliceParseError(text, ParseFailure.EMPTY)

        begin = 0
        if begin_part:
            begin = _parse_bound(begin_part)
            if begin is None:
                raise SliceParseError(text, ParseFailure.INVALID_BEGIN)

        end = None
        if end_part:
            end = _parse_bound(end_part)
            if end is None:
                raise SliceParseError(text, ParseFailure.INVALID_END)

        return cls(begin=begin, end=end)

    def format(self) -> str:
        """Render as ``[begin:end]`` for diagnostics."""
        if self.end is None:
            return f"[{self.begin}:]"
        return f"[{self.begin}:{self.end}]"

    def __str__(self) -> str:
        return self.format()

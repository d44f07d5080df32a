"""lineslice: print a slice of lines from a text stream."""

from lineslice.core.spec import SliceSpec
from lineslice.errors import SliceIOError, SliceParseError
from lineslice.slicer import SliceStats, StreamSlicer, slice_lines

__all__ = [
    "SliceSpec",
    "StreamSlicer",
    "SliceStats",
    "slice_lines",
    "SliceParseError",
    "SliceIOError",
]

"""Line I/O for lineslice."""

from lineslice.io.line_sink import LineSink
from lineslice.io.line_source import LineSource, split_line

__all__ = ["LineSource", "LineSink", "split_line"]

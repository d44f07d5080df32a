"""Line sink for lineslice."""

from typing import BinaryIO


class LineSink:
    """Write one line at a time, each followed by a single LF."""

    def __init__(self, stream: BinaryIO, encoding: str = "utf-8", errors: str = "strict"):
        self.stream = stream
        self.encoding = encoding
        self.errors = errors
        self.lines_written = 0

    def write_line(self, line: str) -> None:
        self.stream.write(line.encode(self.encoding, self.errors) + b"\n")
        self.lines_written += 1

    def flush(self) -> None:
        self.stream.flush()

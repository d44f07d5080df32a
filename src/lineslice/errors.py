"""Error taxonomy for lineslice."""

from enum import Enum


class LineSliceError(Exception):
    """Base class for all lineslice errors."""


class ParseFailure(Enum):
    """Why a slice expression was rejected."""

    WRONG_PART_COUNT = "Invalid slice"
    EMPTY = "Slice cannot be empty"
    INVALID_BEGIN = "Invalid slice starting point"
    INVALID_END = "Invalid slice ending point"


class SliceParseError(LineSliceError, ValueError):
    """A slice expression could not be parsed."""

    def __init__(self, text: str, reason: ParseFailure):
        super().__init__(reason.value)
        self.text = text
        self.reason = reason


class IOSide(Enum):
    """Which side of the stream failed."""

    READ = "read"
    WRITE = "write"


class SliceIOError(LineSliceError):
    """Reading the source or writing the sink failed mid-slice.

    The underlying exception is kept as ``__cause__``.
    """

    side: IOSide

    def __init__(self, cause: BaseException):
        super().__init__(f"{self.side.value} failed: {cause}")
        self.cause = cause


class SliceReadError(SliceIOError):
    side = IOSide.READ


class SliceWriteError(SliceIOError):
    side = IOSide.WRITE

"""Derived quantities that drive one slicing run."""

import sys
from dataclasses import dataclass
from enum import Enum

from lineslice.core.spec import SliceSpec


class SliceMode(Enum):
    """Algorithm variant, chosen from the sign of ``begin``."""

    DIRECT = "direct"  # begin >= 0, emit as soon as a line is safe
    TRAILING = "trailing"  # begin < 0, emit only after the source ends


@dataclass(frozen=True)
class SlicePlan:
    """Everything the slicer needs, computed once before reading."""

    mode: SliceMode
    skip_count: int
    window_size: int
    stop_count: int | None  # None: read until the source is exhausted

    @classmethod
    def from_spec(cls, spec: SliceSpec) -> "SlicePlan":
        skip_count = spec.begin if spec.begin > 0 else 0

        stop_count = None
        window_size = 0
        if spec.end is not None:
            if spec.end >= 0:
                stop_count = max(0, spec.end - skip_count)
            else:
                window_size = -spec.end

        if spec.begin < 0:
            # The trailing window size wins over a negative end.
            return cls(
                mode=SliceMode.TRAILING,
                skip_count=0,
                window_size=-spec.begin,
                stop_count=stop_count,
            )

        return cls(
            mode=SliceMode.DIRECT,
            skip_count=skip_count,
            window_size=window_size,
            stop_count=stop_count,
        )

    @property
    def read_limit(self) -> int | None:
        """How many lines to read after skipping, or None for all."""
        if self.stop_count is None:
            return None
        return min(self.stop_count + self.window_size, sys.maxsize)

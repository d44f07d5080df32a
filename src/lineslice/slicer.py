"""Bounded-memory line slicing over a streamed line sequence.

Selects the same lines that ``list(lines)[begin:end]`` would, while holding
at most as many lines as the magnitude of the negative boundary in play.
"""

import logging
import sys
import zlib
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice
from typing import Protocol

from lineslice.core.plan import SliceMode, SlicePlan
from lineslice.core.spec import SliceSpec
from lineslice.core.window import SlidingWindow
from lineslice.errors import SliceReadError, SliceWriteError

logger = logging.getLogger(__name__)


class LineWriter(Protocol):
    """Anything that accepts one line at a time."""

    def write_line(self, line: str) -> None: ...


@dataclass
class SliceStats:
    """Outcome of one slicing run."""

    mode: SliceMode
    lines_read: int = 0
    lines_emitted: int = 0
    peak_buffered: int = 0


class StreamSlicer:
    """Apply a SliceSpec to line streams."""

    def __init__(self, spec: SliceSpec):
        self.spec = spec
        self._plan = SlicePlan.from_spec(spec)

    @property
    def plan(self) -> SlicePlan:
        return self._plan

    def select(self, lines: Iterable[str], stats: SliceStats | None = None) -> Iterator[str]:
        """Lazily yield the selected lines."""
        if stats is None:
            stats = SliceStats(mode=self._plan.mode)
        if self._plan.mode is SliceMode.TRAILING:
            return self._select_trailing(lines, stats)
        return self._select_direct(lines, stats)

    def run(self, source: Iterable[str], sink: LineWriter) -> SliceStats:
        """Write the selected lines of ``source`` to ``sink``.

        Raises:
            SliceReadError: pulling a line from the source failed.
            SliceWriteError: the sink rejected a line.
        """
        logger.debug("slicing %s with %s", self.spec, self._plan)
        stats = SliceStats(mode=self._plan.mode)

        for line in self.select(_guarded(source, stats), stats):
            try:
                sink.write_line(line)
            except (OSError, UnicodeEncodeError) as e:
                raise SliceWriteError(e) from e
            stats.lines_emitted += 1

        logger.debug("slice done: %s", stats)
        return stats

    def _select_direct(self, lines: Iterable[str], stats: SliceStats) -> Iterator[str]:
        plan = self._plan
        stop = None
        if plan.read_limit is not None:
            stop = min(plan.skip_count + plan.read_limit, sys.maxsize)
        window = SlidingWindow(plan.window_size, emit_evicted=True)

        try:
            for line in islice(lines, plan.skip_count, stop):
                evicted = window.push(line)
                if evicted is not None:
                    yield evicted
        finally:
            stats.peak_buffered = window.peak

        # Whatever is still held is the trailing exclusion.
        window.clear()

    def _select_trailing(self, lines: Iterable[str], stats: SliceStats) -> Iterator[str]:
        plan = self._plan
        end = self.spec.end
        window = SlidingWindow(plan.window_size, emit_evicted=False)

        processed = 0
        for line in islice(lines, plan.read_limit):
            window.push(line)
            processed += 1
        stats.peak_buffered = window.peak

        if end is not None:
            if end < 0:
                window.drop_last(-end)
            else:
                window.drop_last(processed - max(0, end))

        yield from window.drain()


def _guarded(lines: Iterable[str], stats: SliceStats) -> Iterator[str]:
    """Count lines pulled from ``lines`` and report pull failures as read errors."""
    iterator = iter(lines)
    while True:
        try:
            line = next(iterator)
        except StopIteration:
            return
        except (OSError, EOFError, zlib.error, UnicodeDecodeError) as e:
            raise SliceReadError(e) from e
        stats.lines_read += 1
        yield line


def slice_lines(spec: SliceSpec, lines: Iterable[str]) -> list[str]:
    """Return the lines of ``lines`` selected by ``spec``."""
    return list(StreamSlicer(spec).select(lines))

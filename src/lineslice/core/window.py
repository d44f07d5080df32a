"""Bounded FIFO of lines with an evict policy."""

from collections import deque
from collections.abc import Iterator


class SlidingWindow:
    """Hold at most ``capacity`` of the most recent lines.

    When full, a push first evicts the oldest line. With ``emit_evicted``
    the evicted line is handed back to the caller; otherwise it is dropped.
    A zero-capacity window passes every pushed line straight through.
    """

    def __init__(self, capacity: int, emit_evicted: bool):
        if capacity < 0:
            raise ValueError(f"Window capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self.emit_evicted = emit_evicted
        self.peak = 0
        self._lines: deque[str] = deque()

    def __len__(self) -> int:
        return len(self._lines)

    def push(self, line: str) -> str | None:
        """Add a line; return the line to emit now, if any."""
        if self.capacity == 0:
            return line if self.emit_evicted else None

        evicted = None
        if len(self._lines) == self.capacity:
            evicted = self._lines.popleft()
        self._lines.append(line)
        self.peak = max(self.peak, len(self._lines))

        return evicted if self.emit_evicted else None

    def drop_last(self, count: int) -> None:
        """Drop up to ``count`` lines from the back, clamped to what is held."""
        for _ in range(min(max(count, 0), len(self._lines))):
            self._lines.pop()

    def drain(self) -> Iterator[str]:
        """Yield and remove held lines, oldest first."""
        while self._lines:
            yield self._lines.popleft()

    def clear(self) -> None:
        self._lines.clear()

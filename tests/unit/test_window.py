"""Unit tests for the sliding window."""

import pytest

from lineslice.core.window import SlidingWindow


class TestSlidingWindow:
    def test_emit_on_evict(self):
        window = SlidingWindow(2, emit_evicted=True)
        assert window.push("a") is None
        assert window.push("b") is None
        assert window.push("c") == "a"
        assert list(window.drain()) == ["b", "c"]

    def test_discard_on_evict(self):
        window = SlidingWindow(2, emit_evicted=False)
        for line in ["a", "b", "c", "d"]:
            assert window.push(line) is None
        assert list(window.drain()) == ["c", "d"]

    def test_empty_line_is_emitted(self):
        window = SlidingWindow(1, emit_evicted=True)
        window.push("")
        assert window.push("x") == ""

    def test_zero_capacity_passes_through(self):
        window = SlidingWindow(0, emit_evicted=True)
        assert window.push("a") == "a"
        assert len(window) == 0
        assert window.peak == 0

    def test_drop_last_is_clamped(self):
        window = SlidingWindow(3, emit_evicted=False)
        window.push("a")
        window.push("b")
        window.drop_last(5)
        assert len(window) == 0
        window.push("c")
        window.drop_last(-1)
        assert list(window.drain()) == ["c"]

    def test_peak_never_exceeds_capacity(self):
        window = SlidingWindow(3, emit_evicted=True)
        for i in range(100):
            window.push(str(i))
        assert window.peak == 3

    def test_negative_capacity_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            SlidingWindow(-1, emit_evicted=True)

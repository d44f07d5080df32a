"""Core slice models for lineslice."""

from lineslice.core.plan import SliceMode, SlicePlan
from lineslice.core.spec import SliceSpec
from lineslice.core.window import SlidingWindow

__all__ = ["SliceSpec", "SliceMode", "SlicePlan", "SlidingWindow"]

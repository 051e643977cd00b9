"""Analytics adapter."""

from .segment import SegmentAnalytics

__all__ = ["SegmentAnalytics"]

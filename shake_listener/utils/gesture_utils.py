"""
Shared utilities for pointer sample processing.

This module provides the sample type delivered by pointer sources and
the velocity helpers used by the shake detector.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Sample:
    """A single pointer position with its monotonic timestamp (seconds)."""
    x: float
    y: float
    timestamp: float

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def __repr__(self):
        return f"Sample({self.x:.1f}, {self.y:.1f} @ {self.timestamp:.3f})"


class VelocityCalculator:
    """Utility class for velocity calculations."""

    @staticmethod
    def axis_velocities(anchor: Sample, sample: Sample) -> Optional[Tuple[float, float]]:
        """Per-axis speed from the anchor to the sample, in pixels per second.

        Returns None when no time has elapsed since the anchor (or the
        timestamps run backwards).
        """
        elapsed = sample.timestamp - anchor.timestamp
        if elapsed <= 0:
            return None
        horizontal = abs(sample.x - anchor.x) / elapsed
        vertical = abs(sample.y - anchor.y) / elapsed
        return horizontal, vertical

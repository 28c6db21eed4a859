"""
Utilities package for shake detection.

This package provides the sample type, velocity helpers and the
debounce/scheduling primitives shared by the detector and its hosts.
"""

from .gesture_utils import (
    Sample,
    VelocityCalculator
)
from .debouncer import Debouncer
from .scheduler import ThreadingScheduler, TimerQueue

__all__ = [
    'Sample',
    'VelocityCalculator',
    'Debouncer',
    'ThreadingScheduler',
    'TimerQueue'
]

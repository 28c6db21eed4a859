"""
Shake Listener Package
Detects pointer shake gestures from a stream of position samples.

The evdev-backed pieces (ShakeListener, DeviceManager, EvdevPointerSource)
live in ``shake_listener.core.listener`` and ``shake_listener.device`` so
the detector can be used without an input device.
"""

from .config.settings import SensitivityProfile, ShakeConfig, ShakeSensitivity
from .core.sources import SampleSource, ScriptedSampleSource
from .gestures.shake_detector import Direction, ShakeDetector
from .utils.debouncer import Debouncer
from .utils.gesture_utils import Sample
from .utils.scheduler import ThreadingScheduler, TimerQueue

__version__ = "1.0.0"
__all__ = [
    "ShakeDetector",
    "Direction",
    "Debouncer",
    "Sample",
    "SensitivityProfile",
    "ShakeSensitivity",
    "ShakeConfig",
    "SampleSource",
    "ScriptedSampleSource",
    "ThreadingScheduler",
    "TimerQueue"
]

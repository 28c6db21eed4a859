"""
Shake gesture detection.

Turns a stream of pointer samples into shake events: repeated reversals
along one axis, each faster than the velocity threshold, inside a single
detection window. Detected shakes are debounced before the ``on_shake``
callback runs.
"""

import logging
import threading
import weakref
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..config.settings import ShakeConfig, SensitivityLike, SensitivityProfile, resolve_profile
from ..core.sources import SampleSource
from ..utils.debouncer import Debouncer
from ..utils.gesture_utils import Sample, VelocityCalculator

logger = logging.getLogger(__name__)


class Direction(Enum):
    """Dominant direction of a single movement step."""
    LEFT = 'left'
    RIGHT = 'right'
    UP = 'up'
    DOWN = 'down'

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)

    @classmethod
    def from_delta(cls, dx: float, dy: float) -> 'Direction':
        """Classify a movement by its larger axis; equal deltas count as vertical."""
        if abs(dx) > abs(dy):
            return cls.RIGHT if dx > 0 else cls.LEFT
        return cls.UP if dy > 0 else cls.DOWN


class DetectorState(Enum):
    STOPPED = 'stopped'
    MONITORING = 'monitoring'


class ShakeDetector:
    """Detects shake gestures in a stream of pointer samples."""

    def __init__(self, sensitivity: SensitivityLike = ShakeConfig.DEFAULT_SENSITIVITY,
                 debounce_period: float = ShakeConfig.DEFAULT_DEBOUNCE_PERIOD,
                 on_shake: Optional[Callable[[], None]] = None,
                 source: Optional[SampleSource] = None,
                 scheduler: Optional[Any] = None):
        self.config = ShakeConfig()
        self.on_shake = on_shake
        self.source = source
        self._profile = resolve_profile(sensitivity)
        self.debouncer = Debouncer(debounce_period, scheduler)

        self.state = DetectorState.STOPPED
        self._subscription = None
        self.detections = 0

        # Gesture window state
        self.recent_samples: List[Sample] = []
        self.previous_position: Optional[Tuple[float, float]] = None
        self.previous_direction: Optional[Direction] = None
        self.direction_change_count = 0
        self.gesture_start_time: Optional[float] = None

        self.state_lock = threading.Lock()

    # Configuration ---------------------------------------------------------

    @property
    def sensitivity(self) -> SensitivityProfile:
        return self._profile

    @property
    def debounce_period(self) -> float:
        return self.debouncer.delay

    @property
    def is_monitoring(self) -> bool:
        return self.state is DetectorState.MONITORING

    def set_sensitivity(self, sensitivity: SensitivityLike):
        """Replace all detection thresholds; applies from the next sample."""
        profile = resolve_profile(sensitivity)
        with self.state_lock:
            self._profile = profile
        logger.debug(f"Sensitivity set to {profile}")

    def set_debounce_period(self, period: float):
        """Change the debounce delay. An already pending shake keeps its deadline."""
        self.debouncer.delay = period

    # Monitoring ------------------------------------------------------------

    def start_monitoring(self):
        """Start accepting samples and subscribe to the sample source, if any."""
        with self.state_lock:
            if self.state is DetectorState.MONITORING:
                return
            self.state = DetectorState.MONITORING

        if self.source is not None:
            self._subscription = self.source.subscribe(self.feed_position)
        logger.info("Shake monitoring started")

    def stop_monitoring(self):
        """Stop monitoring, drop any pending shake and clear gesture state."""
        with self.state_lock:
            if self.state is DetectorState.STOPPED:
                return
            self.state = DetectorState.STOPPED
            subscription, self._subscription = self._subscription, None
            self.debouncer.cancel()
            self._reset_window()

        if subscription is not None:
            self.source.unsubscribe(subscription)
        logger.info("Shake monitoring stopped")

    def reset(self):
        """Clear gesture state without changing the monitoring state."""
        with self.state_lock:
            self._reset_window()

    # Sample processing -----------------------------------------------------

    def feed_position(self, x: float, y: float, timestamp: float):
        """Sample-source handler: feed a raw position and timestamp."""
        self.feed(Sample(float(x), float(y), float(timestamp)))

    def feed(self, sample: Sample):
        """Process one pointer sample. Ignored unless monitoring."""
        with self.state_lock:
            if self.state is not DetectorState.MONITORING:
                return
            self._process_sample(sample)

    def _process_sample(self, sample: Sample):
        profile = self._profile

        if self._window_expired(sample.timestamp, profile):
            self._start_window(sample.timestamp)

        self.recent_samples.append(sample)

        if self.previous_position is None:
            self.previous_position = sample.position
            return

        dx = sample.x - self.previous_position[0]
        dy = sample.y - self.previous_position[1]

        # Jitter never touches direction or velocity state
        if (abs(dx) < self.config.MIN_MOVEMENT_THRESHOLD and
                abs(dy) < self.config.MIN_MOVEMENT_THRESHOLD):
            self.previous_position = sample.position
            return

        velocities = VelocityCalculator.axis_velocities(self.recent_samples[0], sample)
        if velocities is not None:
            self._track_direction(sample, dx, dy, velocities, profile)

        self.previous_position = sample.position

    def _track_direction(self, sample: Sample, dx: float, dy: float,
                         velocities: Tuple[float, float], profile: SensitivityProfile):
        """Count same-axis reversals and trigger detection when enough accumulate."""
        horizontal_velocity, vertical_velocity = velocities
        current_direction = Direction.from_delta(dx, dy)
        velocity = horizontal_velocity if current_direction.is_horizontal else vertical_velocity

        if self._window_expired(sample.timestamp, profile):
            return

        previous = self.previous_direction
        if (previous is not None and
                current_direction != previous and
                current_direction.is_horizontal == previous.is_horizontal and
                velocity >= profile.velocity_threshold):

            self.direction_change_count += 1
            logger.debug(f"Direction change {previous.value} -> {current_direction.value} "
                         f"at {velocity:.0f}px/s (count {self.direction_change_count})")

            if self.direction_change_count >= profile.required_direction_changes:
                self._handle_shake_detected()
                return

        # Slow movement is remembered as position only
        if velocity >= profile.velocity_threshold:
            self.previous_direction = current_direction

    def _window_expired(self, timestamp: float, profile: SensitivityProfile) -> bool:
        if self.gesture_start_time is None:
            return True
        return timestamp - self.gesture_start_time > profile.window_duration

    def _start_window(self, timestamp: float):
        self.recent_samples.clear()
        self.gesture_start_time = timestamp
        self.direction_change_count = 0
        self.previous_direction = None

    def _reset_window(self):
        self.recent_samples.clear()
        self.previous_position = None
        self.previous_direction = None
        self.direction_change_count = 0
        self.gesture_start_time = None

    # Detection -------------------------------------------------------------

    def _handle_shake_detected(self):
        self.detections += 1
        logger.debug(f"Shake detected ({self.direction_change_count} direction changes)")

        detector_ref = weakref.ref(self)

        def emit():
            detector = detector_ref()
            if detector is not None:
                detector._emit_shake()

        self.debouncer.debounce(emit)
        self._reset_window()

    def _emit_shake(self):
        callback = self.on_shake
        if callback is not None:
            callback()

    def snapshot(self) -> Dict[str, Any]:
        """Current gesture-window state, for monitoring tools."""
        with self.state_lock:
            return {
                'state': self.state.value,
                'samples': len(self.recent_samples),
                'direction_changes': self.direction_change_count,
                'previous_direction': self.previous_direction.value if self.previous_direction else None,
                'gesture_start_time': self.gesture_start_time,
                'detections': self.detections,
                'velocity_threshold': self._profile.velocity_threshold,
                'required_direction_changes': self._profile.required_direction_changes,
                'window_duration': self._profile.window_duration,
                'shake_pending': self.debouncer.pending
            }

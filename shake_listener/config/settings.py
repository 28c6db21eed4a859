"""
Configuration settings for the shake listener.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


@dataclass(frozen=True)
class SensitivityProfile:
    """Thresholds controlling how strict shake detection is."""
    velocity_threshold: float
    required_direction_changes: int
    window_duration: float

    def __post_init__(self):
        if self.required_direction_changes < 1:
            raise ValueError("required_direction_changes must be at least 1")
        if self.velocity_threshold < 0:
            raise ValueError("velocity_threshold must not be negative")
        if self.window_duration <= 0:
            raise ValueError("window_duration must be positive")


class ShakeSensitivity(Enum):
    """Preset sensitivity levels."""
    HIGH = SensitivityProfile(400.0, 3, 0.5)
    MEDIUM = SensitivityProfile(600.0, 4, 0.75)
    LOW = SensitivityProfile(800.0, 5, 1.0)

    @property
    def profile(self) -> SensitivityProfile:
        return self.value


SensitivityLike = Union[ShakeSensitivity, SensitivityProfile, str]


def resolve_profile(sensitivity: SensitivityLike) -> SensitivityProfile:
    """Turn a preset, preset name or custom profile into a SensitivityProfile."""
    if isinstance(sensitivity, SensitivityProfile):
        return sensitivity
    if isinstance(sensitivity, ShakeSensitivity):
        return sensitivity.profile
    if isinstance(sensitivity, str):
        try:
            return ShakeSensitivity[sensitivity.strip().upper()].profile
        except KeyError:
            raise ValueError(f"Unknown sensitivity preset: {sensitivity!r}") from None
    raise ValueError(f"Unsupported sensitivity: {sensitivity!r}")


class ShakeConfig:
    """Configuration constants for shake gesture recognition."""

    # Movement below this (in pixels, on both axes) is treated as jitter
    MIN_MOVEMENT_THRESHOLD = 5.0

    DEFAULT_SENSITIVITY = ShakeSensitivity.MEDIUM

    # Cooldown between reported shakes (seconds)
    DEFAULT_DEBOUNCE_PERIOD = 0.5

    # Main loop sleep in the command line tools (seconds)
    POLL_INTERVAL = 0.1

    # Reader thread join timeout on shutdown (seconds)
    THREAD_JOIN_TIMEOUT = 1.0

    SENSITIVITY_NAMES = ['high', 'medium', 'low']

"""Tests for sensitivity profiles and presets."""

import pytest

from shake_listener.config.settings import (
    SensitivityProfile,
    ShakeConfig,
    ShakeSensitivity,
    resolve_profile
)


@pytest.mark.parametrize("preset, threshold, changes, window", [
    (ShakeSensitivity.HIGH, 400, 3, 0.5),
    (ShakeSensitivity.MEDIUM, 600, 4, 0.75),
    (ShakeSensitivity.LOW, 800, 5, 1.0),
])
def test_presets(preset, threshold, changes, window):
    profile = preset.profile
    assert profile.velocity_threshold == threshold
    assert profile.required_direction_changes == changes
    assert profile.window_duration == window


def test_default_preset_is_medium():
    assert ShakeConfig.DEFAULT_SENSITIVITY is ShakeSensitivity.MEDIUM
    assert ShakeConfig.MIN_MOVEMENT_THRESHOLD == 5.0


def test_resolve_profile():
    custom = SensitivityProfile(100.0, 2, 0.3)
    assert resolve_profile(custom) is custom
    assert resolve_profile(ShakeSensitivity.LOW) == ShakeSensitivity.LOW.profile
    assert resolve_profile(' High ') == ShakeSensitivity.HIGH.profile

    with pytest.raises(ValueError):
        resolve_profile('extreme')
    with pytest.raises(ValueError):
        resolve_profile(3)


@pytest.mark.parametrize("threshold, changes, window", [
    (600.0, 0, 0.75),
    (-1.0, 4, 0.75),
    (600.0, 4, 0.0),
])
def test_invalid_profiles_rejected(threshold, changes, window):
    with pytest.raises(ValueError):
        SensitivityProfile(threshold, changes, window)

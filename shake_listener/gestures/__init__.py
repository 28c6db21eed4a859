"""
Gesture detection for pointer samples.

This module provides the shake detector state machine and the movement
direction type it classifies samples into.
"""

from .shake_detector import Direction, DetectorState, ShakeDetector

__all__ = [
    'Direction',
    'DetectorState',
    'ShakeDetector'
]

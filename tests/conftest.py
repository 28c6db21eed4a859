"""Shared fixtures for the shake listener tests."""

import pytest

from shake_listener.core.sources import ScriptedSampleSource
from shake_listener.gestures.shake_detector import ShakeDetector
from shake_listener.utils.scheduler import TimerQueue


class FakeClock:
    """Manually advanced clock driving a TimerQueue."""

    def __init__(self, start=0.0):
        self.now = start
        self.queue = TimerQueue(clock=self)

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds
        return self.queue.run_due()


def build_shake_samples(start_x=100.0, start_y=100.0, start_t=0.0, legs=5,
                  amplitude=400.0, leg_time=0.05, horizontal=True):
    """Back-and-forth samples centred on the starting point.

    The first leg covers half the amplitude so every later leg ends
    ``amplitude / 2`` away from the first sample.
    """
    samples = [(start_x, start_y, start_t)]
    offset = 0.0
    for leg in range(legs):
        sign = 1 if leg % 2 == 0 else -1
        step = amplitude / 2 if leg == 0 else amplitude
        offset += sign * step
        t = start_t + (leg + 1) * leg_time
        if horizontal:
            samples.append((start_x + offset, start_y, t))
        else:
            samples.append((start_x, start_y + offset, t))
    return samples


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def shakes():
    return []


@pytest.fixture
def make_detector(clock, shakes):
    def factory(sensitivity='medium', debounce_period=0.5, source=None, start=True):
        detector = ShakeDetector(
            sensitivity=sensitivity,
            debounce_period=debounce_period,
            on_shake=lambda: shakes.append(clock.now),
            source=source,
            scheduler=clock.queue
        )
        if start:
            detector.start_monitoring()
        return detector
    return factory


@pytest.fixture
def shake_samples():
    return build_shake_samples


@pytest.fixture
def source():
    return ScriptedSampleSource()

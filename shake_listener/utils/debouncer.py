"""
Debounce timer that coalesces rapid repeated triggers into one call.
"""

import logging
import threading
from typing import Any, Callable, Optional

from .scheduler import ThreadingScheduler

logger = logging.getLogger(__name__)


class Debouncer:
    """Run only the most recent action, ``delay`` seconds after the last trigger.

    At most one action is pending at a time. Every scheduled action is
    tagged with a generation number, and a timer that fires after being
    superseded or cancelled finds a stale generation and does nothing.
    """

    def __init__(self, delay: float, scheduler: Optional[Any] = None):
        self._delay = self._validate_delay(delay)
        self.scheduler = scheduler or ThreadingScheduler()
        self._handle = None
        self._generation = 0
        self._lock = threading.Lock()

    @staticmethod
    def _validate_delay(delay: float) -> float:
        delay = float(delay)
        if delay < 0:
            raise ValueError("Debounce delay must not be negative")
        return delay

    @property
    def delay(self) -> float:
        return self._delay

    @delay.setter
    def delay(self, value: float):
        # Applies to the next debounce() call; a pending action keeps its deadline.
        self._delay = self._validate_delay(value)

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._handle is not None

    def debounce(self, action: Callable[[], None]):
        """Cancel any pending action and schedule ``action`` after the delay."""
        with self._lock:
            if self._handle is not None:
                self._handle.cancel()
            self._generation += 1
            generation = self._generation
            self._handle = self.scheduler.call_later(
                self._delay, lambda: self._fire(generation, action)
            )

    def cancel(self):
        """Cancel the pending action, if any."""
        with self._lock:
            if self._handle is not None:
                self._handle.cancel()
                self._handle = None
            self._generation += 1

    def _fire(self, generation: int, action: Callable[[], None]):
        with self._lock:
            if generation != self._generation:
                logger.debug("Dropping superseded debounced action")
                return
            self._handle = None
        action()

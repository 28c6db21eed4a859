"""
Deferred-callback schedulers used by the debouncer.

A scheduler is any object with ``call_later(delay, callback)`` returning a
handle that has ``cancel()``. An ``asyncio`` event loop already satisfies
this, so a detector can be driven from async code by passing the loop.
"""

import heapq
import itertools
import threading
import time
from typing import Callable, List, Optional, Tuple


class ThreadingScheduler:
    """Runs each deferred callback on its own daemon timer thread."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> threading.Timer:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer


class TimerHandle:
    """Handle for a callback queued on a TimerQueue."""

    def __init__(self, deadline: float, callback: Callable[[], None]):
        self.deadline = deadline
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class TimerQueue:
    """Cooperative single-threaded timer queue.

    Nothing runs on its own: the host calls ``run_due()`` from its event
    loop, and every callback whose deadline has passed runs on that
    thread, in deadline order (ties in scheduling order).
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self._queue: List[Tuple[float, int, TimerHandle]] = []
        self._counter = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        handle = TimerHandle(self.clock() + max(delay, 0.0), callback)
        heapq.heappush(self._queue, (handle.deadline, next(self._counter), handle))
        return handle

    @property
    def pending(self) -> int:
        """Number of queued callbacks that have not been cancelled."""
        return sum(1 for _, _, handle in self._queue if not handle.cancelled)

    def next_deadline(self) -> Optional[float]:
        self._drop_cancelled()
        return self._queue[0][0] if self._queue else None

    def run_due(self, now: Optional[float] = None) -> int:
        """Run every callback due at ``now`` and return how many ran."""
        if now is None:
            now = self.clock()

        ran = 0
        while self._queue and self._queue[0][0] <= now:
            _, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            handle.callback()
            ran += 1
        return ran

    def clear(self):
        for _, _, handle in self._queue:
            handle.cancel()
        self._queue.clear()

    def _drop_cancelled(self):
        while self._queue and self._queue[0][2].cancelled:
            heapq.heappop(self._queue)

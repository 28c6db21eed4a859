"""
Sample source interface and an in-process scripted source.

A sample source pushes pointer positions to subscribed handlers as
``handler(x, y, timestamp)``. The detector only ever talks to this
interface, never to a concrete platform API.
"""

import itertools
import threading
from typing import Callable, Dict, Iterable, List, Optional, Protocol, Tuple

SampleHandler = Callable[[float, float, float], None]


class SampleSource(Protocol):
    """Anything that can push pointer samples to subscribers."""

    def subscribe(self, handler: SampleHandler) -> int:
        ...

    def unsubscribe(self, handle: int) -> None:
        ...


class ScriptedSampleSource:
    """Pushes a scripted sequence of samples to its subscribers."""

    def __init__(self, samples: Iterable[Tuple[float, float, float]] = ()):
        self.samples: List[Tuple[float, float, float]] = list(samples)
        self._handlers: Dict[int, SampleHandler] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    @property
    def subscriber_count(self) -> int:
        return len(self._handlers)

    def subscribe(self, handler: SampleHandler) -> int:
        with self._lock:
            handle = next(self._ids)
            self._handlers[handle] = handler
        return handle

    def unsubscribe(self, handle: int) -> None:
        with self._lock:
            self._handlers.pop(handle, None)

    def push(self, x: float, y: float, timestamp: float):
        """Deliver one sample to every current subscriber."""
        with self._lock:
            handlers = list(self._handlers.values())
        for handler in handlers:
            handler(x, y, timestamp)

    def play(self, samples: Optional[Iterable[Tuple[float, float, float]]] = None) -> int:
        """Push the scripted (or given) samples in order; returns how many were pushed."""
        count = 0
        for x, y, t in (self.samples if samples is None else samples):
            self.push(x, y, t)
            count += 1
        return count

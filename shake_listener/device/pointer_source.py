"""
Pointer sample source backed by an evdev input device.
"""

import itertools
import logging
import threading
from typing import Dict, Iterable

from evdev import ecodes

from ..config.settings import ShakeConfig
from ..core.sources import SampleHandler
from .device_manager import ABSOLUTE, RELATIVE

logger = logging.getLogger(__name__)

READER_THREAD_NAME = "evdev-pointer-reader"


class EvdevPointerSource:
    """Pushes pointer positions from an evdev device to subscribers.

    Relative devices (mice) have their motion accumulated into a virtual
    position starting at the origin; absolute devices report coordinates
    directly. One sample is pushed per SYN_REPORT that carried motion.
    """

    def __init__(self, device, kind: str = RELATIVE):
        self.device = device
        self.kind = kind
        self.x = 0.0
        self.y = 0.0
        self._moved = False

        self._handlers: Dict[int, SampleHandler] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()
        self._reader_lock = threading.Lock()

        self.running = False
        self.thread = None

    def subscribe(self, handler: SampleHandler) -> int:
        with self._lock:
            handle = next(self._ids)
            self._handlers[handle] = handler
            first = len(self._handlers) == 1
        if first:
            self.start()
        return handle

    def unsubscribe(self, handle: int) -> None:
        with self._lock:
            self._handlers.pop(handle, None)
            empty = not self._handlers
        if empty:
            self.stop()

    def start(self):
        """Start the reader thread, or keep the one still blocked in read_loop()."""
        with self._reader_lock:
            self.running = True
            if self.thread is not None and self.thread.is_alive():
                return
            self.thread = threading.Thread(target=self._event_loop, name=READER_THREAD_NAME)
            self.thread.daemon = True
            self.thread.start()

    def stop(self):
        """Stop the reader thread.

        A reader blocked in read_loop() exits on its next event unless
        start() claims it again first.
        """
        with self._reader_lock:
            self.running = False
            thread = self.thread
        if thread is None or thread is threading.current_thread():
            return

        thread.join(timeout=ShakeConfig.THREAD_JOIN_TIMEOUT)
        with self._reader_lock:
            if self.thread is thread and not thread.is_alive():
                self.thread = None

    def _should_exit(self) -> bool:
        with self._reader_lock:
            if self.running:
                return False
            if self.thread is threading.current_thread():
                self.thread = None
            return True

    def _event_loop(self):
        """Main event processing loop."""
        try:
            event_batch = []
            for event in self.device.read_loop():
                if self._should_exit():
                    break

                event_batch.append(event)

                if event.type == ecodes.EV_SYN and event.code == ecodes.SYN_REPORT:
                    self.handle_events(event_batch)
                    event_batch = []

        except OSError as e:
            logger.error(f"Error in pointer event loop: {e}")
            with self._reader_lock:
                self.running = False
                if self.thread is threading.current_thread():
                    self.thread = None

    def handle_events(self, events: Iterable) -> bool:
        """Apply a batch of events; push a sample on SYN_REPORT after motion.

        Returns True if a sample was pushed.
        """
        pushed = False
        for ev in events:
            if ev.type == ecodes.EV_REL and self.kind == RELATIVE:
                self._handle_rel_event(ev)
            elif ev.type == ecodes.EV_ABS and self.kind == ABSOLUTE:
                self._handle_abs_event(ev)
            elif ev.type == ecodes.EV_SYN and ev.code == ecodes.SYN_REPORT:
                if self._moved:
                    self._moved = False
                    self._dispatch(self.x, self.y, ev.timestamp())
                    pushed = True
        return pushed

    def _handle_rel_event(self, ev):
        if ev.code == ecodes.REL_X:
            self.x += ev.value
            self._moved = True
        elif ev.code == ecodes.REL_Y:
            self.y += ev.value
            self._moved = True

    def _handle_abs_event(self, ev):
        if ev.code == ecodes.ABS_X:
            self.x = float(ev.value)
            self._moved = True
        elif ev.code == ecodes.ABS_Y:
            self.y = float(ev.value)
            self._moved = True

    def _dispatch(self, x: float, y: float, timestamp: float):
        with self._lock:
            handlers = list(self._handlers.values())
        for handler in handlers:
            handler(x, y, timestamp)

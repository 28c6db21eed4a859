"""
Main shake listener class that coordinates device discovery and shake detection.
"""

import logging
from typing import Callable, Optional

from ..config.settings import ShakeConfig, SensitivityLike
from ..device.device_manager import DeviceManager
from ..device.pointer_source import EvdevPointerSource
from ..gestures.shake_detector import ShakeDetector
from ..utils.logger import ShakeLogger

logger = logging.getLogger(__name__)


class ShakeListener:
    """Listens to the system pointer and reports shake gestures."""

    def __init__(self, sensitivity: SensitivityLike = ShakeConfig.DEFAULT_SENSITIVITY,
                 debounce_period: float = ShakeConfig.DEFAULT_DEBOUNCE_PERIOD,
                 on_shake: Optional[Callable[[], None]] = None,
                 debug_file: Optional[str] = None):
        self.device_manager = DeviceManager()
        self.logger = ShakeLogger(debug_file)
        self.on_shake = on_shake
        self.source = None
        self.shake_count = 0

        self.detector = ShakeDetector(
            sensitivity=sensitivity,
            debounce_period=debounce_period,
            on_shake=self._handle_shake
        )

    def start(self) -> bool:
        """Start the shake listener."""
        device = self.device_manager.find_device()
        if not device:
            print("❌ No pointer device found")
            return False

        device_info = self.device_manager.get_device_info()
        self.source = EvdevPointerSource(device, device_info['kind'])
        self.detector.source = self.source

        self.logger.log_startup(
            device_info['name'],
            device_info['kind'],
            self.detector.sensitivity,
            self.detector.debounce_period
        )
        self.detector.start_monitoring()
        return True

    def stop(self):
        """Stop the shake listener."""
        self.detector.stop_monitoring()
        self.logger.close()

    def _handle_shake(self):
        self.shake_count += 1
        self.logger.log_shake({
            'count': self.shake_count,
            'profile': self.detector.sensitivity
        })

        if self.on_shake is not None:
            try:
                self.on_shake()
            except Exception:
                logger.exception("Shake callback failed")

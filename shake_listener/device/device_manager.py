"""
Device management for pointer device discovery.
"""

import evdev
from evdev import ecodes
import logging

logger = logging.getLogger(__name__)

RELATIVE = 'relative'
ABSOLUTE = 'absolute'


class DeviceManager:
    """Manages pointer device discovery."""

    def __init__(self):
        self.device = None
        self.kind = None

    def find_device(self):
        """Find a mouse-like (relative) or single-touch (absolute) pointer device."""
        devices = [evdev.InputDevice(path) for path in evdev.list_devices()]

        found = None
        for device in devices:
            kind = None if found is not None else self.classify_capabilities(device.capabilities())
            if kind is not None:
                found = device
                self.device = device
                self.kind = kind
                logger.info(f"Found pointer device: {device.name} ({kind})")
            else:
                device.close()

        if found is None:
            logger.error("No pointer device found")
        return found

    @staticmethod
    def classify_capabilities(caps):
        """Return RELATIVE, ABSOLUTE or None for a device capability map."""
        rel_codes = caps.get(ecodes.EV_REL, [])
        if ecodes.REL_X in rel_codes and ecodes.REL_Y in rel_codes:
            return RELATIVE

        abs_codes = [code for code, _ in caps.get(ecodes.EV_ABS, [])]
        # Multitouch surfaces report per-slot positions, not a single pointer
        if ecodes.ABS_MT_SLOT in abs_codes:
            return None
        if ecodes.ABS_X in abs_codes and ecodes.ABS_Y in abs_codes:
            return ABSOLUTE

        return None

    def get_device_info(self):
        """Get device information."""
        return {
            'device': self.device,
            'kind': self.kind,
            'name': self.device.name if self.device else None
        }

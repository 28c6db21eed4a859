"""
Logging utilities for shake events.
"""

import datetime
from typing import Any, Dict, Optional


class ShakeLogger:
    """Handles console and debug-file logging of detected shakes."""

    def __init__(self, debug_file: Optional[str] = None):
        self.debug_file = None
        if debug_file:
            try:
                self.debug_file = open(debug_file, 'w')
                self.debug_file.write(f"Debug logging started at {datetime.datetime.now()}\n")
                self.debug_file.flush()
            except OSError as e:
                print(f"Warning: Could not open debug file: {e}")

    def log_shake(self, shake: Dict[str, Any]):
        """Log a detected shake."""
        timestamp = datetime.datetime.now().strftime("%H:%M:%S.%f")[:-3]

        count = shake.get('count', 0)
        print(f"[{timestamp}] 🫨 SHAKE #{count}")

        profile = shake.get('profile')
        if profile is not None:
            print(f"   Threshold: {profile.velocity_threshold:.0f}px/s, "
                  f"{profile.required_direction_changes} reversals "
                  f"within {profile.window_duration:.2f}s")

        if self.debug_file:
            self.debug_file.write(f"[{timestamp}] {shake}\n")
            self.debug_file.flush()

    def log_startup(self, device_name: str, kind: str, profile, debounce_period: float):
        """Print startup information."""
        print(f"✅ Found: {device_name} ({kind})")
        print(f"📏 Velocity threshold: {profile.velocity_threshold:.0f}px/s")
        print(f"🔁 Required reversals: {profile.required_direction_changes}")
        print(f"⏱️  Detection window: {profile.window_duration:.2f}s")
        print(f"⏳ Debounce period: {debounce_period:.2f}s")
        print("🎯 Ready! Shake the pointer left-right or up-down.")

    def close(self):
        """Close the debug file."""
        if self.debug_file:
            self.debug_file.close()
            self.debug_file = None

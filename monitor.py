#!/usr/bin/env python3
"""
Real-time shake detector state monitor.
Shows the live gesture window as you move the pointer.
"""

import time

from shake_listener.config.settings import ShakeConfig
from shake_listener.core.listener import ShakeListener


class ShakeMonitor:
    def __init__(self, sensitivity='medium'):
        self.listener = ShakeListener(sensitivity=sensitivity)
        self.running = False

    def start(self):
        """Start monitoring the detector state."""
        if not self.listener.start():
            return False

        self.running = True
        print("🎯 Shake Window Monitor Started")
        print("=" * 50)
        print("🖱️  Press Ctrl+C to stop")
        print()

        try:
            self._monitor_loop()
        except KeyboardInterrupt:
            self.stop()

        return True

    def stop(self):
        """Stop monitoring."""
        self.running = False
        self.listener.stop()
        print("\n✅ Monitoring stopped")

    def _monitor_loop(self):
        """Main monitoring loop."""
        last_snapshot = None

        while self.running:
            snapshot = self.listener.detector.snapshot()
            if snapshot != last_snapshot:
                self._display_snapshot(snapshot)
                last_snapshot = snapshot

            time.sleep(ShakeConfig.POLL_INTERVAL)

    def _display_snapshot(self, snapshot):
        """Display the current gesture window."""
        print("\r" + " " * 80 + "\r", end="")

        if not snapshot['samples']:
            print("🤏 Waiting for movement...", end="\r")
            return

        direction = snapshot['previous_direction'] or '-'
        print(f"🔁 {snapshot['direction_changes']}/{snapshot['required_direction_changes']} reversals | "
              f"{snapshot['samples']:3d} samples | "
              f"last: {direction:<5} | "
              f"shakes: {snapshot['detections']}", end="\r")


def main():
    """Main entry point."""
    monitor = ShakeMonitor()
    monitor.start()


if __name__ == "__main__":
    main()

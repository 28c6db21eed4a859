#!/usr/bin/env python3
"""
Shake Listener - Main Entry Point
Reports pointer shake gestures from the first pointer device found.
"""

from shake_listener.cli import main

if __name__ == "__main__":
    raise SystemExit(main())

"""
Command line interface for the shake listener.
Reports pointer shake gestures from the first pointer device found.
"""

import argparse
import logging
import time

from .config.settings import ShakeConfig
from .core.listener import ShakeListener


def non_negative_float(value):
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from None
    if seconds < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return seconds


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Detect pointer shake gestures.")
    parser.add_argument('--sensitivity', choices=ShakeConfig.SENSITIVITY_NAMES,
                        default=ShakeConfig.DEFAULT_SENSITIVITY.name.lower(),
                        help="detection preset (default: %(default)s)")
    parser.add_argument('--debounce', type=non_negative_float, default=ShakeConfig.DEFAULT_DEBOUNCE_PERIOD,
                        metavar='SECONDS', help="cooldown between shakes (default: %(default)s)")
    parser.add_argument('--debug-log', metavar='PATH',
                        help="also write every shake to this file")
    parser.add_argument('-v', '--verbose', action='store_true',
                        help="log direction changes")
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for the shake listener."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s"
    )

    listener = ShakeListener(
        sensitivity=args.sensitivity,
        debounce_period=args.debounce,
        debug_file=args.debug_log
    )

    if not listener.start():
        return 1

    try:
        while True:
            time.sleep(ShakeConfig.POLL_INTERVAL)
    except KeyboardInterrupt:
        print("\n👋 Stopping...")
    finally:
        listener.stop()
    return 0
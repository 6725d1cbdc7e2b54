#!/usr/bin/env python
"""
Power and Volume Example

This example connects to a Denon receiver, reads its status, turns it on and
sets the master volume. Pass ``--emulate`` to run against the in-process
emulator instead of real hardware.
"""

import argparse
import logging

from pydenon import DenonConfig, DenonSession, EmulatedReceiver, FileTraceSink
from pydenon.core.logging import setup_logging
from pydenon.exceptions import DenonError

_LOGGER = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(description="Turn on a Denon receiver and set its volume")
    parser.add_argument("host", nargs="?", default="", help="IP address of the receiver")
    parser.add_argument("--volume", type=int, default=40, help="Master volume (1-98)")
    parser.add_argument("--log", help="Append a session transcript to this file")
    parser.add_argument("--emulate", action="store_true", help="Use the in-process emulator")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug output")
    args = parser.parse_args()

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    sink = FileTraceSink(args.log) if args.log else None
    proxy = EmulatedReceiver() if args.emulate else None

    try:
        with DenonSession(DenonConfig(host=args.host, log=sink, proxy=proxy), progress=print) as session:
            session.query()
            _LOGGER.info("Before: %s", session.status())
            session.power_on()
            session.set_master_volume(args.volume)
            _LOGGER.info("After: %s", session.status())
    except DenonError as e:
        _LOGGER.error("Receiver control failed: %s", e)
        return 1
    finally:
        if sink is not None:
            sink.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""
Constants for the Denon receiver client.

This module defines constants used throughout the Denon client.
"""

# Network
DEFAULT_PORT = 23

# Timing settings
DEFAULT_CONNECT_TIMEOUT = 1.0  # seconds
DEFAULT_SETTLE_DELAY = 0.1  # seconds
DEFAULT_WAIT_TIME = 0.2  # seconds of silence that end a reply burst
DEFAULT_ABSORB_TIMEOUT = 5.0  # seconds

# Reads
DEFAULT_READ_SIZE = 1024

# Wire format
TERMINATOR = b"\r"
TERMINATOR_BYTE = TERMINATOR[0]
CLASS_CODE_LENGTH = 2
WIRE_ENCODING = "ascii"

# Master volume is only sent when MIN < volume < MAX
MIN_MASTER_VOLUME = 0
MAX_MASTER_VOLUME = 99

# Token class codes
POWER_CLASS = "PW"
MUTE_CLASS = "MU"
MASTER_VOLUME_CLASS = "MV"
INPUT_CLASS = "SI"
MAIN_ZONE_CLASS = "ZM"

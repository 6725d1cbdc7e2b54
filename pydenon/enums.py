"""
Enumerations for the Denon receiver client.

Commands are the subset of the Denon control protocol this client speaks.
State enums describe the decoded values of the receiver's status fields.
"""

from enum import StrEnum


class Command(StrEnum):
    """Protocol commands, as sent on the wire without the terminator."""

    POWER_QUERY = "PW?"
    POWER_ON = "PWON"
    POWER_STANDBY = "PWSTANDBY"
    MUTE_QUERY = "MU?"
    MUTE_ON = "MUON"
    MUTE_OFF = "MUOFF"
    MASTER_VOLUME_QUERY = "MV?"
    INPUT_QUERY = "SI?"
    MAIN_ZONE_QUERY = "ZM?"

    @staticmethod
    def master_volume(volume: int) -> str:
        """Build the absolute master volume command, e.g. ``MV05``."""
        return f"MV{volume:02d}"


class PowerState(StrEnum):
    ON = "ON"
    STANDBY = "STANDBY"
    UNKNOWN = "unknown"


class MuteState(StrEnum):
    ON = "ON"
    OFF = "OFF"
    UNKNOWN = "unknown"


class ZonePower(StrEnum):
    ON = "ON"
    OFF = "OFF"
    UNKNOWN = "unknown"


# Commands sent by a full status query, in order
QUERY_COMMANDS = (
    Command.POWER_QUERY,
    Command.MUTE_QUERY,
    Command.MASTER_VOLUME_QUERY,
    Command.INPUT_QUERY,
    Command.MAIN_ZONE_QUERY,
)

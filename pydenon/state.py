"""
State Management Module for the Denon client.

This module holds the last known state of the receiver and decodes raw status
bursts into field updates.
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Set, Tuple

from .constants import (
    CLASS_CODE_LENGTH,
    INPUT_CLASS,
    MAIN_ZONE_CLASS,
    MASTER_VOLUME_CLASS,
    MAX_MASTER_VOLUME,
    MIN_MASTER_VOLUME,
    MUTE_CLASS,
    POWER_CLASS,
    TERMINATOR,
    WIRE_ENCODING,
)
from .core.logging import get_logger
from .enums import MuteState, PowerState, ZonePower

_LOGGER = get_logger("state")


@dataclass
class DeviceStatus:
    """
    Last known state of a receiver.

    Fields start out unknown and only change when a status burst mentions
    them.
    """
    power: PowerState = PowerState.UNKNOWN
    mute: MuteState = MuteState.UNKNOWN
    master_volume: Optional[int] = None
    input: Optional[str] = None
    main_zone_power: ZonePower = ZonePower.UNKNOWN

    def is_on(self) -> bool:
        return self.power is PowerState.ON

    def is_standby(self) -> bool:
        return self.power is PowerState.STANDBY

    def is_muted(self) -> bool:
        return self.mute is MuteState.ON

    def is_unmuted(self) -> bool:
        return self.mute is MuteState.OFF

    def is_main_zone_on(self) -> bool:
        return self.main_zone_power is ZonePower.ON

    def is_main_zone_off(self) -> bool:
        return self.main_zone_power is ZonePower.OFF

    def copy(self) -> "DeviceStatus":
        """Return an independent snapshot of this status."""
        return dataclasses.replace(self)

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)


def _decode_power(payload: str) -> Optional[PowerState]:
    if payload in (PowerState.ON, PowerState.STANDBY):
        return PowerState(payload)
    return None


def _decode_mute(payload: str) -> Optional[MuteState]:
    if payload in (MuteState.ON, MuteState.OFF):
        return MuteState(payload)
    return None


def _decode_master_volume(payload: str) -> Optional[int]:
    # Half steps arrive as three digits ("455" is 45.5); keep the whole part
    if not payload.isdigit() or len(payload) not in (2, 3):
        return None
    volume = int(payload[:2])
    # 00 and 99 are not settable levels; 99 is how some firmware reports "---"
    if not MIN_MASTER_VOLUME < volume < MAX_MASTER_VOLUME:
        return None
    return volume


def _decode_input(payload: str) -> Optional[str]:
    return payload or None


def _decode_zone_power(payload: str) -> Optional[ZonePower]:
    if payload in (ZonePower.ON, ZonePower.OFF):
        return ZonePower(payload)
    return None


# Class code -> (DeviceStatus field, payload decoder). A decoder returns None
# for payloads it does not understand, which leaves the field untouched.
TOKEN_DECODERS: Dict[str, Tuple[str, Callable[[str], Any]]] = {
    POWER_CLASS: ("power", _decode_power),
    MUTE_CLASS: ("mute", _decode_mute),
    MASTER_VOLUME_CLASS: ("master_volume", _decode_master_volume),
    INPUT_CLASS: ("input", _decode_input),
    MAIN_ZONE_CLASS: ("main_zone_power", _decode_zone_power),
}


class StatusModel:
    """
    Decodes raw status bursts into a DeviceStatus.

    The model owns the status object; callers that need a stable view should
    take a snapshot with ``snapshot()``.
    """

    def __init__(self, status: Optional[DeviceStatus] = None) -> None:
        self.status = status if status is not None else DeviceStatus()

    def decode(self, raw: bytes) -> Set[str]:
        """
        Apply every recognised token in a burst to the status.

        Unknown class codes and malformed payloads are skipped; the protocol
        grows new codes across firmware versions.

        Args:
            raw: Raw burst of CR-separated tokens

        Returns:
            Set[str]: Names of the fields whose value changed
        """
        changed: Set[str] = set()
        for token in raw.split(TERMINATOR):
            if not token:
                continue
            text = token.decode(WIRE_ENCODING, errors="replace")
            field = self._apply_token(text)
            if field is not None:
                changed.add(field)
        return changed

    def _apply_token(self, token: str) -> Optional[str]:
        class_code = token[:CLASS_CODE_LENGTH]
        payload = token[CLASS_CODE_LENGTH:]

        entry = TOKEN_DECODERS.get(class_code)
        if entry is None:
            _LOGGER.debug("Ignoring token with unknown class code: %r", token)
            return None

        field, decoder = entry
        value = decoder(payload)
        if value is None:
            _LOGGER.debug("Ignoring unrecognised %s payload: %r", class_code, payload)
            return None

        old_value = getattr(self.status, field)
        if old_value == value:
            return None

        setattr(self.status, field, value)
        _LOGGER.debug("Property changed: %s = %s (was %s)", field, value, old_value)
        return field

    def snapshot(self) -> DeviceStatus:
        return self.status.copy()

"""
Python library for controlling Denon A/V receivers.

This library speaks the receiver's telnet control protocol: it sends commands,
frames the status bursts the receiver replies with, and keeps the decoded
device state.
"""

from .denon_types import DenonConfig, SessionState
from .session import DenonSession, connect
from .state import DeviceStatus, StatusModel
from .enums import Command, MuteState, PowerState, ZonePower
from .core.trace import FileTraceSink, LoggerTraceSink, TraceSink
from .core.transport import SocketTransport, TransportLink
from .emulator import EmulatedReceiver
from .exceptions import (
    DenonError,
    ConnectTimeoutError,
    DenonConnectionError,
    TransportIOError,
    ClosedSessionError,
    ReplyTimeoutError,
    InvalidArgumentError,
    InvalidCommandError,
)

__version__ = "0.1.0"
__all__ = [
    "DenonSession",
    "DenonConfig",
    "SessionState",
    "DeviceStatus",
    "StatusModel",
    "Command",
    "PowerState",
    "MuteState",
    "ZonePower",
    "TraceSink",
    "FileTraceSink",
    "LoggerTraceSink",
    "TransportLink",
    "SocketTransport",
    "EmulatedReceiver",
    "DenonError",
    "ConnectTimeoutError",
    "DenonConnectionError",
    "TransportIOError",
    "ClosedSessionError",
    "ReplyTimeoutError",
    "InvalidArgumentError",
    "InvalidCommandError",
    "connect",
]

"""
Type definitions for the Denon receiver client.

This module defines the resolved connection options and session states used
throughout the client.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional

from .constants import (
    DEFAULT_ABSORB_TIMEOUT,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_PORT,
    DEFAULT_READ_SIZE,
    DEFAULT_SETTLE_DELAY,
    DEFAULT_WAIT_TIME,
)
from .exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from .core.trace import TraceSink
    from .core.transport import TransportLink

# Receives human-readable connection progress messages
ProgressCallback = Callable[[str], None]


class SessionState(Enum):
    """Lifecycle states of a session."""
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    CLOSED = "closed"


@dataclass
class DenonConfig:
    """
    Resolved options for a Denon receiver session.

    Attributes:
        host: Hostname or IP address of the receiver
        port: Telnet control port
        timeout: Seconds allowed for opening the connection
        settle_delay: Seconds to wait after a command before reading its reply
        wait_time: Seconds of silence after a terminator that end a reply burst
        absorb_timeout: Overall cap in seconds on reading one reply, or None for no cap
        read_size: Maximum bytes requested per read
        log: Optional sink receiving a human-readable transcript
        proxy: Optional pre-built transport used instead of opening a socket
    """
    host: str = ""
    port: int = DEFAULT_PORT
    timeout: float = DEFAULT_CONNECT_TIMEOUT
    settle_delay: float = DEFAULT_SETTLE_DELAY
    wait_time: float = DEFAULT_WAIT_TIME
    absorb_timeout: Optional[float] = DEFAULT_ABSORB_TIMEOUT
    read_size: int = DEFAULT_READ_SIZE
    log: Optional["TraceSink"] = None
    proxy: Optional["TransportLink"] = None

    def __post_init__(self) -> None:
        if not self.host and self.proxy is None:
            raise InvalidArgumentError("A host is required unless a proxy transport is given")
        if not 0 < self.port < 65536:
            raise InvalidArgumentError(f"Invalid port: {self.port}")
        if self.timeout <= 0:
            raise InvalidArgumentError(f"timeout must be positive, got {self.timeout}")
        if self.settle_delay < 0:
            raise InvalidArgumentError(f"settle_delay must not be negative, got {self.settle_delay}")
        if self.wait_time <= 0:
            raise InvalidArgumentError(f"wait_time must be positive, got {self.wait_time}")
        if self.absorb_timeout is not None and self.absorb_timeout <= 0:
            raise InvalidArgumentError(f"absorb_timeout must be positive, got {self.absorb_timeout}")
        if self.read_size <= 0:
            raise InvalidArgumentError(f"read_size must be positive, got {self.read_size}")

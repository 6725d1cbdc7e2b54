"""
Denon Session Module

This module provides the main interface for controlling a Denon receiver. A
session owns one transport and one device status for its lifetime and exposes
idempotent actions that probe the receiver before changing anything.
"""

from typing import Any, Optional

from .constants import MAX_MASTER_VOLUME, MIN_MASTER_VOLUME
from .core.framing import StatusReader
from .core.logging import get_logger
from .core.protocol import CommandChannel
from .core.trace import emit
from .core.transport import SocketTransport, TransportLink
from .denon_types import DenonConfig, ProgressCallback, SessionState
from .enums import QUERY_COMMANDS, Command
from .exceptions import ClosedSessionError, ConnectTimeoutError, DenonConnectionError
from .state import DeviceStatus, StatusModel

_LOGGER = get_logger("session")


class DenonSession:
    """
    Session with a single Denon receiver.

    The session connects on construction (or adopts ``config.proxy``) and
    starts with an all-unknown status; call ``query()`` or any action to
    populate it. Every action blocks until its reply has been absorbed.

    Attributes:
        config: Options the session was created with
        state: Current lifecycle state
    """

    def __init__(self, config: DenonConfig, progress: Optional[ProgressCallback] = None) -> None:
        """
        Open a session.

        Args:
            config: Resolved connection options
            progress: Optional callable receiving connection progress messages

        Raises:
            ConnectTimeoutError: If connecting exceeded ``config.timeout``
            DenonConnectionError: If the connection failed for any other reason
        """
        self.config = config
        self.state = SessionState.DISCONNECTED
        self._progress = progress

        self._link = self._open_link()
        self._model = StatusModel()
        self._reader = StatusReader(
            self._link,
            self._model,
            wait_time=config.wait_time,
            absorb_timeout=config.absorb_timeout,
            read_size=config.read_size,
            sink=config.log,
        )
        self._channel = CommandChannel(
            self._link,
            self._reader,
            settle_delay=config.settle_delay,
            sink=config.log,
        )
        self.state = SessionState.CONNECTED

    def _open_link(self) -> TransportLink:
        if self.config.proxy is not None:
            _LOGGER.debug("Using proxy transport %r", self.config.proxy)
            return self.config.proxy

        host = self.config.host
        self.state = SessionState.CONNECTING
        self._report(f"Trying {host}...\n")
        try:
            link = SocketTransport.connect(host, self.config.port, self.config.timeout)
        except ConnectTimeoutError:
            self.state = SessionState.DISCONNECTED
            emit(self.config.log, f"Timed out while opening a connection to {host}.\n")
            _LOGGER.error("Timed out connecting to %s:%d", host, self.config.port)
            raise
        except DenonConnectionError as e:
            self.state = SessionState.DISCONNECTED
            emit(self.config.log, f"{e}\n")
            _LOGGER.error("Failed to connect to %s:%d: %s", host, self.config.port, e)
            raise

        self._report(f"Connected to {host}.\n")
        _LOGGER.info("Connected to Denon receiver at %s:%d", host, self.config.port)
        return link

    def _report(self, message: str) -> None:
        emit(self.config.log, message)
        if self._progress is not None:
            self._progress(message)

    def close(self) -> None:
        """Disconnect from the receiver. Closing twice is a no-op."""
        if self.state is SessionState.CLOSED:
            return
        self.state = SessionState.CLOSED
        self._link.close()
        _LOGGER.debug("Session closed")

    def is_closed(self) -> bool:
        """Return True if the connection to the receiver is closed."""
        return self.state is SessionState.CLOSED or self._link.is_closed()

    def __enter__(self) -> "DenonSession":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _send(self, command: str) -> None:
        if self.state is not SessionState.CONNECTED:
            raise ClosedSessionError(f"Cannot send {command!r}: session is {self.state.value}")
        self._channel.send(command)

    def query(self) -> None:
        """Refresh every tracked status field."""
        for command in QUERY_COMMANDS:
            self._send(command)

    def status(self) -> DeviceStatus:
        """
        Probe the power state and return a snapshot of the device status.

        Returns:
            DeviceStatus: A copy that later replies will not modify
        """
        self._send(Command.POWER_QUERY)
        return self._model.snapshot()

    def power_on(self) -> None:
        """Turn the receiver on unless it already is."""
        self._send(Command.POWER_QUERY)
        if not self._model.status.is_on():
            self._send(Command.POWER_ON)

    def standby(self) -> None:
        """Put the receiver in standby unless it already is."""
        self._send(Command.POWER_QUERY)
        if not self._model.status.is_standby():
            self._send(Command.POWER_STANDBY)

    def mute(self) -> None:
        """Mute the receiver unless it already is."""
        self._send(Command.MUTE_QUERY)
        if not self._model.status.is_muted():
            self._send(Command.MUTE_ON)

    def unmute(self) -> None:
        """Unmute the receiver if it is muted."""
        self._send(Command.MUTE_QUERY)
        if self._model.status.is_muted():
            self._send(Command.MUTE_OFF)

    def set_master_volume(self, volume: int) -> None:
        """
        Set the master volume.

        Volumes outside the open range (0, 99) are dropped without sending
        anything and without raising.

        Args:
            volume: Target volume
        """
        level = int(volume)
        if MIN_MASTER_VOLUME < level < MAX_MASTER_VOLUME:
            self._send(Command.master_volume(level))
        else:
            _LOGGER.debug("Ignoring out-of-range master volume %d", level)


def connect(host: str, progress: Optional[ProgressCallback] = None, **options: Any) -> DenonSession:
    """
    Open a session with the receiver at host.

    Args:
        host: Hostname or IP address
        progress: Optional callable receiving connection progress messages
        **options: Any other DenonConfig field

    Returns:
        DenonSession: The connected session
    """
    return DenonSession(DenonConfig(host=host, **options), progress=progress)

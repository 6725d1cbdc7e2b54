"""
In-process Denon receiver emulator.

EmulatedReceiver implements the TransportLink contract, so it can be passed as
``DenonConfig(proxy=...)`` in place of a real connection. It answers the
commands this client speaks the way a receiver does: with bursts of
CR-terminated status tokens, optionally split into several chunks.
"""

from collections import deque
from typing import Deque, List, Optional

from .constants import TERMINATOR, WIRE_ENCODING
from .core.logging import get_logger
from .enums import Command
from .exceptions import TransportIOError

_LOGGER = get_logger("emulator")

MAX_VOLUME_TOKEN = "MVMAX 98"


class EmulatedReceiver:
    """
    Simulated receiver behind a TransportLink.

    Attributes:
        power: "ON" or "STANDBY"
        mute: "ON" or "OFF"
        master_volume: Current volume
        input: Current source code
        writes: Every buffer passed to ``write_all``, in order
        commands: Every command decoded from those buffers, in order
    """

    def __init__(
        self,
        power: str = "STANDBY",
        mute: str = "OFF",
        master_volume: int = 40,
        input: str = "CD",
        chunk_size: Optional[int] = None,
    ) -> None:
        """
        Initialize the emulator.

        Args:
            power: Initial power state
            mute: Initial mute state
            master_volume: Initial master volume
            input: Initial input source
            chunk_size: If set, replies are delivered in reads of at most this many bytes
        """
        self.power = power
        self.mute = mute
        self.master_volume = master_volume
        self.input = input
        self.chunk_size = chunk_size
        self.writes: List[bytes] = []
        self.commands: List[str] = []
        self._pending: Deque[bytes] = deque()
        self._partial = b""
        self._closed = False

    def write_all(self, data: bytes) -> None:
        if self._closed:
            raise TransportIOError("Transport is closed")
        self.writes.append(bytes(data))

        buffer = self._partial + data
        *complete, self._partial = buffer.split(TERMINATOR)
        for raw in complete:
            command = raw.decode(WIRE_ENCODING, errors="replace")
            self.commands.append(command)
            reply = self.handle_command(command)
            if reply:
                self._queue(reply)

    def read_some(self, max_bytes: int, timeout: float) -> Optional[bytes]:
        if self._closed:
            raise TransportIOError("Transport is closed")
        if not self._pending:
            return None

        chunk = self._pending.popleft()
        if len(chunk) > max_bytes:
            self._pending.appendleft(chunk[max_bytes:])
            chunk = chunk[:max_bytes]
        return chunk

    def close(self) -> None:
        self._closed = True

    def is_closed(self) -> bool:
        return self._closed

    def handle_command(self, command: str) -> List[str]:
        """
        Apply a command and return the tokens a receiver would reply with.

        Unknown commands get no reply, like on the real device.

        Args:
            command: Command text without terminator

        Returns:
            List[str]: Reply tokens without terminators
        """
        _LOGGER.debug("Emulator received: %s", command)

        if command == Command.POWER_ON:
            self.power = "ON"
        elif command == Command.POWER_STANDBY:
            self.power = "STANDBY"
        elif command == Command.MUTE_ON:
            self.mute = "ON"
        elif command == Command.MUTE_OFF:
            self.mute = "OFF"
        elif command.startswith("MV") and command[2:].isdigit():
            self.master_volume = int(command[2:4])
        elif command.startswith("SI") and command != Command.INPUT_QUERY and len(command) > 2:
            self.input = command[2:]

        if command.startswith("PW"):
            return [f"PW{self.power}", self._zone_token()]
        if command.startswith("ZM"):
            return [self._zone_token()]
        if command.startswith("MU"):
            return [f"MU{self.mute}"]
        if command.startswith("MV"):
            return [f"MV{self.master_volume:02d}", MAX_VOLUME_TOKEN]
        if command.startswith("SI"):
            return [f"SI{self.input}"]
        return []

    def _zone_token(self) -> str:
        return "ZMON" if self.power == "ON" else "ZMOFF"

    def _queue(self, tokens: List[str]) -> None:
        reply = b"".join(token.encode(WIRE_ENCODING) + TERMINATOR for token in tokens)
        if not self.chunk_size:
            self._pending.append(reply)
            return
        for start in range(0, len(reply), self.chunk_size):
            self._pending.append(reply[start:start + self.chunk_size])

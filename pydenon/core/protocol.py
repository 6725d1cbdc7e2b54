"""
Command channel for the Denon control protocol.

Each command is sent as ASCII text followed by a carriage return. After a
short settle delay the reply burst is absorbed, so by the time ``send``
returns the shared device status reflects the receiver's answer.
"""

import time
from typing import Optional

from ..constants import DEFAULT_SETTLE_DELAY, TERMINATOR, WIRE_ENCODING
from ..exceptions import InvalidCommandError
from .framing import StatusReader
from .logging import get_logger
from .trace import TraceSink, emit
from .transport import TransportLink

_LOGGER = get_logger("core.protocol")


def encode_command(command: str) -> bytes:
    """
    Encode a command for the wire.

    Args:
        command: Command text without terminator, e.g. ``PW?``

    Returns:
        bytes: The encoded command including the terminator

    Raises:
        InvalidCommandError: If the command is empty, not ASCII or contains a terminator
    """
    if not command:
        raise InvalidCommandError("Command must not be empty")
    try:
        data = command.encode(WIRE_ENCODING)
    except UnicodeEncodeError as e:
        raise InvalidCommandError(f"Command {command!r} is not ASCII") from e
    if TERMINATOR in data:
        raise InvalidCommandError(f"Command {command!r} contains a terminator")
    return data + TERMINATOR


class CommandChannel:
    """Sends commands and absorbs the replies they provoke."""

    def __init__(
        self,
        link: TransportLink,
        reader: StatusReader,
        settle_delay: float = DEFAULT_SETTLE_DELAY,
        sink: Optional[TraceSink] = None,
    ) -> None:
        self.link = link
        self.reader = reader
        self.settle_delay = settle_delay
        self.sink = sink

    def send(self, command: str) -> None:
        """
        Send a command and absorb the reply.

        Args:
            command: Command text without terminator

        Raises:
            InvalidCommandError: If the command cannot be encoded
            TransportIOError: If writing or reading fails
            ReplyTimeoutError: If the reply does not complete in time
        """
        data = encode_command(command)
        _LOGGER.debug("Sending command: %s", command)
        emit(self.sink, f"sent: {command}\n")

        self.link.write_all(data)
        if self.settle_delay:
            time.sleep(self.settle_delay)
        self.reader.absorb()

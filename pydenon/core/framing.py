"""
Reply framing for the Denon control protocol.

The receiver answers a command with a burst of CR-terminated tokens. There is
no length prefix and no end-of-reply marker, so a burst is considered complete
once the last byte received was a terminator and the link then stays silent
for a full quiet period (``wait_time``). Gaps shorter than the quiet period,
between tokens or inside one, are merged into the same burst.
"""

import time
from typing import Optional

from ..constants import (
    DEFAULT_ABSORB_TIMEOUT,
    DEFAULT_READ_SIZE,
    DEFAULT_WAIT_TIME,
    TERMINATOR,
    TERMINATOR_BYTE,
    WIRE_ENCODING,
)
from ..exceptions import ReplyTimeoutError
from ..state import StatusModel
from .logging import get_logger
from .trace import TraceSink, emit
from .transport import TransportLink

_LOGGER = get_logger("core.framing")


class StatusReader:
    """
    Reads complete reply bursts and feeds them to a StatusModel.

    Attributes:
        link: Transport the bursts are read from
        model: Model that decodes each burst
        wait_time: Quiet period in seconds that ends a burst
        absorb_timeout: Overall cap in seconds per burst, or None for no cap
        read_size: Maximum bytes requested per read
    """

    def __init__(
        self,
        link: TransportLink,
        model: StatusModel,
        wait_time: float = DEFAULT_WAIT_TIME,
        absorb_timeout: Optional[float] = DEFAULT_ABSORB_TIMEOUT,
        read_size: int = DEFAULT_READ_SIZE,
        sink: Optional[TraceSink] = None,
    ) -> None:
        self.link = link
        self.model = model
        self.wait_time = wait_time
        self.absorb_timeout = absorb_timeout
        self.read_size = read_size
        self.sink = sink

    def read_burst(self) -> bytes:
        """
        Read from the link until a complete burst has arrived.

        At least one read is always attempted. A timeout after a chunk that
        did not end in a terminator means a token is still in flight, so the
        reader keeps waiting. No read waits past the absorb deadline, and a
        quiet period cut short by the deadline does not complete the burst.

        Returns:
            bytes: The accumulated burst, possibly empty if the device said nothing

        Raises:
            ReplyTimeoutError: If the burst did not complete within absorb_timeout
            TransportIOError: If reading from the link fails
        """
        buffer = bytearray()
        last_byte = TERMINATOR_BYTE
        deadline = None
        if self.absorb_timeout is not None:
            deadline = time.monotonic() + self.absorb_timeout

        while True:
            wait = self.wait_time
            if deadline is not None:
                wait = max(0.0, min(wait, deadline - time.monotonic()))

            chunk = self.link.read_some(self.read_size, wait)
            if chunk:
                buffer.extend(chunk)
                last_byte = chunk[-1]
            elif last_byte == TERMINATOR_BYTE and wait >= self.wait_time:
                break
            else:
                _LOGGER.debug("Quiet period after unterminated data (%d bytes so far), still waiting",
                              len(buffer))

            if deadline is not None and time.monotonic() >= deadline:
                raise ReplyTimeoutError(
                    f"Reply not complete after {self.absorb_timeout}s ({len(buffer)} bytes received)"
                )

        return bytes(buffer)

    def absorb(self) -> bytes:
        """
        Read one burst, record it and decode it into the model.

        Returns:
            bytes: The raw burst that was decoded
        """
        burst = self.read_burst()
        message = burst.replace(TERMINATOR, b"\n").decode(WIRE_ENCODING, errors="replace")
        _LOGGER.debug("Received burst: %r", burst)
        emit(self.sink, f"received: {message}")

        changed = self.model.decode(burst)
        if changed:
            _LOGGER.debug("Burst updated: %s", ", ".join(sorted(changed)))
        return burst

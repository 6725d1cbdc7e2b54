"""
Byte-stream transport for the Denon client.

The client talks to the receiver through a TransportLink: anything that can
write all of a byte string, read whatever is available within a timeout, and
be closed. SocketTransport is the TCP implementation; tests and proxies can
supply their own.
"""

import select
import socket
import time
from typing import Optional, Protocol, runtime_checkable

from ..exceptions import ConnectTimeoutError, DenonConnectionError, TransportIOError
from .logging import get_logger

_LOGGER = get_logger("core.transport")


@runtime_checkable
class TransportLink(Protocol):
    """Contract for a raw bidirectional byte stream."""

    def write_all(self, data: bytes) -> None:
        """Deliver every byte of data or raise TransportIOError."""
        ...

    def read_some(self, max_bytes: int, timeout: float) -> Optional[bytes]:
        """Return available bytes, or None if nothing arrived within timeout."""
        ...

    def close(self) -> None:
        ...

    def is_closed(self) -> bool:
        ...


class SocketTransport:
    """
    TransportLink over a stream socket.

    The socket is kept in non-blocking mode; every wait goes through
    ``select`` so reads are bounded by the caller's timeout and partial
    writes are resumed once the socket is writable again.
    """

    def __init__(self, sock: socket.socket) -> None:
        """
        Wrap an already connected socket.

        Args:
            sock: Connected stream socket
        """
        self._sock = sock
        self._closed = False
        self._sock.setblocking(False)

    @classmethod
    def connect(cls, host: str, port: int, timeout: float) -> "SocketTransport":
        """
        Open a TCP connection within a bounded time.

        The host is resolved first and its addresses are tried in order. All
        attempts share one deadline, so a host with several addresses still
        gives up after timeout seconds in total.

        Args:
            host: Hostname or IP address
            port: TCP port
            timeout: Seconds allowed for the whole connection attempt

        Returns:
            SocketTransport: Transport wrapping the connected socket

        Raises:
            ConnectTimeoutError: If the attempt exceeded timeout
            DenonConnectionError: If the connection failed for any other reason
        """
        _LOGGER.debug("Connecting to %s:%d (timeout %.2fs)", host, port, timeout)
        deadline = time.monotonic() + timeout
        try:
            addresses = socket.getaddrinfo(host, port, type=socket.SOCK_STREAM)
        except OSError as e:
            raise DenonConnectionError(f"Failed to connect to {host}:{port}: {e}") from e

        last_error: Optional[OSError] = None
        for family, socktype, proto, _, address in addresses:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                break
            sock = socket.socket(family, socktype, proto)
            sock.settimeout(remaining)
            try:
                sock.connect(address)
            except socket.timeout as e:
                sock.close()
                raise ConnectTimeoutError(f"Timed out connecting to {host}:{port}") from e
            except OSError as e:
                sock.close()
                _LOGGER.debug("Connecting to %s failed: %s", address, e)
                last_error = e
                continue

            sock.setsockopt(socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)
            _LOGGER.debug("Connected to %s:%d via %s", host, port, address)
            return cls(sock)
        else:
            raise DenonConnectionError(f"Failed to connect to {host}:{port}: {last_error}") from last_error

        raise ConnectTimeoutError(f"Timed out connecting to {host}:{port}") from last_error

    def write_all(self, data: bytes) -> None:
        """
        Write every byte of data, resuming after partial sends.

        Args:
            data: Bytes to send

        Raises:
            TransportIOError: If the link is closed or the send fails
        """
        self._check_open()
        remaining = memoryview(data)
        while remaining:
            try:
                select.select([], [self._sock], [])
                sent = self._sock.send(remaining)
            except BlockingIOError:
                continue
            except (OSError, ValueError) as e:
                raise TransportIOError(f"Failed to send data: {e}") from e
            remaining = remaining[sent:]

        _LOGGER.debug("Sent %d bytes", len(data))

    def read_some(self, max_bytes: int, timeout: float) -> Optional[bytes]:
        """
        Read whatever is available, waiting at most timeout seconds.

        Args:
            max_bytes: Maximum number of bytes to return
            timeout: Seconds to wait for the socket to become readable

        Returns:
            Received bytes, or None if nothing arrived in time

        Raises:
            TransportIOError: If the link is closed, the peer closed it, or the read fails
        """
        self._check_open()
        try:
            readable, _, _ = select.select([self._sock], [], [], timeout)
            if not readable:
                return None
            data = self._sock.recv(max_bytes)
        except BlockingIOError:
            return None
        except (OSError, ValueError) as e:
            raise TransportIOError(f"Failed to receive data: {e}") from e

        if not data:
            raise TransportIOError("Connection closed by peer")

        _LOGGER.debug("Received %d bytes", len(data))
        return data

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            self._sock.close()
        except OSError as e:
            _LOGGER.error("Error closing socket: %s", e)

    def is_closed(self) -> bool:
        return self._closed

    def _check_open(self) -> None:
        if self._closed:
            raise TransportIOError("Transport is closed")

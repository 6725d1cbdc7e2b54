"""
Exceptions for the Denon receiver client.

This module defines custom exceptions used throughout the Denon client.
"""


class DenonError(Exception):
    """Base exception for all Denon-related errors."""
    pass


class ConnectTimeoutError(DenonError, TimeoutError):
    """Exception raised when opening a connection exceeds its timeout."""
    pass


class DenonConnectionError(DenonError, ConnectionError):
    """Exception raised when a connection cannot be opened (refused, unreachable, DNS)."""
    pass


class TransportIOError(DenonError, OSError):
    """Exception raised when reading from or writing to an open link fails."""
    pass


class ClosedSessionError(DenonError):
    """Exception raised when an action is attempted on a closed session."""
    pass


class ReplyTimeoutError(DenonError, TimeoutError):
    """Exception raised when a reply burst does not complete within the absorb timeout."""
    pass


class InvalidArgumentError(DenonError):
    """Exception raised when an invalid configuration value is supplied."""
    pass


class InvalidCommandError(DenonError):
    """Exception raised when a command cannot be encoded for the wire."""
    pass

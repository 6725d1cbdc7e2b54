"""
Trace sinks for human-readable session transcripts.

A session writes connection messages, sent commands and received bursts to an
optional sink. A sink only needs a ``write(text)`` method; nothing is returned
and nothing is read back.
"""

import logging
from typing import Optional, Protocol, TextIO, runtime_checkable

from .logging import get_logger

_LOGGER = get_logger("core.trace")


@runtime_checkable
class TraceSink(Protocol):
    """Write-only text sink."""

    def write(self, text: str) -> None:
        ...


class FileTraceSink:
    """
    Append-only file sink.

    Every write is flushed immediately so the transcript is complete even if
    the process dies mid-command.
    """

    def __init__(self, path: str, encoding: str = "utf-8") -> None:
        self.path = path
        self._file: Optional[TextIO] = open(path, "a", encoding=encoding)

    def write(self, text: str) -> None:
        if self._file is None:
            return
        self._file.write(text)
        self._file.flush()

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None


class LoggerTraceSink:
    """Forward transcript lines to a logger, one record per line."""

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.DEBUG) -> None:
        self.logger = logger or get_logger("trace")
        self.level = level

    def write(self, text: str) -> None:
        for line in text.splitlines():
            if line:
                self.logger.log(self.level, "%s", line)


def emit(sink: Optional[TraceSink], text: str) -> None:
    """
    Write text to a sink if one is configured.

    A failing sink is reported on the package logger and otherwise ignored;
    a broken transcript must not abort a receiver command.
    """
    if sink is None:
        return
    try:
        sink.write(text)
    except OSError as e:
        _LOGGER.warning("Failed to write to trace sink: %s", e)

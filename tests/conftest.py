"""Pytest configuration and common fixtures for pydenon tests."""

import time
from typing import Iterable, List, Optional

import pytest

from pydenon.denon_types import DenonConfig
from pydenon.emulator import EmulatedReceiver
from pydenon.session import DenonSession


class ScriptedLink:
    """
    TransportLink double that replays a fixed script of reads.

    Each script entry is either bytes (returned by one read) or None (one read
    that times out). Once the script is exhausted every read times out.
    """

    def __init__(self, script: Iterable[Optional[bytes]] = (), sleep_on_timeout: bool = False) -> None:
        self.script: List[Optional[bytes]] = list(script)
        self.sleep_on_timeout = sleep_on_timeout
        self.writes: List[bytes] = []
        self.reads = 0
        self.closed = False

    def write_all(self, data: bytes) -> None:
        self.writes.append(bytes(data))

    def read_some(self, max_bytes: int, timeout: float) -> Optional[bytes]:
        self.reads += 1
        chunk = self.script.pop(0) if self.script else None
        if chunk is None and self.sleep_on_timeout:
            time.sleep(timeout)
        return chunk

    def close(self) -> None:
        self.closed = True

    def is_closed(self) -> bool:
        return self.closed


class RecordingSink:
    """Trace sink that keeps everything written to it."""

    def __init__(self) -> None:
        self.lines: List[str] = []

    def write(self, text: str) -> None:
        self.lines.append(text)

    @property
    def text(self) -> str:
        return "".join(self.lines)


@pytest.fixture
def receiver():
    """Emulated receiver in standby, unmuted, volume 40 on CD."""
    return EmulatedReceiver()


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def fast_config(receiver, sink):
    """Config using the emulator with delays shortened for tests."""
    return DenonConfig(
        host="192.168.1.50",
        settle_delay=0,
        wait_time=0.01,
        absorb_timeout=1.0,
        log=sink,
        proxy=receiver,
    )


@pytest.fixture
def session(fast_config):
    session = DenonSession(fast_config)
    yield session
    session.close()


@pytest.fixture
def scripted_link():
    """Factory for ScriptedLink doubles."""
    return ScriptedLink

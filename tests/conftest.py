"""
Pytest configuration and fixtures for hours-hook tests.
"""

from pathlib import Path

import pytest
from unittest.mock import MagicMock

from hours_hook.config import HookConfig


class FakeClock:
    """Manually advanced time source."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def hook_config(tmp_path):
    """HookConfig pointing at a temporary log file."""
    return HookConfig(
        interval=2.0,
        log_file=Path(tmp_path) / "state" / "hours.log.json",
        command="record-hours",
    )


@pytest.fixture
def mock_emitter():
    """Create a mock ActivityEmitter that satisfies the interface contract."""
    mock = MagicMock()
    mock.emit.return_value = True
    mock.locate.return_value = "/usr/bin/record-hours"
    return mock


@pytest.fixture
def mock_listener_factory():
    """Factory returning a mock InputListener that starts successfully."""
    listener = MagicMock()
    listener.start.return_value = True
    factory = MagicMock(return_value=listener)
    factory.listener = listener
    return factory

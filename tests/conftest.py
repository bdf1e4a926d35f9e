"""Shared fixtures for the archiver test suite"""

import pytest

from archiver.core.logging import logging_manager


class FakeStream:
    """Stand-in for sys.stderr with a fixed terminal answer"""

    def __init__(self, tty: bool):
        self.tty = tty

    def isatty(self) -> bool:
        return self.tty

    def write(self, text: str) -> int:
        return len(text)

    def flush(self) -> None:
        pass


@pytest.fixture
def tty():
    """An interactive error stream"""
    return FakeStream(tty=True)


@pytest.fixture
def pipe():
    """A non-interactive error stream"""
    return FakeStream(tty=False)


@pytest.fixture
def clean_env():
    """Empty environment"""
    return {}


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach handlers installed by a test"""
    yield
    logging_manager.close()

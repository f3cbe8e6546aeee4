"""Pytest configuration and fixtures."""

import io

import pytest

from consoletools.ui.console import ConsoleIO


def make_console(input_text: str = "") -> ConsoleIO:
    """ConsoleIO over StringIO buffers, with input_text queued on stdin."""
    return ConsoleIO(io.StringIO(), io.StringIO(), io.StringIO(input_text))


class FakeClock:
    """Monotonic clock that only moves when sleep() is called."""

    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float):
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def console():
    return make_console()


@pytest.fixture
def clock():
    return FakeClock()

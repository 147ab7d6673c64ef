"""Unit tests configuration file."""

import pytest

from icetray.generator import Signal


def pytest_configure(config):
    """Disable verbose output when running tests."""
    terminal = config.pluginmanager.getplugin("terminal")
    if terminal:
        terminal.TerminalReporter.showfspath = False


@pytest.fixture
def rpi1_document():
    return {
        "name": "RPi1",
        "signals": [
            {"name": "photoresistor1", "RW": "R", "scanRate": "1 second"},
            {"name": "led1", "RW": "W"},
        ],
    }


@pytest.fixture
def make_signals():
    def make(count):
        return [
            Signal.read(f"sig{i}") if i % 2 == 0 else Signal.write(f"sig{i}") for i in range(count)
        ]

    return make

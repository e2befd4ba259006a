# Shared fixtures for the charting engine tests.

import pytest

from gui.services.event_bus import EventBus


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def recorder():
    """Collects ``(name, args)`` tuples from callbacks passed as ``recorder.cb(name)``."""

    class Recorder:
        def __init__(self):
            self.calls = []

        def cb(self, name):
            def _record(*args):
                self.calls.append((name, args))

            return _record

        def names(self):
            return [name for name, _ in self.calls]

    return Recorder()


@pytest.fixture
def three_series():
    return [
        {"name": "North", "data": [{"x": "Q1", "y": 1}, {"x": "Q2", "y": 2}, {"x": "Q3", "y": 3}]},
        {"name": "South", "data": [{"x": "Q1", "y": 4}, {"x": "Q2", "y": 5}, {"x": "Q3", "y": 6}]},
        {"data": [{"x": "Q1", "y": 2}, {"x": "Q2", "y": 2}, {"x": "Q3", "y": 2}]},
    ]

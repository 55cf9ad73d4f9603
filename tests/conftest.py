import pytest

from pattern_gallery.config.schemas import LoggingConfig
from pattern_gallery.infrastructure.di import reset_container
from pattern_gallery.infrastructure.logging import setup_logging
from pattern_gallery.infrastructure.patterns import SingletonRegistry


class FakeClock:
    """Monotonic clock that only moves when ``sleep`` is called."""

    def __init__(self, start: float = 100.0):
        self.now = start
        self.sleeps = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class RecordingObserver:
    """Observer double that records every event it receives."""

    def __init__(self, observer_id: int):
        self.observer_id = observer_id
        self.received = []

    def on_notify(self, event):
        self.received.append(event)


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def make_clock():
    return FakeClock


@pytest.fixture
def make_observer():
    return RecordingObserver


@pytest.fixture(autouse=True)
def reset_singletons():
    """Isolate process-wide singleton state between tests."""
    SingletonRegistry.get_instance().reset()
    reset_container()
    yield
    SingletonRegistry.get_instance().reset()
    reset_container()


@pytest.fixture(autouse=True)
def restore_logging():
    """Point log handlers back at the real streams after each test."""
    yield
    setup_logging(LoggingConfig())

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from pattern_gallery.application.examples import singleton
from pattern_gallery.infrastructure.patterns import Once


@pytest.fixture
def fresh_singleton(monkeypatch):
    """Fresh one-time state and a constructor that counts its calls."""
    created = []
    lock = threading.Lock()

    class CountingSingleton(singleton.Singleton):
        def __init__(self):
            with lock:
                created.append(self)
            super().__init__()

    monkeypatch.setattr(singleton, "_once", Once())
    monkeypatch.setattr(singleton, "_instance", None)
    monkeypatch.setattr(singleton, "Singleton", CountingSingleton)
    return created


def test_concurrent_callers_share_instance(fresh_singleton):
    with ThreadPoolExecutor(max_workers=50) as pool:
        instances = list(pool.map(lambda _: singleton.get_instance(), range(500)))

    assert all(instance is instances[0] for instance in instances)
    assert len(fresh_singleton) == 1


def test_instance_defaults(fresh_singleton):
    instance = singleton.get_instance()

    assert instance.data == 0
    assert singleton.get_instance() is instance


def test_run_output(fresh_singleton, capsys):
    singleton.run()

    assert capsys.readouterr().out.splitlines() == [
        f"{singleton.CALLERS} concurrent callers share one instance: True",
        "Instance data: 0",
        "Injected instance is the shared instance: True",
    ]
    assert len(fresh_singleton) == 1

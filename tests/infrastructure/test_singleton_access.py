import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from pattern_gallery.infrastructure.di import get_container
from pattern_gallery.infrastructure.patterns import Once, SingletonRegistry, get_singleton


class CountingService:
    """Counts constructor calls across all instances."""

    created = 0
    lock = threading.Lock()

    def __init__(self, value: int = 0):
        with CountingService.lock:
            CountingService.created += 1
        self.value = value


@pytest.fixture(autouse=True)
def reset_counter():
    CountingService.created = 0
    yield


class TestOnce:
    """Test cases for Once."""

    def test_runs_function_once(self):
        once = Once()
        calls = []

        once.do(lambda: calls.append(1))
        once.do(lambda: calls.append(2))

        assert calls == [1]
        assert once.done is True

    def test_concurrent_callers_run_function_once(self):
        once = Once()
        calls = []
        barrier = threading.Barrier(20)

        def call():
            barrier.wait()
            once.do(lambda: calls.append(threading.get_ident()))

        threads = [threading.Thread(target=call) for _ in range(20)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(calls) == 1

    def test_failed_function_is_not_retried(self):
        once = Once()
        calls = []

        def boom():
            calls.append(1)
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            once.do(boom)
        once.do(boom)

        assert calls == [1]
        assert once.done is True


class TestSingletonRegistry:
    """Test cases for SingletonRegistry."""

    def test_registry_is_itself_a_singleton(self):
        assert SingletonRegistry.get_instance() is SingletonRegistry.get_instance()

    def test_same_instance_returned(self):
        registry = SingletonRegistry.get_instance()

        first = registry.get(CountingService, 5)
        second = registry.get(CountingService, 99)

        assert first is second
        assert first.value == 5
        assert CountingService.created == 1

    def test_concurrent_requests_construct_once(self):
        registry = SingletonRegistry.get_instance()

        with ThreadPoolExecutor(max_workers=32) as pool:
            instances = list(pool.map(lambda _: registry.get(CountingService), range(200)))

        assert all(instance is instances[0] for instance in instances)
        assert CountingService.created == 1

    def test_reset_forgets_instance(self):
        registry = SingletonRegistry.get_instance()
        first = registry.get(CountingService)

        registry.reset(CountingService)

        assert registry.has(CountingService) is False
        assert registry.get(CountingService) is not first


class TestGetSingleton:
    """Test cases for get_singleton."""

    def test_falls_back_to_registry(self):
        instance = get_singleton(CountingService, 3)

        assert instance is get_singleton(CountingService)
        assert SingletonRegistry.get_instance().has(CountingService)
        assert instance.value == 3

    def test_container_registration_wins(self):
        injected = CountingService(42)
        get_container().register_instance(CountingService, injected)

        assert get_singleton(CountingService) is injected
        assert SingletonRegistry.get_instance().has(CountingService) is False

"""Singleton example: one lazily built instance shared by concurrent callers."""
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from pattern_gallery.infrastructure.di import DIContainer
from pattern_gallery.infrastructure.patterns import Once

CALLERS = 10


class Singleton:
    """The shared value."""

    def __init__(self, data: int = 0):
        self.data = data


_once = Once()
_instance: Optional[Singleton] = None


def _create() -> None:
    global _instance
    _instance = Singleton()


def get_instance() -> Singleton:
    """Return the process-wide instance, constructing it on the first call."""
    _once.do(_create)
    return _instance


def run() -> None:
    with ThreadPoolExecutor(max_workers=CALLERS) as pool:
        instances = list(pool.map(lambda _: get_instance(), range(CALLERS)))

    shared = all(instance is instances[0] for instance in instances)
    print(f"{CALLERS} concurrent callers share one instance: {shared}")
    print(f"Instance data: {instances[0].data}")

    # Consumers can also be handed the instance instead of looking it up
    container = DIContainer()
    container.register_instance(Singleton, get_instance())
    injected = container.get(Singleton)
    print(f"Injected instance is the shared instance: {injected is instances[0]}")

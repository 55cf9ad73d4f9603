"""Standard singleton access functions."""

from typing import Any, Type, TypeVar

from pattern_gallery.infrastructure.logging.logger import get_logger
from pattern_gallery.infrastructure.patterns.singleton_registry import SingletonRegistry

T = TypeVar("T")


def get_singleton(singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
    """
    Standard way to get singleton instances.

    An instance registered with the DI container wins, which lets callers
    inject an explicitly constructed value. Otherwise the SingletonRegistry
    constructs the instance once and reuses it.

    Args:
        singleton_class: The class to get an instance of
        *args: Arguments to pass to the constructor if creating a new instance
        **kwargs: Keyword arguments to pass to the constructor if creating a new instance

    Returns:
        The singleton instance
    """
    from pattern_gallery.infrastructure.di.container import get_container

    container = get_container()
    if container.has(singleton_class):
        return container.get(singleton_class)

    get_logger(__name__).debug(
        "DI container has no registration, falling back to registry",
        singleton=singleton_class.__name__,
    )
    registry = SingletonRegistry.get_instance()
    return registry.get(singleton_class, *args, **kwargs)

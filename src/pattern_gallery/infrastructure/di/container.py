"""
Dependency Injection Container implementation.

A small container for handing explicitly constructed instances to consumers
instead of reaching for global state.
"""
import threading
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar

from pattern_gallery.infrastructure.exceptions import (
    CircularDependencyError,
    FactoryError,
    UnregisteredDependencyError,
)
from pattern_gallery.infrastructure.logging.logger import get_logger
from pattern_gallery.infrastructure.patterns.once import Once

T = TypeVar('T')
logger = get_logger(__name__)


class DIContainer:
    """
    Dependency injection container.

    Registrations:
    - instance: a pre-built object returned as is
    - singleton: a class or factory resolved once, on first ``get``
    - factory: called on every ``get``

    Factories receive the container so they can resolve their own
    dependencies.
    """

    def __init__(self):
        self._instances: Dict[Type, Any] = {}
        self._singletons: Dict[Type, Callable[..., Any]] = {}
        self._factories: Dict[Type, Callable[..., Any]] = {}
        self._lock = threading.RLock()
        self._resolving = threading.local()

    def is_registered(self, cls: Type) -> bool:
        """
        Check if a type is registered with the container.

        Args:
            cls: Class type to check

        Returns:
            True if the type is registered, False otherwise
        """
        return (
            cls in self._instances or
            cls in self._singletons or
            cls in self._factories
        )

    def has(self, service_type: Type) -> bool:
        """Alias of ``is_registered``."""
        return self.is_registered(service_type)

    def register_instance(self, cls: Type[T], instance: T) -> None:
        """
        Register a specific instance for a type.

        Args:
            cls: Class type to register
            instance: Instance to use
        """
        with self._lock:
            self._instances[cls] = instance
        logger.debug("Registered instance", service=cls.__name__)

    def register_singleton(self, cls: Type[T], factory: Optional[Callable[["DIContainer"], T]] = None) -> None:
        """
        Register a type resolved once and then reused.

        Args:
            cls: Class type to register
            factory: Optional factory; without one the class is called with no arguments
        """
        with self._lock:
            self._singletons[cls] = factory if factory is not None else (lambda _container: cls())
        logger.debug("Registered singleton", service=cls.__name__)

    def register_factory(self, cls: Type[T], factory: Callable[["DIContainer"], T]) -> None:
        """
        Register a factory function for a type.

        Args:
            cls: Class type to register
            factory: Factory function to create instances
        """
        with self._lock:
            self._factories[cls] = factory
        logger.debug("Registered factory", service=cls.__name__)

    def get(self, cls: Type[T]) -> T:
        """
        Get an instance of the specified type.

        Raises:
            UnregisteredDependencyError: If the type was never registered
            CircularDependencyError: If a factory depends on itself
            FactoryError: If a factory raises
        """
        if cls in self._instances:
            return self._instances[cls]

        if cls in self._singletons:
            with self._lock:
                if cls in self._instances:
                    return self._instances[cls]
                instance = self._create(cls, self._singletons[cls])
                self._instances[cls] = instance
                logger.debug("Resolved singleton", service=cls.__name__)
                return instance

        if cls in self._factories:
            return self._create(cls, self._factories[cls])

        raise UnregisteredDependencyError(cls)

    def _create(self, cls: Type[T], factory: Callable[["DIContainer"], T]) -> T:
        stack: List[Type] = getattr(self._resolving, "stack", None)
        if stack is None:
            stack = []
            self._resolving.stack = stack
        if cls in stack:
            raise CircularDependencyError(stack + [cls])

        stack.append(cls)
        try:
            return factory(self)
        except (CircularDependencyError, UnregisteredDependencyError):
            raise
        except Exception as e:
            logger.error("Factory failed", service=cls.__name__, error=str(e))
            raise FactoryError(cls, f"Factory function failed: {e}", e)
        finally:
            stack.pop()

    def reset(self) -> None:
        """Remove every registration."""
        with self._lock:
            self._instances.clear()
            self._singletons.clear()
            self._factories.clear()


_container: Optional[DIContainer] = None
_container_once = Once()


def _create_container() -> None:
    global _container
    _container = DIContainer()


def get_container() -> DIContainer:
    """Get the process-wide container, creating it on first use."""
    _container_once.do(_create_container)
    return _container


def reset_container() -> None:
    """Clear every registration in the process-wide container."""
    get_container().reset()

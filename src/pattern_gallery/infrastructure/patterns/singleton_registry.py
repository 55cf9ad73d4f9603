"""Process-wide registry of singleton instances."""
import threading
from typing import Any, Dict, Optional, Type, TypeVar

from pattern_gallery.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class SingletonRegistry:
    """
    Holds at most one instance per class.

    The registry is itself a singleton, created on first ``get_instance``.
    Construction of each registered class happens under a lock, so the
    constructor runs exactly once even when many threads race on the first
    request.
    """

    _instance: Optional["SingletonRegistry"] = None
    _instance_lock = threading.Lock()

    def __init__(self):
        self._instances: Dict[Type, Any] = {}
        self._lock = threading.RLock()
        self._logger = get_logger(__name__)

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        """Get the registry, creating it on first use."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Get the instance of ``singleton_class``, constructing it if needed.

        Arguments are only used by the call that actually constructs the
        instance; later calls get the existing one regardless of arguments.
        """
        instance = self._instances.get(singleton_class)
        if instance is not None:
            return instance

        with self._lock:
            instance = self._instances.get(singleton_class)
            if instance is None:
                instance = singleton_class(*args, **kwargs)
                self._instances[singleton_class] = instance
                self._logger.debug("Created singleton", singleton=singleton_class.__name__)
        return instance

    def has(self, singleton_class: Type) -> bool:
        """Check whether an instance of ``singleton_class`` exists."""
        return singleton_class in self._instances

    def reset(self, singleton_class: Optional[Type] = None) -> None:
        """Forget one instance, or all of them."""
        with self._lock:
            if singleton_class is None:
                self._instances.clear()
            else:
                self._instances.pop(singleton_class, None)

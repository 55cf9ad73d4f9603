"""Name-based lookup of operator strategies."""
import threading
from typing import Callable, Dict, List

from pattern_gallery.application.strategy.operators import Addition, Multiplication, Operator
from pattern_gallery.domain.core.exceptions import OperatorNotFoundError
from pattern_gallery.infrastructure.logging.logger import get_logger


class OperatorRegistry:
    """
    Maps names to operator factories.

    A fresh operator is created on every ``create`` call.
    """

    def __init__(self):
        self._factories: Dict[str, Callable[[], Operator]] = {}
        self._lock = threading.Lock()
        self._logger = get_logger(__name__)

    def register(self, name: str, factory: Callable[[], Operator]) -> None:
        """Register an operator factory under ``name``, replacing any previous one."""
        with self._lock:
            self._factories[name] = factory
        self._logger.debug("Registered operator", name=name)

    def create(self, name: str) -> Operator:
        """
        Create the operator registered under ``name``.

        Raises:
            OperatorNotFoundError: If nothing is registered under ``name``
        """
        factory = self._factories.get(name)
        if factory is None:
            raise OperatorNotFoundError(name)
        return factory()

    def names(self) -> List[str]:
        """Registered names, sorted."""
        return sorted(self._factories)

    def __contains__(self, name: str) -> bool:
        return name in self._factories


def default_registry() -> OperatorRegistry:
    """Registry preloaded with ``add`` and ``multiply``."""
    registry = OperatorRegistry()
    registry.register("add", Addition)
    registry.register("multiply", Multiplication)
    return registry

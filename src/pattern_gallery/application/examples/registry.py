"""Name-based dispatch to example entry points."""
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from pattern_gallery.domain.core.exceptions import ExampleNotFoundError


@dataclass(frozen=True)
class Example:
    """A runnable example."""
    name: str
    description: str
    run: Callable[..., Any]


class ExampleRegistry:
    """Holds examples by name."""

    def __init__(self):
        self._examples: Dict[str, Example] = {}

    def register(self, example: Example) -> None:
        self._examples[example.name] = example

    def get(self, name: str) -> Example:
        """
        Look up an example.

        Raises:
            ExampleNotFoundError: If no example has that name
        """
        try:
            return self._examples[name]
        except KeyError:
            raise ExampleNotFoundError(name, self.names())

    def names(self) -> List[str]:
        return sorted(self._examples)


def default_examples() -> ExampleRegistry:
    """Registry with every bundled example."""
    from pattern_gallery.application.examples import (
        adapter,
        builder,
        car_builder,
        observer,
        singleton,
        strategy,
    )

    registry = ExampleRegistry()
    registry.register(Example("adapter", "Legacy shapes drawn through a common port", adapter.run))
    registry.register(Example("builder", "Bank account built through chained calls", builder.run))
    registry.register(Example("car-builder", "Car configured and built behind an interface", car_builder.run))
    registry.register(Example("observer", "Ticking notifier broadcasting to observers", observer.run))
    registry.register(Example("strategy", "One operation, interchangeable operators", strategy.run))
    registry.register(Example("singleton", "Lazily built instance shared by concurrent callers", singleton.run))
    return registry

"""Strategy pattern: interchangeable arithmetic operators."""

from pattern_gallery.application.strategy.operation import Operation
from pattern_gallery.application.strategy.operators import Addition, Multiplication, Operator
from pattern_gallery.application.strategy.registry import OperatorRegistry, default_registry

__all__ = [
    "Operator",
    "Addition",
    "Multiplication",
    "Operation",
    "OperatorRegistry",
    "default_registry",
]

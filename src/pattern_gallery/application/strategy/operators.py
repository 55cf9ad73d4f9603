"""Arithmetic operator strategies."""

from abc import ABC, abstractmethod


class Operator(ABC):
    """An algorithm combining two integers."""

    @abstractmethod
    def apply(self, lval: int, rval: int) -> int:
        """Combine ``lval`` and ``rval``."""


class Addition(Operator):
    """``lval + rval``"""

    def apply(self, lval: int, rval: int) -> int:
        return lval + rval


class Multiplication(Operator):
    """``lval * rval``"""

    def apply(self, lval: int, rval: int) -> int:
        return lval * rval

"""Drawing port expected by shape consumers."""

from abc import ABC, abstractmethod


class Shape(ABC):
    """Anything that can be drawn from four coordinates."""

    @abstractmethod
    def draw(self, x: int, y: int, z: int, j: int) -> None:
        """Draw the shape."""

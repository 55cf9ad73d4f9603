"""Legacy shapes with their own native drawing operations.

Neither class implements ``Shape``; callers reach them through the adapters
in ``pattern_gallery.infrastructure.adapters``.
"""


class Rectangle:
    """Rectangle drawn from two opposite corners."""

    def render(self, x: int, y: int, z: int, j: int) -> None:
        print(f"Rectangle with corners ({x}, {y}) and ({z}, {j})")


class Line:
    """Straight line between two points."""

    def trace(self, x: int, y: int, z: int, j: int) -> None:
        print(f"Line from ({x}, {y}) to ({z}, {j})")

"""Shape adapters."""

from pattern_gallery.domain.shapes import Line, Rectangle, Shape


class RectangleAdapter(Shape):
    """Draws a legacy ``Rectangle`` through ``Shape.draw``."""

    def __init__(self, rectangle: Rectangle):
        self._rectangle = rectangle

    def draw(self, x: int, y: int, z: int, j: int) -> None:
        self._rectangle.render(x, y, z, j)


class LineAdapter(Shape):
    """Draws a legacy ``Line`` through ``Shape.draw``."""

    def __init__(self, line: Line):
        self._line = line

    def draw(self, x: int, y: int, z: int, j: int) -> None:
        self._line.trace(x, y, z, j)

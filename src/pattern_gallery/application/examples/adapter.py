"""Adapter example: legacy shapes drawn through a common port."""
from typing import List

from pattern_gallery.domain.shapes import Line, Rectangle, Shape
from pattern_gallery.infrastructure.adapters import LineAdapter, RectangleAdapter


def run() -> None:
    shapes: List[Shape] = [
        RectangleAdapter(Rectangle()),
        LineAdapter(Line()),
    ]

    for shape in shapes:
        shape.draw(10, 20, 30, 40)

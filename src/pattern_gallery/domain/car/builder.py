"""Fluent builder for ``Car``."""
from typing import Optional

from pattern_gallery.domain.car.car import Car, Color
from pattern_gallery.domain.core.exceptions import ValidationError


class CarBuilder:
    """Chained configuration of speed and colour, then ``build``."""

    def __init__(self):
        self._speed_option = 0
        self._color: Optional[Color] = None

    def top_speed(self, speed: int) -> "CarBuilder":
        self._speed_option = speed
        return self

    def paint(self, color: Color) -> "CarBuilder":
        """
        Set the paint colour.

        Raises:
            ValidationError: If ``color`` is not a known ``Color`` value
        """
        try:
            self._color = Color(color)
        except ValueError:
            raise ValidationError(
                f"Unknown color {color!r}", details=[c.value for c in Color]
            )
        return self

    def build(self) -> Car:
        return Car(top_speed=self._speed_option, color=self._color)


def new_car_builder() -> CarBuilder:
    """Create an empty car builder."""
    return CarBuilder()

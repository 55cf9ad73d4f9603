"""Car record and its builder."""

from pattern_gallery.domain.car.builder import CarBuilder, new_car_builder
from pattern_gallery.domain.car.car import Car, Color

__all__ = ["Car", "Color", "CarBuilder", "new_car_builder"]

"""Builder example: a car configured and built behind an interface."""

from pattern_gallery.domain.car import Color, new_car_builder


def run() -> None:
    car = new_car_builder().top_speed(50).paint(Color.BLUE).build()

    print(car.drive())
    print(car.stop())

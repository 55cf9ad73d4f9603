import pytest

from pattern_gallery.domain.car import Car, CarBuilder, Color, new_car_builder
from pattern_gallery.domain.core.exceptions import DomainException, ValidationError


def test_build_blue_car():
    car = new_car_builder().top_speed(50).paint(Color.BLUE).build()

    assert isinstance(car, Car)
    assert car.drive() == "Driving at speed: 50"
    assert car.stop() == "Stopping a blue car"


def test_setters_return_builder():
    builder = CarBuilder()

    assert builder.top_speed(10) is builder
    assert builder.paint(Color.RED) is builder


@pytest.mark.parametrize("calls", [
    [("top_speed", 10), ("paint", Color.RED), ("top_speed", 120), ("paint", Color.BLUE)],
    [("paint", Color.RED), ("top_speed", 10), ("paint", Color.BLUE), ("top_speed", 120)],
    [("paint", Color.RED), ("paint", Color.BLUE), ("top_speed", 10), ("top_speed", 120)],
])
def test_last_write_wins(calls):
    builder = new_car_builder()
    for name, value in calls:
        getattr(builder, name)(value)

    car = builder.build()

    assert car.top_speed == 120
    assert car.color is Color.BLUE


def test_paint_accepts_color_value():
    car = new_car_builder().paint("red").build()

    assert car.color is Color.RED
    assert car.stop() == "Stopping a red car"


def test_unpainted_car():
    car = new_car_builder().build()

    assert car.top_speed == 0
    assert car.color is None
    assert car.drive() == "Driving at speed: 0"
    assert car.stop() == "Stopping a  car"


def test_built_car_is_independent_of_later_calls():
    builder = new_car_builder().top_speed(50)
    car = builder.build()

    builder.top_speed(90)

    assert car.top_speed == 50


def test_paint_rejects_unknown_color():
    builder = new_car_builder().paint(Color.RED)

    with pytest.raises(ValidationError) as exc_info:
        builder.paint("green")

    assert isinstance(exc_info.value, DomainException)
    assert exc_info.value.details == ["blue", "red"]
    assert builder.build().color is Color.RED

"""Strategy example: the same operation run with two operators."""

from pattern_gallery.application.strategy import Addition, Multiplication, Operation


def run() -> None:
    add = Operation(Addition())
    print(add.operate(3, 5))

    mul = Operation(Multiplication())
    print(mul.operate(3, 5))

import pytest

from pattern_gallery.application.strategy import (
    Addition,
    Multiplication,
    Operation,
    Operator,
    OperatorRegistry,
    default_registry,
)
from pattern_gallery.domain.core.exceptions import DomainException, OperatorNotFoundError


def test_addition():
    assert Operation(Addition()).operate(3, 5) == 8


def test_multiplication():
    assert Operation(Multiplication()).operate(3, 5) == 15


def test_swapping_operator_changes_result():
    operation = Operation(Addition())
    assert operation.operate(4, 6) == 10

    operation.operator = Multiplication()
    assert operation.operate(4, 6) == 24


def test_custom_operator():
    class Subtraction(Operator):
        def apply(self, lval, rval):
            return lval - rval

    assert Operation(Subtraction()).operate(3, 5) == -2


def test_operator_is_abstract():
    with pytest.raises(TypeError):
        Operator()


class TestOperatorRegistry:
    """Test cases for OperatorRegistry."""

    def test_default_names(self):
        registry = default_registry()

        assert registry.names() == ["add", "multiply"]
        assert "add" in registry

    def test_create_by_name(self):
        registry = default_registry()

        assert isinstance(registry.create("add"), Addition)
        assert isinstance(registry.create("multiply"), Multiplication)
        assert registry.create("add") is not registry.create("add")

    def test_unknown_name(self):
        registry = OperatorRegistry()

        with pytest.raises(OperatorNotFoundError) as exc_info:
            registry.create("modulo")

        assert isinstance(exc_info.value, DomainException)
        assert exc_info.value.name == "modulo"

    def test_register_replaces(self):
        registry = default_registry()
        registry.register("add", Multiplication)

        assert Operation(registry.create("add")).operate(3, 5) == 15

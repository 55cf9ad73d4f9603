"""Context object that runs whichever operator it was given."""

from dataclasses import dataclass

from pattern_gallery.application.strategy.operators import Operator


@dataclass
class Operation:
    """Delegates to its operator; swap the operator to change the algorithm."""

    operator: Operator

    def operate(self, left_value: int, right_value: int) -> int:
        return self.operator.apply(left_value, right_value)

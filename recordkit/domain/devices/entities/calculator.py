"""Running-total calculator."""

import math
from dataclasses import dataclass

from recordkit.domain.common.exceptions import DomainInvariantError
from recordkit.domain.common.validators import require_number


def _operand(value: object) -> float:
    return require_number(value, "operand", message="Operand must be a finite number")


@dataclass
class Calculator:
    """
    Accumulator starting at 0. Each operation applies to the current result.

    The result is always finite: an operation that would overflow is
    rejected and leaves the previous result in place.
    """

    result: float = 0

    def _store(self, value: float) -> float:
        if not math.isfinite(value):
            raise DomainInvariantError("Calculator", "the result would not be a finite number")
        self.result = value
        return self.result

    def add(self, value: float) -> float:
        return self._store(self.result + _operand(value))

    def subtract(self, value: float) -> float:
        return self._store(self.result - _operand(value))

    def multiply(self, value: float) -> float:
        return self._store(self.result * _operand(value))

    def divide(self, value: float) -> float:
        """
        Divide the result by value.

        Raises:
            ValidationError: If value is not a finite number
            DomainInvariantError: If value is 0 or the quotient overflows
        """
        divisor = _operand(value)
        if divisor == 0:
            raise DomainInvariantError("Calculator", "cannot divide by zero")
        return self._store(self.result / divisor)

    def reset(self) -> None:
        self.result = 0

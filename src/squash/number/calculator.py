"""Four-function calculator."""
from __future__ import annotations
import operator
from typing import Any

from squash.common.exceptions import InvalidOperationError

OPERATORS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


class Calculator:
    def calculate(self, *arguments: Any) -> int | float:
        """
        Evaluate `left operator right`.

        Args:
            arguments: Exactly (left, operator, right).
        """
        if len(arguments) != 3:
            raise InvalidOperationError("Argument count must be exactly three.")
        left, symbol, right = arguments
        func = OPERATORS.get(symbol) if isinstance(symbol, str) else None
        if func is None:
            raise InvalidOperationError(f"Unknown operator: {symbol!r}")
        try:
            return func(left, right)
        except ZeroDivisionError as e:
            raise InvalidOperationError("Division by zero.") from e

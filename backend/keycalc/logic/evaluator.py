"""
RPN Evaluator.

Reduces a postfix item sequence to a single rounded value.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from ..errors import DivisionByZero, InvalidExpression
from .tokenizer import NumberToken, OperatorToken, RPNItem


DEFAULT_PRECISION = 9


@dataclass(frozen=True)
class EvaluationStep:
    """One operator reduction."""

    left: float
    symbol: str
    right: float
    result: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "left": self.left,
            "operator": self.symbol,
            "right": self.right,
            "result": self.result,
        }

    def __str__(self) -> str:
        return f"{self.left!r} {self.symbol} {self.right!r} = {self.result!r}"


def round_half_up(value: float, places: int = DEFAULT_PRECISION) -> float:
    """
    Round to a number of decimal places, halves toward positive infinity.

    Values too large to scale are returned unchanged.
    """
    factor = 10 ** places
    scaled = value * factor
    if not math.isfinite(scaled):
        return value
    floored = math.floor(scaled)
    if scaled - floored >= 0.5:
        floored += 1
    return floored / factor


class Evaluator:
    """Stack evaluator for RPN item sequences."""

    def __init__(self, precision: int = DEFAULT_PRECISION):
        self.precision = precision

    def evaluate(
        self,
        rpn: Iterable[RPNItem],
        steps: Optional[List[EvaluationStep]] = None,
    ) -> float:
        """
        Evaluate postfix items.

        Args:
            rpn: Items from ShuntingYard.to_rpn.
            steps: Optional list that collects each reduction.

        Returns:
            The single remaining value.

        Raises:
            InvalidExpression: If an operator lacks operands, the result
                overflows, or the stack does not end with exactly one value.
            DivisionByZero: If a divisor is zero.
        """
        stack: List[float] = []

        for item in rpn:
            if isinstance(item, NumberToken):
                stack.append(item.value)
                continue

            if not isinstance(item, OperatorToken):
                raise InvalidExpression(f"Unexpected RPN item: {item!r}")

            if len(stack) < 2:
                raise InvalidExpression(
                    f"Insufficient operands for {item.symbol}"
                )

            right = stack.pop()
            left = stack.pop()

            if item.symbol == "÷" and right == 0:
                raise DivisionByZero("Division by zero")

            result = item.operator.apply(left, right)
            if not math.isfinite(result):
                raise InvalidExpression("Result is not a finite number")

            result = round_half_up(result, self.precision)
            stack.append(result)

            if steps is not None:
                steps.append(EvaluationStep(left, item.symbol, right, result))

        if len(stack) != 1:
            raise InvalidExpression(
                f"Expected one value after evaluation, found {len(stack)}"
            )

        return stack[0]

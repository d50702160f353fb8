"""
Operator table for keypad expressions.

Defines the four arithmetic operators with their precedence and
associativity. The table is built once at import and is read-only.
"""

from __future__ import annotations

import operator as _op
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping


class Associativity(str, Enum):
    """Operator associativity."""
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Operator:
    """A binary infix operator."""

    symbol: str
    name: str
    precedence: int
    associativity: Associativity
    function: Callable[[float, float], float]

    @property
    def is_left_associative(self) -> bool:
        return self.associativity is Associativity.LEFT

    def yields_to(self, other: "Operator") -> bool:
        """
        Whether ``other`` (on top of the operator stack) must be popped
        before this operator is pushed.
        """
        if other.precedence > self.precedence:
            return True
        return other.precedence == self.precedence and self.is_left_associative

    def apply(self, left: float, right: float) -> float:
        return self.function(left, right)


OPERATORS: Mapping[str, Operator] = MappingProxyType({
    "+": Operator("+", "add", 1, Associativity.LEFT, _op.add),
    "-": Operator("-", "subtract", 1, Associativity.LEFT, _op.sub),
    "×": Operator("×", "multiply", 2, Associativity.LEFT, _op.mul),
    "÷": Operator("÷", "divide", 2, Associativity.LEFT, _op.truediv),
})

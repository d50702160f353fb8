"""
Expression Tokenizer.

Splits flat infix keypad input into number and operator tokens.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, List, Optional, Union

from ..errors import InvalidExpression
from ..operators import OPERATORS, Operator


NUMBER_PATTERN = re.compile(
    r"-?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?",
    re.ASCII,
)


@dataclass(frozen=True)
class NumberToken:
    """A numeric literal."""

    value: float

    def __str__(self) -> str:
        return repr(self.value)


@dataclass(frozen=True)
class OperatorToken:
    """An operator symbol resolved against the operator table."""

    operator: Operator

    @property
    def symbol(self) -> str:
        return self.operator.symbol

    def __str__(self) -> str:
        return self.operator.symbol


RPNItem = Union[NumberToken, OperatorToken]


class Tokenizer:
    """
    Tokenizer for keypad expressions.

    Converts input like:
        "2 + 3 × 4"
        "-5+3"
        "2+-3"

    Into token lists:
        ["2", "+", "3", "×", "4"]
        ["-5", "+", "3"]
        ["2", "+", "-3"]

    A ``-`` is a sign only at the very start or directly after another
    operator token. Numeric text is not validated here.
    """

    def tokenize(self, expression: Any) -> List[str]:
        """
        Tokenize an expression.

        Args:
            expression: The raw input string.

        Returns:
            Ordered list of token strings, empty for blank input.
        """
        if not isinstance(expression, str):
            raise InvalidExpression(
                f"Expected string expression, got {type(expression).__name__}"
            )

        tokens: List[str] = []
        buffer = ""

        for char in "".join(expression.split()):
            if char not in OPERATORS:
                buffer += char
                continue

            if buffer:
                tokens.append(buffer)
                buffer = ""
            elif char == "-" and (not tokens or tokens[-1] in OPERATORS):
                buffer = char
                continue

            tokens.append(char)

        if buffer:
            tokens.append(buffer)

        return tokens


def tokenize(expression: str) -> List[str]:
    """Tokenize an expression with a default tokenizer."""
    return Tokenizer().tokenize(expression)


def parse_number(text: str) -> Optional[float]:
    """Parse a finite decimal literal, or return None."""
    if not NUMBER_PATTERN.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def classify_token(text: str) -> Optional[RPNItem]:
    """
    Classify a token string.

    Returns:
        NumberToken, OperatorToken, or None for unrecognised text.
    """
    value = parse_number(text)
    if value is not None:
        return NumberToken(value)

    operator = OPERATORS.get(text)
    if operator is not None:
        return OperatorToken(operator)

    return None

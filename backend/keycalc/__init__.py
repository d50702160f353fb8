"""
keycalc: Keypad arithmetic expression evaluator.

This package tokenizes flat infix input, converts it to postfix order
with the shunting-yard algorithm and evaluates it on an operand stack.
"""

from .errors import (
    CalculatorError,
    InvalidExpression,
    DivisionByZero,
    MalformedToken,
)
from .operators import OPERATORS, Operator, Associativity
from .models import (
    CalculationResult,
    CalculatorConfig,
    ErrorMessages,
    Outcome,
    format_number,
    format_plain,
)
from .calculator import Calculator, calculate
from .report import EvaluationTrace
from .session import ExpressionBuffer

__version__ = "1.0.0"
__all__ = [
    "CalculatorError",
    "InvalidExpression",
    "DivisionByZero",
    "MalformedToken",
    "OPERATORS",
    "Operator",
    "Associativity",
    "CalculationResult",
    "CalculatorConfig",
    "ErrorMessages",
    "Outcome",
    "format_number",
    "format_plain",
    "Calculator",
    "calculate",
    "EvaluationTrace",
    "ExpressionBuffer",
]

"""
Calculator errors.

Pipeline stages raise these; ``Calculator.calculate`` converts them
into result outcomes.
"""

from __future__ import annotations

from typing import Optional


class CalculatorError(Exception):
    """Base class for expression evaluation failures."""

    code = "calculator_error"

    def __init__(self, message: str, expression: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.expression = expression


class InvalidExpression(CalculatorError):
    """The expression does not reduce to exactly one value."""

    code = "invalid_expression"


class DivisionByZero(CalculatorError):
    """A division had a zero divisor."""

    code = "division_by_zero"


class MalformedToken(InvalidExpression):
    """A token is neither a number nor a known operator (strict mode only)."""

    code = "malformed_token"

    def __init__(self, token: str, expression: Optional[str] = None):
        super().__init__(f"Malformed token: {token!r}", expression)
        self.token = token

"""
Keypad Session.

Headless model of a calculator display: an editable expression line
and a result line driven by keypad actions.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from .calculator import Calculator
from .logic import tokenize
from .models import CalculationResult, Outcome, format_plain
from .operators import OPERATORS

logger = logging.getLogger(__name__)

_OPERATOR_SPLIT = re.compile("[" + re.escape("".join(OPERATORS)) + "]")


class ExpressionBuffer:
    """
    Expression and result lines of a keypad calculator.

    Preview is synchronous; debouncing is left to the caller.
    """

    def __init__(self, calculator: Optional[Calculator] = None):
        self.calculator = calculator or Calculator()
        self.expression = ""
        self.result = "0"
        self.is_preview = False

    @property
    def _div_zero_message(self) -> str:
        return self.calculator.config.messages.division_by_zero

    def append_digit(self, digit: str) -> None:
        """Append a digit, starting fresh after "0" or a division error."""
        if self.expression == "0" or self.result == self._div_zero_message:
            self.expression = digit
        else:
            self.expression += digit
        self.preview()

    def append_operator(self, symbol: str) -> None:
        """Append an operator, replacing a trailing one."""
        if symbol not in OPERATORS:
            raise ValueError(f"Unknown operator: {symbol!r}")

        if self.result == self._div_zero_message:
            self.all_clear()

        if self.expression and self.expression[-1] in OPERATORS:
            self.expression = self.expression[:-1] + symbol
        else:
            self.expression += symbol

    def append_decimal(self) -> None:
        """Append a decimal point unless the current number has one."""
        last_number = _OPERATOR_SPLIT.split(self.expression)[-1]
        if "." not in last_number:
            self.expression += "."

    def clear_entry(self) -> None:
        """Remove the last token."""
        tokens = tokenize(self.expression)
        if tokens:
            tokens.pop()
            self.expression = "".join(tokens)
            self.preview()

    def all_clear(self) -> None:
        """Reset both lines."""
        self.expression = ""
        self.result = "0"
        self.is_preview = False

    def backspace(self) -> None:
        """Remove the last character."""
        if not self.expression:
            return
        self.expression = self.expression[:-1]
        if not self.expression:
            self.result = "0"
            self.is_preview = False
        else:
            self.preview()

    def preview(self) -> Optional[CalculationResult]:
        """
        Evaluate the expression without a trailing operator.

        The result line changes only when evaluation succeeds.
        """
        pending = self.expression
        if pending and pending[-1] in OPERATORS:
            pending = pending[:-1]
        if not pending:
            return None

        result = self.calculator.calculate(pending)
        if result.ok:
            self.result = result.display()
            self.is_preview = True
        else:
            logger.debug("Preview of %r skipped: %s", pending, result.outcome.value)
        return result

    def finalize(self) -> CalculationResult:
        """
        Evaluate the expression as entered.

        A numeric result replaces the expression so calculations chain.
        """
        result = self.calculator.calculate(self.expression)
        self.is_preview = False

        if result.outcome == Outcome.OK:
            self.result = result.display()
            self.expression = format_plain(result.value)
        elif result.outcome == Outcome.EMPTY:
            self.result = ""
            self.expression = ""
        else:
            self.result = result.message or ""

        return result

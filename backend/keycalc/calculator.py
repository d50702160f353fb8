"""
Calculator.

Runs the tokenize, shunting-yard and evaluate stages and classifies
the outcome for the caller.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple

from .errors import CalculatorError, DivisionByZero, MalformedToken
from .logic import EvaluationStep, Evaluator, ShuntingYard, Tokenizer
from .models import CalculationResult, CalculatorConfig, Outcome
from .report import EvaluationTrace, TraceTimer

logger = logging.getLogger(__name__)


def _classify(error: CalculatorError) -> Outcome:
    if isinstance(error, DivisionByZero):
        return Outcome.DIVISION_BY_ZERO
    if isinstance(error, MalformedToken):
        return Outcome.MALFORMED_TOKEN
    return Outcome.INVALID_EXPRESSION


class Calculator:
    """
    Evaluates keypad expressions.

    Holds only immutable configuration, so one instance can serve any
    number of callers.
    """

    def __init__(self, config: Optional[CalculatorConfig] = None):
        """
        Initialize the calculator.

        Args:
            config: Configuration; defaults are used when omitted.
        """
        self.config = config or CalculatorConfig()
        self.tokenizer = Tokenizer()
        self.shunting_yard = ShuntingYard(strict=self.config.strict_tokens)
        self.evaluator = Evaluator(precision=self.config.precision)

    def calculate(self, expression: Any) -> CalculationResult:
        """
        Evaluate an expression.

        Args:
            expression: Infix input such as "2+3×4".

        Returns:
            CalculationResult; never raises for bad input.
        """
        return self._run(expression)

    def validate(self, expression: Any) -> Tuple[bool, Optional[str]]:
        """
        Check whether an expression evaluates cleanly.

        Returns:
            Tuple of (is_valid, error_message). Empty input is valid.
        """
        result = self.calculate(expression)
        if result.is_error:
            return False, result.message
        return True, None

    def trace(self, expression: Any) -> EvaluationTrace:
        """Evaluate an expression and record every pipeline stage."""
        tokens: List[str] = []
        dropped: List[str] = []
        rpn: List[str] = []
        steps: List[EvaluationStep] = []

        with TraceTimer() as timer:
            result = self._run(expression, tokens, dropped, rpn, steps)

        return EvaluationTrace(
            expression=result.expression,
            tokens=tokens,
            dropped_tokens=dropped,
            rpn=rpn,
            steps=steps,
            result=result,
            duration_ms=timer.duration_ms,
        )

    def _run(
        self,
        expression: Any,
        tokens: Optional[List[str]] = None,
        dropped: Optional[List[str]] = None,
        rpn: Optional[List[str]] = None,
        steps: Optional[List[EvaluationStep]] = None,
    ) -> CalculationResult:
        text = expression if isinstance(expression, str) else ""

        try:
            token_list = self.tokenizer.tokenize(expression)
            if tokens is not None:
                tokens.extend(token_list)

            if not token_list:
                return CalculationResult(expression=text, outcome=Outcome.EMPTY)

            items = self.shunting_yard.to_rpn(token_list, dropped)
            if rpn is not None:
                rpn.extend(str(item) for item in items)

            value = self.evaluator.evaluate(items, steps)
        except CalculatorError as e:
            outcome = _classify(e)
            logger.debug("Expression %r failed: %s", text, e)
            return self._error(text, outcome)

        logger.debug("Expression %r = %r", text, value)
        return CalculationResult(expression=text, outcome=Outcome.OK, value=value)

    def _error(self, expression: str, outcome: Outcome) -> CalculationResult:
        return CalculationResult(
            expression=expression,
            outcome=outcome,
            message=self.config.messages.for_outcome(outcome),
        )


_default_calculator = Calculator()


def calculate(expression: str) -> CalculationResult:
    """Evaluate an expression with the default configuration."""
    return _default_calculator.calculate(expression)

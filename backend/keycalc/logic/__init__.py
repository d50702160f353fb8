"""
Expression pipeline for keycalc.

Provides tokenizing, shunting-yard conversion and RPN evaluation.
"""

from .tokenizer import (
    Tokenizer,
    NumberToken,
    OperatorToken,
    RPNItem,
    classify_token,
    tokenize,
)
from .shunting_yard import ShuntingYard, to_rpn
from .evaluator import Evaluator, EvaluationStep, round_half_up

__all__ = [
    "Tokenizer",
    "NumberToken",
    "OperatorToken",
    "RPNItem",
    "classify_token",
    "tokenize",
    "ShuntingYard",
    "to_rpn",
    "Evaluator",
    "EvaluationStep",
    "round_half_up",
]

"""
Shunting-yard conversion from infix tokens to postfix order.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from ..errors import MalformedToken
from .tokenizer import NumberToken, OperatorToken, RPNItem, classify_token

logger = logging.getLogger(__name__)


class ShuntingYard:
    """
    Converts token strings to reverse Polish notation.

    Tokens that are neither a finite number nor a known operator are
    dropped, or raise MalformedToken when ``strict`` is set.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict

    def to_rpn(
        self,
        tokens: Iterable[str],
        dropped: Optional[List[str]] = None,
    ) -> List[RPNItem]:
        """
        Convert tokens to postfix order.

        Args:
            tokens: Token strings from the tokenizer.
            dropped: Optional list that collects ignored tokens.

        Returns:
            RPN items, numbers and operators in evaluation order.
        """
        output: List[RPNItem] = []
        stack: List[OperatorToken] = []

        for token in tokens:
            item = classify_token(token)

            if isinstance(item, NumberToken):
                output.append(item)
            elif isinstance(item, OperatorToken):
                while stack and item.operator.yields_to(stack[-1].operator):
                    output.append(stack.pop())
                stack.append(item)
            else:
                if self.strict:
                    raise MalformedToken(token)
                logger.debug("Dropping unrecognised token %r", token)
                if dropped is not None:
                    dropped.append(token)

        while stack:
            output.append(stack.pop())

        return output


def to_rpn(tokens: Iterable[str], strict: bool = False) -> List[RPNItem]:
    """Convert tokens to postfix order with a default converter."""
    return ShuntingYard(strict=strict).to_rpn(tokens)

"""
Pydantic models for keycalc.

Defines the calculator configuration and the result returned to callers.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator


class Outcome(str, Enum):
    """Classification of a calculation."""
    OK = "ok"
    EMPTY = "empty"
    INVALID_EXPRESSION = "invalid_expression"
    DIVISION_BY_ZERO = "division_by_zero"
    MALFORMED_TOKEN = "malformed_token"


ERROR_OUTCOMES = frozenset({
    Outcome.INVALID_EXPRESSION,
    Outcome.DIVISION_BY_ZERO,
    Outcome.MALFORMED_TOKEN,
})


def format_number(value: float) -> str:
    """
    Format a result for display.

    Integral values print without a fraction ("14"), others use the
    shortest round-tripping repr ("0.3").
    """
    if value == 0:
        return "0"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def format_plain(value: float) -> str:
    """
    Format a result as keypad input, without exponent notation.

    The tokenizer splits "1e-07" at the minus sign, so chained results
    are written out in full ("0.0000001").
    """
    if value == 0:
        return "0"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class ErrorMessages(BaseModel):
    """Display text for each error outcome."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    division_by_zero: str = "Error: Div by 0"
    invalid_expression: str = "Error"
    malformed_token: str = "Error"

    def for_outcome(self, outcome: Outcome) -> Optional[str]:
        """Get the message for an outcome, None for non-errors."""
        if outcome not in ERROR_OUTCOMES:
            return None
        return getattr(self, outcome.value)


class CalculatorConfig(BaseModel):
    """
    Calculator configuration.

    Loaded from YAML of the form:

        calculator:
          precision: 9
          strict_tokens: false
          messages:
            division_by_zero: "Error: Div by 0"
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    precision: int = Field(default=9, ge=0, le=15, description="Decimal places kept after each operation")
    strict_tokens: bool = Field(default=False, description="Reject unrecognised tokens instead of dropping them")
    messages: ErrorMessages = Field(default_factory=ErrorMessages)

    @classmethod
    def from_yaml(cls, yaml_content: str) -> "CalculatorConfig":
        """Load configuration from YAML content."""
        try:
            data = yaml.safe_load(yaml_content) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML configuration: {e}") from e

        if not isinstance(data, dict):
            raise ValueError("Configuration must be a mapping")

        section = data.get("calculator") or {}
        if not isinstance(section, dict):
            raise ValueError("'calculator' section must be a mapping")

        return cls.model_validate(section)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "CalculatorConfig":
        """Load configuration from a YAML file."""
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_yaml(f.read())


class CalculationResult(BaseModel):
    """Outcome of evaluating one expression."""

    model_config = ConfigDict(frozen=True)

    expression: str = ""
    outcome: Outcome
    value: Optional[float] = None
    message: Optional[str] = None

    @model_validator(mode="after")
    def check_outcome_fields(self) -> "CalculationResult":
        """Value only on success, message only on errors."""
        if self.outcome == Outcome.OK and self.value is None:
            raise ValueError("ok result requires a value")
        if self.outcome != Outcome.OK and self.value is not None:
            raise ValueError(f"{self.outcome.value} result cannot carry a value")
        if self.outcome not in ERROR_OUTCOMES and self.message is not None:
            raise ValueError(f"{self.outcome.value} result cannot carry a message")
        return self

    @property
    def ok(self) -> bool:
        return self.outcome == Outcome.OK

    @property
    def is_empty(self) -> bool:
        return self.outcome == Outcome.EMPTY

    @property
    def is_error(self) -> bool:
        return self.outcome in ERROR_OUTCOMES

    def display(self) -> str:
        """Text for a result line: the number, the error message, or blank."""
        if self.ok:
            return format_number(self.value)
        if self.is_error:
            return self.message or ""
        return ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        result: Dict[str, Any] = {
            "expression": self.expression,
            "outcome": self.outcome.value,
        }
        if self.value is not None:
            result["value"] = self.value
        if self.message is not None:
            result["message"] = self.message
        return result

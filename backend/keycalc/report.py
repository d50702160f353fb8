"""
Evaluation Trace Reports.

Records every pipeline stage of one calculation for debugging and
serializes it to JSON or Markdown.
"""

from __future__ import annotations

import json
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from .logic import EvaluationStep
from .models import CalculationResult


TRACE_VERSION = "keycalc-trace/1.0"


@dataclass
class EvaluationTrace:
    """Stage-by-stage record of one calculation."""

    expression: str
    result: CalculationResult
    tokens: List[str] = field(default_factory=list)
    dropped_tokens: List[str] = field(default_factory=list)
    rpn: List[str] = field(default_factory=list)
    steps: List[EvaluationStep] = field(default_factory=list)
    duration_ms: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        result = {
            "trace_version": TRACE_VERSION,
            "expression": self.expression,
            "tokens": self.tokens,
            "rpn": self.rpn,
            "steps": [s.to_dict() for s in self.steps],
            "result": self.result.to_dict(),
        }

        if self.dropped_tokens:
            result["dropped_tokens"] = self.dropped_tokens
        if self.duration_ms is not None:
            result["duration_ms"] = self.duration_ms

        return result

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def to_markdown(self) -> str:
        """Convert to Markdown format report."""
        lines = []
        outcome = self.result.outcome.value

        lines.append(f"# Evaluation Trace: `{self.expression}`")
        lines.append("")
        lines.append(f"**Outcome:** {outcome}")
        display = self.result.display()
        if display:
            lines.append(f"**Result:** {display}")
        lines.append("")

        lines.append("## Tokens")
        lines.append("")
        lines.append("```")
        lines.append(" ".join(self.tokens) if self.tokens else "(none)")
        lines.append("```")
        lines.append("")

        if self.dropped_tokens:
            lines.append("### Dropped Tokens")
            lines.append("")
            for token in self.dropped_tokens:
                lines.append(f"- `{token}`")
            lines.append("")

        if self.rpn:
            lines.append("## Postfix")
            lines.append("")
            lines.append("```")
            lines.append(" ".join(self.rpn))
            lines.append("```")
            lines.append("")

        if self.steps:
            lines.append("## Steps")
            lines.append("")
            lines.append("| # | Left | Op | Right | Result |")
            lines.append("|---|------|----|-------|--------|")
            for i, step in enumerate(self.steps, 1):
                lines.append(
                    f"| {i} | {step.left!r} | {step.symbol} | {step.right!r} | {step.result!r} |"
                )
            lines.append("")

        return "\n".join(lines)

    def save(self, output_path: Path, format: str = "json") -> None:
        """
        Save the trace to a file.

        Args:
            output_path: Destination path.
            format: "json" or "markdown".
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        if format == "markdown":
            output_path.write_text(self.to_markdown(), encoding="utf-8")
        else:
            output_path.write_text(self.to_json(), encoding="utf-8")


class TraceTimer:
    """Context manager for timing a calculation."""

    def __init__(self):
        self.start_time: float = 0
        self.duration_ms: float = 0

    def __enter__(self) -> "TraceTimer":
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, *args):
        self.duration_ms = round((time.perf_counter() - self.start_time) * 1000, 3)

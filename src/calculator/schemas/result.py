"""Pydantic model for a single calculation outcome."""

from __future__ import annotations

import math

from pydantic import BaseModel, Field


def format_number(value: float) -> str:
    """Format a value to two decimals, spelling out infinities and NaN."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return f"{value:.2f}"


class CalculationResult(BaseModel):
    """Outcome of one calculator invocation."""

    operation: str = Field(..., description="Operation name")
    a: float = Field(..., description="First operand")
    b: float = Field(..., description="Second operand")
    result: float | None = Field(default=None, description="Value on success")
    error: str | None = Field(default=None, description="Error message on failure")

    @property
    def succeeded(self) -> bool:
        """Whether the operation produced a result."""
        return self.error is None

    def to_text(self) -> str:
        """Render as the plain one-line CLI output."""
        if self.error is not None:
            return f"Error: {self.error}"
        return f"Result: {format_number(self.result)}"

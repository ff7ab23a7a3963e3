"""Pydantic schemas for configuration and calculation results."""

from calculator.schemas.config import CalculatorConfig
from calculator.schemas.result import CalculationResult

__all__ = ["CalculatorConfig", "CalculationResult"]

"""Calculator with the four basic arithmetic operations."""

from __future__ import annotations

import logging
import math
import re
from enum import Enum

logger = logging.getLogger(__name__)

# Accepted operand syntax: plain decimals, hex floats with a binary exponent,
# and inf/infinity/nan. No underscores or surrounding whitespace.
DECIMAL_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
HEX_PATTERN = re.compile(
    r"[+-]?0[xX]([0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)
SPECIAL_PATTERN = re.compile(r"[+-]?(inf|infinity)|nan", re.IGNORECASE)


class CalculatorError(Exception):
    """Base error for calculator failures."""

    pass


class DivisionByZeroError(CalculatorError, ZeroDivisionError):
    """Error raised when dividing by zero."""

    def __init__(self, message: str = "division by zero"):
        super().__init__(message)


class OperandError(CalculatorError):
    """Error raised when an operand is not a valid number."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"invalid operand '{text}'")


class Operation(str, Enum):
    """Supported arithmetic operations."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"


class Calculator:
    """Performs arithmetic and remembers the last successful result."""

    def __init__(self) -> None:
        self.last_result: float = 0.0

    def add(self, a: float, b: float) -> float:
        return self._store(a + b)

    def subtract(self, a: float, b: float) -> float:
        return self._store(a - b)

    def multiply(self, a: float, b: float) -> float:
        return self._store(a * b)

    def divide(self, a: float, b: float) -> float:
        """Divide a by b.

        Raises:
            DivisionByZeroError: If b is zero. last_result is left as is.
        """
        if b == 0:
            logger.debug("Rejected division of %s by zero", a)
            raise DivisionByZeroError()
        return self._store(a / b)

    def get_last_result(self) -> float:
        """Get the result of the most recent successful operation."""
        return self.last_result

    def apply(self, operation: Operation | str, a: float, b: float) -> float:
        """Run the named operation on a and b.

        Args:
            operation: Operation or its name (case-sensitive)
            a: First operand
            b: Second operand

        Returns:
            The operation's result

        Raises:
            ValueError: If the operation name is not recognized
            DivisionByZeroError: If dividing by zero
        """
        op = Operation(operation)
        handlers = {
            Operation.ADD: self.add,
            Operation.SUBTRACT: self.subtract,
            Operation.MULTIPLY: self.multiply,
            Operation.DIVIDE: self.divide,
        }
        result = handlers[op](a, b)
        logger.debug("%s(%s, %s) = %s", op.value, a, b, result)
        return result

    def _store(self, result: float) -> float:
        self.last_result = result
        return result


def parse_operand(text: str, strict: bool = False) -> float:
    """Parse a textual operand as a float.

    Malformed text yields 0.0 unless strict is set.

    Args:
        text: Operand as given on the command line
        strict: Raise instead of defaulting to zero

    Returns:
        The parsed value

    Raises:
        OperandError: If strict and text is not a number
    """
    if DECIMAL_PATTERN.fullmatch(text) or SPECIAL_PATTERN.fullmatch(text):
        return float(text)
    if HEX_PATTERN.fullmatch(text):
        try:
            return float.fromhex(text)
        except OverflowError:
            return -math.inf if text.startswith("-") else math.inf

    if strict:
        raise OperandError(text)
    logger.info("Operand %r is not a number, using 0", text)
    return 0.0

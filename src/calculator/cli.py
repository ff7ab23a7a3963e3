"""CLI interface for the calculator."""

from __future__ import annotations

import json
import logging
import sys

import click
import yaml
from pydantic import ValidationError

from calculator import __version__
from calculator.core.calculator import (
    Calculator,
    DivisionByZeroError,
    OperandError,
    Operation,
    parse_operand,
)
from calculator.schemas.config import CalculatorConfig
from calculator.schemas.result import CalculationResult
from calculator.utils.logging import configure_logging

logger = logging.getLogger(__name__)

USAGE = "usage: calculator [add|subtract|multiply|divide] <num1> <num2>"
UNKNOWN_OPERATION = "unknown operation"


def run_calculation(operation: str, a: float, b: float) -> CalculationResult | None:
    """Run one operation on a fresh calculator.

    Args:
        operation: Operation name (case-sensitive)
        a: First operand
        b: Second operand

    Returns:
        The calculation outcome, or None if the operation is not recognized
    """
    try:
        op = Operation(operation)
    except ValueError:
        logger.debug("Unrecognized operation %r", operation)
        return None

    calc = Calculator()
    try:
        result = calc.apply(op, a, b)
    except DivisionByZeroError as e:
        return CalculationResult(operation=op.value, a=a, b=b, error=str(e))

    return CalculationResult(operation=op.value, a=a, b=b, result=result)


# Options are only parsed before the operation name.
@click.command(
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False}
)
@click.version_option(version=__version__)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to config file (.calculator.yaml)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(
    args: tuple[str, ...], as_json: bool, config: str | None, verbose: bool
) -> None:
    """Perform one arithmetic operation on two numbers.

    ARGS are the operation (add, subtract, multiply or divide) followed by
    the two operands.
    """
    if len(args) < 3:
        click.echo(USAGE)
        sys.exit(1)

    cfg = CalculatorConfig()
    if config:
        try:
            cfg = CalculatorConfig.load(config)
        except (ValidationError, yaml.YAMLError) as e:
            click.echo(f"Error: invalid config {config}: {e}")
            sys.exit(1)

    configure_logging("DEBUG" if verbose else cfg.logging.level)

    operation, first, second = args[:3]
    if len(args) > 3:
        logger.debug("Ignoring extra arguments: %s", " ".join(args[3:]))

    try:
        a = parse_operand(first, strict=cfg.operands.strict)
        b = parse_operand(second, strict=cfg.operands.strict)
    except OperandError as e:
        click.echo(f"Error: {e}")
        sys.exit(1)

    outcome = run_calculation(operation, a, b)
    if outcome is None:
        click.echo(UNKNOWN_OPERATION)
        return

    if as_json:
        click.echo(json.dumps(outcome.model_dump(mode="json"), indent=2))
        return

    click.echo(outcome.to_text())


if __name__ == "__main__":
    main()

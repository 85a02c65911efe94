"""
Command-line driver.

Each positional argument is evaluated as one expression and printed as
``Result of '<expr>' = <value>`` or ``Error: <message>``.
"""

import argparse
import sys
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, ValidationError

from arithmetic_evaluator.common.errors import ExpressionError
from arithmetic_evaluator.common.logger import configure_logging, logger
from arithmetic_evaluator.common.parser import ExpressionParser


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    expressions : List[str]
        Expressions to evaluate, at least one.
    strict : bool
        Reject unrecognized text instead of skipping it.
    right_assoc_power : bool
        Treat ``^`` as right-associative.
    log_level : LogLevel
        Logging level for the package logger.
    """

    expressions: List[str] = Field(..., min_length=1)
    strict: bool = False
    right_assoc_power: bool = False
    log_level: LogLevel = "WARNING"


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arithmetic-evaluator",
        description="Evaluate arithmetic expressions such as \"2*5/3\" or \"sin(45)\"",
    )
    parser.add_argument("expressions", nargs="*", help="Expressions to evaluate")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on unrecognized text instead of silently skipping it",
    )
    parser.add_argument(
        "--right-assoc-power",
        action="store_true",
        help="Evaluate a^b^c as a^(b^c)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        help="Logging level (default: WARNING)",
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments without the program name, ``sys.argv[1:]`` when omitted
    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    try:
        return CliArgs(**vars(args))
    except ValidationError as exc:
        parser.error(str(exc))


def format_result(expression: str, value: float) -> str:
    return f"Result of '{expression}' = {value}"


def evaluate_arguments(expressions: List[str], parser: ExpressionParser) -> List[str]:
    """Evaluate each expression and return the line to print for it."""
    lines: List[str] = []
    for expression in expressions:
        try:
            lines.append(format_result(expression, parser.evaluate(expression)))
        except ExpressionError as exc:
            logger.info(f"Could not evaluate {expression!r}: {exc}")
            lines.append(f"Error: {exc}")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function of the ``arithmetic-evaluator`` console script.

    :return: Process exit status
    :rtype: int
    """
    cli_args = parse_args(argv)
    configure_logging(cli_args.log_level)

    parser = ExpressionParser(
        strict=cli_args.strict,
        power_right_associative=cli_args.right_assoc_power,
    )

    for line in evaluate_arguments(cli_args.expressions, parser):
        print(line)

    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Test the command-line driver."""
import logging

import pytest

from arithmetic_evaluator.common.logger import logger
from arithmetic_evaluator.main import main, parse_args


@pytest.fixture(autouse=True)
def reset_package_logger():
    """main() attaches a stream handler to captured stderr; drop it after each test."""
    yield
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_parse_args_defaults() -> None:
    """Positional expressions are collected, flags default to off."""
    args = parse_args(["1+1", "2*2"])
    assert args.expressions == ["1+1", "2*2"]
    assert not args.strict
    assert not args.right_assoc_power
    assert args.log_level == "WARNING"


def test_parse_args_requires_an_expression() -> None:
    """Without any expression the parser exits with an error."""
    with pytest.raises(SystemExit):
        parse_args([])


def test_parse_args_has_no_file_option() -> None:
    """Expressions only come from the command line, file input is not an option."""
    with pytest.raises(SystemExit):
        parse_args(["--file", "ops.txt"])


def test_parse_args_invalid_log_level() -> None:
    """Unknown logging levels are rejected."""
    with pytest.raises(SystemExit):
        parse_args(["1", "--log-level", "chatty"])


def test_parse_args_log_level_is_case_insensitive() -> None:
    """Lower case level names are accepted."""
    assert parse_args(["1", "--log-level", "debug"]).log_level == "DEBUG"


def test_main_prints_results_and_errors(capsys) -> None:
    """Each argument prints either a result line or an error line."""
    assert main(["2 + 3 * 4", "(2 + 3", "0/0"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Result of '2 + 3 * 4' = 14.0",
        "Error: Invalid token: (",
        "Result of '0/0' = nan",
    ]


def test_main_flags(capsys) -> None:
    """--strict and --right-assoc-power reach the parser."""
    main(["--strict", "--right-assoc-power", "2^3^2", "wxyz(1)"])

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Result of '2^3^2' = 512.0",
        "Error: Unknown token 'wxyz' at position 0",
    ]


def test_main_negative_expression_is_not_an_option(capsys) -> None:
    """An expression after -- may start with a minus sign."""
    assert main(["--", "-3--3"]) == 0
    assert capsys.readouterr().out.splitlines() == ["Result of '-3--3' = 0.0"]

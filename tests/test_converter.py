"""Test the Shunting-yard infix to RPN conversion."""
import pytest

from arithmetic_evaluator.common.converter import to_postfix
from arithmetic_evaluator.common.lexer import tokenize
from arithmetic_evaluator.common.tokens import LeftParen, format_tokens


@pytest.mark.parametrize("expr,expected", [
    ("3 + 4", "3.0 4.0 +"),
    ("3 + 4 * 2", "3.0 4.0 2.0 * +"),
    ("10 / 2 - 1", "10.0 2.0 / 1.0 -"),
    ("(2 + 3) * 4", "2.0 3.0 + 4.0 *"),
    ("8 - 3 - 2", "8.0 3.0 - 2.0 -"),
    ("2 * 3 ^ 2", "2.0 3.0 2.0 ^ *"),
    ("sin(0) + 1", "0.0 sin 1.0 +"),
    ("sqrt(abs(-4))", "-1.0 4.0 * abs sqrt"),
])
def test_to_postfix_various(expr: str, expected: str) -> None:
    """to_postfix orders operands and operators by precedence."""
    assert format_tokens(to_postfix(tokenize(expr))) == expected


def test_power_is_left_associative_by_default() -> None:
    """Equal precedence always pops, so ^ groups left to right."""
    assert format_tokens(to_postfix(tokenize("2^3^2"))) == "2.0 3.0 ^ 2.0 ^"


def test_power_right_associative_option() -> None:
    """With the option enabled, ^ groups right to left."""
    rpn = to_postfix(tokenize("2^3^2"), power_right_associative=True)
    assert format_tokens(rpn) == "2.0 3.0 2.0 ^ ^"


def test_right_associative_option_leaves_other_operators_alone() -> None:
    """The option only affects ^ against ^."""
    rpn = to_postfix(tokenize("8 - 3 - 2"), power_right_associative=True)
    assert format_tokens(rpn) == "8.0 3.0 - 2.0 -"


def test_unmatched_left_paren_reaches_output() -> None:
    """An unclosed ( is left in the RPN sequence for the evaluator to reject."""
    rpn = to_postfix(tokenize("(2 + 3"))
    assert format_tokens(rpn) == "2.0 3.0 + ("
    assert isinstance(rpn[-1], LeftParen)


def test_unmatched_right_paren_is_ignored() -> None:
    """A ) without a matching ( empties the stack silently."""
    assert format_tokens(to_postfix(tokenize("2 + 3)"))) == "2.0 3.0 +"


def test_empty_input() -> None:
    """No tokens in, no tokens out."""
    assert to_postfix([]) == []

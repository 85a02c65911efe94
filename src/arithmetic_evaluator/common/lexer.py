"""Split an arithmetic expression into tokens."""
import math
import re
from typing import List, Optional

from arithmetic_evaluator.common.errors import UnknownTokenError
from arithmetic_evaluator.common.logger import logger
from arithmetic_evaluator.common.tokens import (
    Function,
    FunctionToken,
    LeftParen,
    NumberToken,
    Operator,
    OperatorToken,
    RightParen,
    Token,
)


CONSTANTS: dict[str, float] = {
    "PI": math.pi,
    "E": math.e,
}

# Longest names first so that "log10" is not read as "log" followed by "10"
_FUNCTION_ALTERNATION = "|".join(
    re.escape(function.value)
    for function in sorted(Function, key=lambda f: len(f.value), reverse=True)
)

TOKEN_PATTERN: re.Pattern = re.compile(
    r"(?P<number>\d+(?:\.\d+)?)"
    r"|(?P<operator>[-+*/^])"
    r"|(?P<lparen>\()"
    r"|(?P<rparen>\))"
    rf"|(?P<function>{_FUNCTION_ALTERNATION})"
    r"|(?P<constant>PI|E)"
)


def strip_spaces(text: str) -> str:
    """Remove every whitespace character from ``text``."""
    return "".join(text.split())


def _is_unary_minus(previous: Optional[Token]) -> bool:
    """A ``-`` is a negation at the start of the stream or right after ``(`` or an operator."""
    return previous is None or isinstance(previous, (LeftParen, OperatorToken))


def _check_gap(text: str, start: int, end: int, strict: bool) -> None:
    """Handle the unmatched text between two matches: skip it, or raise in strict mode."""
    if start >= end:
        return
    skipped = text[start:end]
    if strict:
        raise UnknownTokenError(skipped, start)
    logger.debug(f"Skipping unrecognized text {skipped!r} at position {start}")


def tokenize(text: str, strict: bool = False) -> List[Token]:
    """
    Convert an expression into a list of tokens.

    Whitespace is removed first. Text that matches none of the token classes is skipped,
    unless ``strict`` is set, in which case it raises :class:`UnknownTokenError`.

    Unary minus is rewritten on the spot as ``-1 *``, so ``-(2*3)`` becomes ``-1 * ( 2 * 3 )``.
    Positions reported in errors are offsets into the whitespace-free text.

    :param str text: Arithmetic expression
    :param bool strict: Reject unrecognized text instead of skipping it

    :return: List of tokens in source order
    :rtype: List[Token]
    :raises UnknownTokenError: In strict mode, on the first unrecognized substring
    """
    text = strip_spaces(text)
    tokens: List[Token] = []
    position = 0

    for match in TOKEN_PATTERN.finditer(text):
        _check_gap(text, position, match.start(), strict)
        position = match.end()

        kind = match.lastgroup
        lexeme = match.group()

        if kind == "number":
            tokens.append(NumberToken(value=float(lexeme)))
        elif kind == "constant":
            tokens.append(NumberToken(value=CONSTANTS[lexeme]))
        elif kind == "operator":
            operator = Operator(lexeme)
            previous = tokens[-1] if tokens else None
            if operator is Operator.SUB and _is_unary_minus(previous):
                tokens.append(NumberToken(value=-1.0))
                tokens.append(OperatorToken(operator=Operator.MUL))
            else:
                tokens.append(OperatorToken(operator=operator))
        elif kind == "lparen":
            tokens.append(LeftParen())
        elif kind == "rparen":
            tokens.append(RightParen())
        else:
            tokens.append(FunctionToken(function=Function(lexeme)))

    _check_gap(text, position, len(text), strict)
    return tokens

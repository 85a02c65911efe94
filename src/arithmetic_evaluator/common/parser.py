"""Parse and evaluate arithmetic expressions safely."""
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from arithmetic_evaluator.common import converter, evaluator, lexer
from arithmetic_evaluator.common.logger import logger
from arithmetic_evaluator.common.tokens import Token, format_tokens


class ExpressionParser(BaseModel):
    """
    Parse and evaluate arithmetic expressions safely.

    Design constraints:
        - No eval(), no dynamic code execution
        - No state shared between calls: a parser can be used from several threads at once

    Algorithm:
        1. Tokenize with a single regular expression, unary minus rewritten as ``-1 *``
        2. Convert to Reverse Polish Notation (RPN) using Shunting-yard
        3. Evaluate RPN using a stack

    Examples:
        - Infix expression (standard notation): 3 + 4 * 2
        - Corresponding Reverse Polish Notation (RPN): 3 4 2 * +

    """

    # Make the Pydantic instance immutable (read-only), so one parser can be shared safely
    model_config = ConfigDict(frozen=True)

    strict: bool = Field(
        default=False,
        description="Raise UnknownTokenError on unrecognized text instead of skipping it",
    )
    power_right_associative: bool = Field(
        default=False,
        description="Group a ^ b ^ c as a ^ (b ^ c) instead of (a ^ b) ^ c",
    )

    def tokenize(self, expr: str) -> List[Token]:
        """
        Split an arithmetic expression into tokens.

        :param str expr: Arithmetic expression as a string

        :return: List of tokens
        :rtype: List[Token]
        """
        return lexer.tokenize(expr, strict=self.strict)

    def to_rpn(self, tokens: List[Token]) -> List[Token]:
        """
        Convert a list of tokens into Reverse Polish Notation (RPN) using the Shunting-yard algorithm.

        :param List[Token] tokens: List of arithmetic tokens

        :return: List of tokens in RPN order
        :rtype: List[Token]
        """
        return converter.to_postfix(tokens, power_right_associative=self.power_right_associative)

    @staticmethod
    def evaluate_rpn(rpn: List[Token]) -> float:
        return evaluator.evaluate_rpn(rpn)

    def evaluate(self, expr: str) -> float:
        """
        Evaluate an arithmetic expression safely.

        :param str expr: Arithmetic expression string

        :return: Computed result as float, possibly nan or inf
        :rtype: float
        :raises ExpressionError: If expression is invalid or malformed
        """
        tokens: List[Token] = self.tokenize(expr)
        logger.debug(f"Tokens for {expr!r}: {format_tokens(tokens)}")

        rpn: List[Token] = self.to_rpn(tokens)
        logger.debug(f"RPN for {expr!r}: {format_tokens(rpn)}")

        return self.evaluate_rpn(rpn)


DEFAULT_PARSER = ExpressionParser()


def evaluate_expression(expression: str) -> float:
    """
    Evaluate ``expression`` with the default parser settings.

    :param str expression: Arithmetic expression, whitespace is ignored

    :return: Computed result
    :rtype: float
    :raises ExpressionError: On the first failure, ``str(exc)`` is the message
    """
    return DEFAULT_PARSER.evaluate(expression)

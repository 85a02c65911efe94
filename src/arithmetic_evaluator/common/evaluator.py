"""Evaluate token sequences in Reverse Polish Notation."""
from collections.abc import Callable
from typing import List

import numpy as np

from arithmetic_evaluator.common.errors import (
    InvalidTokenError,
    NoResultError,
    NotEnoughOperandsError,
    UnknownFunctionError,
    UnknownOperatorError,
)
from arithmetic_evaluator.common.logger import logger
from arithmetic_evaluator.common.tokens import (
    Function,
    FunctionToken,
    NumberToken,
    Operator,
    OperatorToken,
    Token,
)


# numpy ufuncs follow IEEE 754: 0/0 is nan, 1/0 is inf, asin(2) is nan, exp(1000) is inf
BinaryFn = Callable[[np.float64, np.float64], np.float64]
UnaryFn = Callable[[np.float64], np.float64]

OPERATIONS: dict[Operator, BinaryFn] = {
    Operator.ADD: np.add,
    Operator.SUB: np.subtract,
    Operator.MUL: np.multiply,
    Operator.DIV: np.divide,
    Operator.POW: np.power,
}

FUNCTIONS: dict[Function, UnaryFn] = {
    Function.SIN: np.sin,
    Function.COS: np.cos,
    Function.TAN: np.tan,
    Function.ASIN: np.arcsin,
    Function.ACOS: np.arccos,
    Function.ATAN: np.arctan,
    Function.EXP: np.exp,
    Function.LN: np.log,
    Function.LOG: np.log10,
    Function.LOG2: np.log2,
    Function.LOG10: np.log10,
    Function.ABS: np.abs,
    Function.SQRT: np.sqrt,
}


def _apply_operator(token: OperatorToken, stack: List[np.float64]) -> np.float64:
    if len(stack) < 2:
        raise NotEnoughOperandsError("operator", str(token))
    operation = OPERATIONS.get(token.operator)
    if operation is None:
        raise UnknownOperatorError(str(token))
    # b is the right operand: it was pushed last
    b = stack.pop()
    a = stack.pop()
    return operation(a, b)


def _apply_function(token: FunctionToken, stack: List[np.float64]) -> np.float64:
    if not stack:
        raise NotEnoughOperandsError("function", str(token))
    function = FUNCTIONS.get(token.function)
    if function is None:
        raise UnknownFunctionError(str(token))
    return function(stack.pop())


def evaluate_rpn(tokens: List[Token]) -> float:
    """
    Evaluate an RPN token sequence with an operand stack.

    Numeric domain problems are not errors: they come back as ``nan`` or ``inf``.
    Values left below the top of the stack are ignored.

    :param List[Token] tokens: Tokens in RPN order

    :return: Value on top of the stack once every token is consumed
    :rtype: float
    :raises NotEnoughOperandsError: If an operator or function lacks operands
    :raises InvalidTokenError: If a parenthesis is found in the sequence
    :raises NoResultError: If the stack ends up empty
    """
    stack: List[np.float64] = []

    with np.errstate(all="ignore"):
        for token in tokens:
            if isinstance(token, NumberToken):
                stack.append(np.float64(token.value))
            elif isinstance(token, OperatorToken):
                stack.append(_apply_operator(token, stack))
            elif isinstance(token, FunctionToken):
                stack.append(_apply_function(token, stack))
            else:
                raise InvalidTokenError(token)

    if not stack:
        raise NoResultError()

    if len(stack) > 1:
        logger.debug(f"Ignoring {len(stack) - 1} surplus value(s) left on the stack")

    return float(stack[-1])

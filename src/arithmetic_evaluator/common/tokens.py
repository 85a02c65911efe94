"""Token types shared by the lexer, the converter and the evaluator."""
from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class Operator(str, Enum):
    """Binary operators, closed set."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    POW = "^"

    @property
    def precedence(self) -> int:
        return OPERATOR_PRECEDENCE[self]


class Function(str, Enum):
    """Unary functions, closed set. ``log`` is the base 10 logarithm, ``ln`` the natural one."""

    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    ASIN = "asin"
    ACOS = "acos"
    ATAN = "atan"
    EXP = "exp"
    LN = "ln"
    LOG = "log"
    LOG2 = "log2"
    LOG10 = "log10"
    ABS = "abs"
    SQRT = "sqrt"


OPERATOR_PRECEDENCE: dict[Operator, int] = {
    Operator.ADD: 1,
    Operator.SUB: 1,
    Operator.MUL: 2,
    Operator.DIV: 2,
    Operator.POW: 3,
}

FUNCTION_PRECEDENCE: int = 4


class NumberToken(BaseModel):
    """A numeric literal, or a constant already resolved to its value."""

    model_config = ConfigDict(frozen=True)

    value: float = Field(..., description="Numeric value of the literal")

    @property
    def precedence(self) -> int:
        return 0

    def __str__(self) -> str:
        return str(self.value)


class OperatorToken(BaseModel):
    """A binary operator. Symbols outside :class:`Operator` fail validation."""

    model_config = ConfigDict(frozen=True)

    operator: Operator = Field(..., description="Operator symbol")

    @property
    def precedence(self) -> int:
        return self.operator.precedence

    def __str__(self) -> str:
        return self.operator.value


class FunctionToken(BaseModel):
    """A unary function call. Names outside :class:`Function` fail validation."""

    model_config = ConfigDict(frozen=True)

    function: Function = Field(..., description="Function name")

    @property
    def precedence(self) -> int:
        return FUNCTION_PRECEDENCE

    def __str__(self) -> str:
        return self.function.value


class LeftParen(BaseModel):
    model_config = ConfigDict(frozen=True)

    @property
    def precedence(self) -> int:
        return 0

    def __str__(self) -> str:
        return "("


class RightParen(BaseModel):
    model_config = ConfigDict(frozen=True)

    @property
    def precedence(self) -> int:
        return 0

    def __str__(self) -> str:
        return ")"


Token = Union[NumberToken, OperatorToken, FunctionToken, LeftParen, RightParen]


def format_tokens(tokens: list[Token]) -> str:
    """Render a token sequence space separated, e.g. ``3.0 4.0 2.0 * +``."""
    return " ".join(str(token) for token in tokens)

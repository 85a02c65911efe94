"""Errors raised while evaluating an arithmetic expression."""


class ExpressionError(ValueError):
    """Base class for every evaluation failure. ``str(exc)`` is the user-facing message."""


class NotEnoughOperandsError(ExpressionError):
    """An operator or function was reached with too few values on the operand stack."""

    def __init__(self, kind: str, symbol: str) -> None:
        self.kind = kind
        self.symbol = symbol
        super().__init__(f"Invalid expression: not enough values for {kind} '{symbol}'")


class UnknownOperatorError(ExpressionError):
    """Operator symbol outside ``+ - * / ^``."""

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"Unknown operator: {symbol}")


class UnknownFunctionError(ExpressionError):
    """Function name outside the supported set."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown function: {name}")


class InvalidTokenError(ExpressionError):
    """A parenthesis survived into the RPN sequence (usually an unbalanced ``(``)."""

    def __init__(self, token: object) -> None:
        self.token = token
        super().__init__(f"Invalid token: {token}")


class NoResultError(ExpressionError):
    """The operand stack was empty once the RPN sequence was consumed."""

    def __init__(self) -> None:
        super().__init__("Invalid expression: no result on stack")


class UnknownTokenError(ExpressionError):
    """Text the lexer could not match, raised in strict mode only."""

    def __init__(self, text: str, position: int) -> None:
        self.text = text
        self.position = position
        super().__init__(f"Unknown token '{text}' at position {position}")

"""Convert infix token sequences to Reverse Polish Notation (Shunting-yard)."""
from typing import List

from arithmetic_evaluator.common.tokens import (
    FunctionToken,
    LeftParen,
    NumberToken,
    Operator,
    OperatorToken,
    RightParen,
    Token,
)


def _should_pop(top: Token, incoming: Token, power_right_associative: bool) -> bool:
    """
    Decide whether the operator on top of the stack goes to the output before ``incoming`` is pushed.

    Equal precedence pops, which makes every operator left-associative. With
    ``power_right_associative`` an incoming ``^`` leaves an equal-precedence ``^`` on the stack.
    """
    if not isinstance(top, (OperatorToken, FunctionToken)):
        return False
    if top.precedence > incoming.precedence:
        return True
    if top.precedence == incoming.precedence:
        if (
            power_right_associative
            and isinstance(incoming, OperatorToken)
            and incoming.operator is Operator.POW
        ):
            return False
        return True
    return False


def to_postfix(tokens: List[Token], power_right_associative: bool = False) -> List[Token]:
    """
    Reorder infix tokens into RPN.

    Parenthesis errors are not reported here: a ``)`` without a matching ``(`` just empties the
    stack, and an unmatched ``(`` is left in the output for the evaluator to reject.

    Examples:
        - Infix: ``3 + 4 * 2``
        - RPN: ``3 4 2 * +``

    :param List[Token] tokens: Tokens in infix order
    :param bool power_right_associative: Group ``a ^ b ^ c`` as ``a ^ (b ^ c)``

    :return: Tokens in RPN order
    :rtype: List[Token]
    """
    output: List[Token] = []
    stack: List[Token] = []

    for token in tokens:
        if isinstance(token, NumberToken):
            output.append(token)
        elif isinstance(token, LeftParen):
            stack.append(token)
        elif isinstance(token, RightParen):
            while stack:
                top = stack.pop()
                if isinstance(top, LeftParen):
                    break
                output.append(top)
        else:
            while stack and _should_pop(stack[-1], token, power_right_associative):
                output.append(stack.pop())
            stack.append(token)

    # Remaining operators in pop order (stack top first)
    output.extend(reversed(stack))
    return output

"""
Postfix (Reverse Polish Notation) integer expression evaluation with an operand stack.

Operators follow their operands, so no precedence or parentheses are needed: tokens are processed strictly
left to right with a single stack.
"""

import logging
from collections.abc import Callable, Iterator

import regex as re

logger = logging.getLogger(__name__)

TOKEN_PAT = re.compile(r"\S+")
INTEGER_PAT = re.compile(r"[+-]?[0-9]+")


class PostfixError(ValueError):
    """Base class for all evaluation failures."""

    def __init__(self, message: str, token: str | None = None):
        super().__init__(message)
        self.token = token


class InvalidOperator(PostfixError):
    """A token is neither an integer nor one of the supported operators."""


class DivisionError(PostfixError, ZeroDivisionError):
    """Division with a zero right operand."""


class StackUnderflow(PostfixError):
    """An operator needs two operands but fewer are on the stack."""


class InvalidExpression(PostfixError):
    """The stack does not hold exactly one value once every token is consumed."""


def _divide(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    if b == 0:
        raise DivisionError("Division by zero", "/")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _divide,
}


def tokenize(expression: str) -> Iterator[str]:
    """
    Split an expression into tokens.

    Runs of whitespace of any length separate tokens; leading and trailing whitespace is ignored.

    Returns:
        Iterator of tokens (use list(tokenize(...)) to materialize)
    """
    for match in TOKEN_PAT.finditer(expression):
        yield match.group()


def evaluate(expression: str) -> int:
    """
    Evaluate a postfix expression such as "4 13 5 / +".

    Args:
        expression: whitespace separated integers and the operators + - * /

    Returns:
        The single value left on the stack

    Raises:
        InvalidOperator: a token is not an integer or a supported operator
        DivisionError: "/" with a right operand of zero
        StackUnderflow: an operator is applied to fewer than two operands
        InvalidExpression: anything other than exactly one value remains at the end
    """
    stack: list[int] = []

    for token in tokenize(expression):
        if INTEGER_PAT.fullmatch(token):
            stack.append(int(token))
            continue

        operator = OPERATORS.get(token)
        if operator is None:
            raise InvalidOperator(f"Invalid operator: {token}", token)
        if len(stack) < 2:
            raise StackUnderflow(f"Not enough operands for '{token}'", token)

        b = stack.pop()  # right operand, pushed last
        a = stack.pop()
        stack.append(operator(a, b))

    if len(stack) != 1:
        raise InvalidExpression(f"Invalid expression format: {len(stack)} values left on the stack")

    logger.debug("Evaluated %r to %d", expression, stack[0])
    return stack.pop()


class PostfixEvaluator:
    """Stateless evaluator, kept as a class for callers that want an object to hand around."""

    @staticmethod
    def evaluate(expression: str) -> int:
        return evaluate(expression)

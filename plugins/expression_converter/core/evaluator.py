"""Stack evaluators for postfix and prefix token streams."""

from __future__ import annotations

import operator
import re
from typing import Callable, Iterable, Literal

from .errors import (
    DivisionByZeroError,
    ExpressionError,
    InsufficientOperandsError,
    MalformedExpressionError,
    UnboundVariableError,
)
from .tokens import is_operator

Notation = Literal["postfix", "prefix"]

_NUMBER = re.compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")
_HAS_LETTER = re.compile(r"[a-zA-Z]")

_ARITHMETIC: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


def apply_operator(symbol: str, left: float, right: float) -> float:
    """Apply a binary operator from the operator table."""

    func = _ARITHMETIC.get(symbol)
    if func is None:
        raise MalformedExpressionError(f"Unknown operator: {symbol}")
    if symbol == "/" and right == 0:
        raise DivisionByZeroError("Division by zero")
    return func(left, right)


def _parse_operand(token: str) -> float:
    if _NUMBER.fullmatch(token):
        return float(token)
    if _HAS_LETTER.search(token):
        raise UnboundVariableError(
            f"Cannot evaluate expression with variables. Variable '{token}' has no assigned value."
        )
    raise MalformedExpressionError(f"Unrecognized token '{token}'")


def _evaluate(tokens: Iterable[str], *, notation: Notation) -> float:
    stack: list[float] = []
    for token in tokens:
        if is_operator(token):
            if len(stack) < 2:
                raise InsufficientOperandsError(
                    f"Invalid {notation} expression: insufficient operands"
                )
            first = stack.pop()
            second = stack.pop()
            # Postfix pops the right operand first; prefix, read backwards, the left.
            if notation == "postfix":
                left, right = second, first
            else:
                left, right = first, second
            stack.append(apply_operator(token, left, right))
        else:
            stack.append(_parse_operand(token))

    if len(stack) != 1:
        raise MalformedExpressionError(
            f"Invalid {notation} expression: incorrect number of operators"
        )
    return stack[0]


def eval_postfix(postfix: str) -> float:
    """Evaluate a space separated postfix expression."""

    return _evaluate((postfix or "").split(), notation="postfix")


def eval_prefix(prefix: str) -> float:
    """Evaluate a space separated prefix expression, scanning right to left."""

    return _evaluate(reversed((prefix or "").split()), notation="prefix")


def evaluate_notation(expression: str, notation: Notation) -> float:
    """Dispatch to the evaluator for ``notation``."""

    if notation == "postfix":
        return eval_postfix(expression)
    if notation == "prefix":
        return eval_prefix(expression)
    raise ExpressionError("notation must be 'postfix' or 'prefix'")


__all__ = ["Notation", "apply_operator", "eval_postfix", "eval_prefix", "evaluate_notation"]

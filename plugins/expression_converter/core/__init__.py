"""Exports for the expression converter core."""

from __future__ import annotations

from .converter import ConversionResult, shunting_yard, to_postfix, to_prefix
from .errors import (
    ConsecutiveOperatorsError,
    DivisionByZeroError,
    EmptyExpressionError,
    EmptyParensError,
    ErrorKind,
    ExpressionError,
    InsufficientOperandsError,
    InvalidBoundaryError,
    InvalidCharacterError,
    MalformedExpressionError,
    UnboundVariableError,
    UnmatchedClosingParenError,
    UnmatchedOpeningParenError,
    UnmatchedParenError,
)
from .evaluator import Notation, apply_operator, eval_postfix, eval_prefix, evaluate_notation
from .tokens import OPERATORS, OperatorInfo, Token, TokenKind, clean_expression, tokenize
from .validator import validate

SAMPLE_EXPRESSIONS: tuple[str, ...] = (
    "(2 + 3) * 4",
    "10 + 2 * 6",
    "100 * 2 + 12",
    "(1 + 2) * (3 + 4)",
    "2 + 3 * 4 - 5",
    "(a + b) * c",
    "x + y * z",
    "(p + q) / (r - s)",
    "a * b + c * d",
)


def convert_expression(expression: str) -> dict[str, object]:
    """Convert ``expression`` to both notations with one combined step trace."""

    postfix = to_postfix(expression)
    prefix = to_prefix(expression)
    return {
        "expression": clean_expression(expression),
        "postfix": postfix.result,
        "prefix": prefix.result,
        "steps": [*postfix.steps, *prefix.steps],
    }


__all__ = [
    "ConversionResult",
    "ConsecutiveOperatorsError",
    "DivisionByZeroError",
    "EmptyExpressionError",
    "EmptyParensError",
    "ErrorKind",
    "ExpressionError",
    "InsufficientOperandsError",
    "InvalidBoundaryError",
    "InvalidCharacterError",
    "MalformedExpressionError",
    "Notation",
    "OPERATORS",
    "OperatorInfo",
    "SAMPLE_EXPRESSIONS",
    "Token",
    "TokenKind",
    "UnboundVariableError",
    "UnmatchedClosingParenError",
    "UnmatchedOpeningParenError",
    "UnmatchedParenError",
    "apply_operator",
    "clean_expression",
    "convert_expression",
    "eval_postfix",
    "eval_prefix",
    "evaluate_notation",
    "shunting_yard",
    "to_postfix",
    "to_prefix",
    "tokenize",
    "validate",
]

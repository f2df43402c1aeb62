"""Structural checks run before any conversion."""

from __future__ import annotations

import re

from .errors import (
    ConsecutiveOperatorsError,
    EmptyExpressionError,
    EmptyParensError,
    InvalidBoundaryError,
    InvalidCharacterError,
    UnmatchedClosingParenError,
    UnmatchedOpeningParenError,
)
from .tokens import clean_expression

_VALID_CHARS = re.compile(r"[a-zA-Z0-9+\-*/().]+")
_CONSECUTIVE_OPERATORS = re.compile(r"[+\-*/]{2,}")
# A leading '-' is allowed; a trailing lone '-' is not checked here.
_LEADING_OPERATOR = re.compile(r"^[+*/]")
_TRAILING_OPERATOR = re.compile(r"[+*/]$")


def _check_parentheses(expression: str) -> None:
    balance = 0
    for char in expression:
        if char == "(":
            balance += 1
        elif char == ")":
            balance -= 1
        if balance < 0:
            raise UnmatchedClosingParenError("Unmatched closing parenthesis")
    if balance != 0:
        raise UnmatchedOpeningParenError("Unmatched opening parenthesis")


def validate(expression: str) -> None:
    """Raise an :class:`ExpressionError` for the first rule ``expression`` breaks."""

    cleaned = clean_expression(expression)
    if not cleaned:
        raise EmptyExpressionError("Please enter an infix expression")
    if not _VALID_CHARS.fullmatch(cleaned):
        raise InvalidCharacterError(
            "Invalid characters in expression. Only letters (a-z), numbers (0-9), "
            "+, -, *, /, (, ) are allowed."
        )
    _check_parentheses(cleaned)
    if _CONSECUTIVE_OPERATORS.search(cleaned):
        raise ConsecutiveOperatorsError("Consecutive operators are not allowed")
    if _LEADING_OPERATOR.search(cleaned) or _TRAILING_OPERATOR.search(cleaned):
        raise InvalidBoundaryError("Expression cannot start or end with +, *, or /")
    if "()" in cleaned:
        raise EmptyParensError("Empty parentheses are not allowed")


__all__ = ["validate"]

"""Error taxonomy for the expression engine."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    EMPTY_EXPRESSION = "empty_expression"
    INVALID_CHARACTER = "invalid_character"
    UNMATCHED_OPENING_PAREN = "unmatched_opening_paren"
    UNMATCHED_CLOSING_PAREN = "unmatched_closing_paren"
    CONSECUTIVE_OPERATORS = "consecutive_operators"
    INVALID_BOUNDARY = "invalid_boundary"
    EMPTY_PARENS = "empty_parens"
    UNMATCHED_PAREN = "unmatched_paren"
    UNBOUND_VARIABLE = "unbound_variable"
    INSUFFICIENT_OPERANDS = "insufficient_operands"
    MALFORMED_EXPRESSION = "malformed_expression"
    DIVISION_BY_ZERO = "division_by_zero"


class ExpressionError(ValueError):
    """Raised when an expression cannot be validated, converted or evaluated."""

    kind: ErrorKind = ErrorKind.MALFORMED_EXPRESSION

    def to_details(self) -> dict[str, str]:
        return {"kind": self.kind.value}


class EmptyExpressionError(ExpressionError):
    kind = ErrorKind.EMPTY_EXPRESSION


class InvalidCharacterError(ExpressionError):
    kind = ErrorKind.INVALID_CHARACTER


class UnmatchedOpeningParenError(ExpressionError):
    kind = ErrorKind.UNMATCHED_OPENING_PAREN


class UnmatchedClosingParenError(ExpressionError):
    kind = ErrorKind.UNMATCHED_CLOSING_PAREN


class ConsecutiveOperatorsError(ExpressionError):
    kind = ErrorKind.CONSECUTIVE_OPERATORS


class InvalidBoundaryError(ExpressionError):
    kind = ErrorKind.INVALID_BOUNDARY


class EmptyParensError(ExpressionError):
    kind = ErrorKind.EMPTY_PARENS


class UnmatchedParenError(ExpressionError):
    """Raised by the converter when a ``)`` has no partner on the stack."""

    kind = ErrorKind.UNMATCHED_PAREN


class UnboundVariableError(ExpressionError):
    """Raised when an operand names a variable that has no value."""

    kind = ErrorKind.UNBOUND_VARIABLE


class InsufficientOperandsError(ExpressionError):
    kind = ErrorKind.INSUFFICIENT_OPERANDS


class MalformedExpressionError(ExpressionError):
    kind = ErrorKind.MALFORMED_EXPRESSION


class DivisionByZeroError(ExpressionError):
    kind = ErrorKind.DIVISION_BY_ZERO


__all__ = [
    "ErrorKind",
    "ExpressionError",
    "EmptyExpressionError",
    "InvalidCharacterError",
    "UnmatchedOpeningParenError",
    "UnmatchedClosingParenError",
    "ConsecutiveOperatorsError",
    "InvalidBoundaryError",
    "EmptyParensError",
    "UnmatchedParenError",
    "UnboundVariableError",
    "InsufficientOperandsError",
    "MalformedExpressionError",
    "DivisionByZeroError",
]

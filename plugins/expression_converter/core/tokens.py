"""Operator table and tokenizer shared by the converter and evaluators."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Literal, Mapping

from .errors import InvalidCharacterError

Associativity = Literal["left", "right"]


@dataclass(frozen=True, slots=True)
class OperatorInfo:
    precedence: int
    associativity: Associativity


OPERATORS: Mapping[str, OperatorInfo] = MappingProxyType(
    {
        "+": OperatorInfo(precedence=1, associativity="left"),
        "-": OperatorInfo(precedence=1, associativity="left"),
        "*": OperatorInfo(precedence=2, associativity="left"),
        "/": OperatorInfo(precedence=2, associativity="left"),
    }
)

_OPERAND_CHARS = frozenset(string.ascii_letters + string.digits + ".")


class TokenKind(str, Enum):
    OPERAND = "operand"
    OPERATOR = "operator"
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexical unit of an infix expression."""

    kind: TokenKind
    text: str

    @classmethod
    def operand(cls, text: str) -> "Token":
        return cls(TokenKind.OPERAND, text)

    @classmethod
    def operator(cls, symbol: str) -> "Token":
        if symbol not in OPERATORS:
            raise InvalidCharacterError(f"Unknown operator '{symbol}'")
        return cls(TokenKind.OPERATOR, symbol)

    @property
    def precedence(self) -> int:
        info = OPERATORS.get(self.text) if self.kind is TokenKind.OPERATOR else None
        return info.precedence if info else 0

    @property
    def is_left_associative(self) -> bool:
        return self.kind is TokenKind.OPERATOR and OPERATORS[self.text].associativity == "left"

    def mirrored(self) -> "Token":
        """Return the token as it reads in a reversed expression."""

        if self.kind is TokenKind.LEFT_PAREN:
            return RIGHT_PAREN
        if self.kind is TokenKind.RIGHT_PAREN:
            return LEFT_PAREN
        return self

    def __str__(self) -> str:
        return self.text


LEFT_PAREN = Token(TokenKind.LEFT_PAREN, "(")
RIGHT_PAREN = Token(TokenKind.RIGHT_PAREN, ")")


def is_operator(text: str) -> bool:
    return text in OPERATORS


def is_operand_char(char: str) -> bool:
    return char in _OPERAND_CHARS


def clean_expression(expression: str) -> str:
    """Strip every whitespace character from ``expression``."""

    if expression is None:
        return ""
    return "".join(expression.split())


def tokenize(expression: str) -> list[Token]:
    """Split a cleaned infix expression into tokens.

    Operands are maximal runs of letters, digits and ``.`` so ``x1``, ``12``
    and ``2.5`` each become one token.
    """

    text = clean_expression(expression)
    tokens: list[Token] = []
    index = 0
    while index < len(text):
        char = text[index]
        if is_operand_char(char):
            start = index
            while index < len(text) and is_operand_char(text[index]):
                index += 1
            tokens.append(Token.operand(text[start:index]))
            continue
        if char == "(":
            tokens.append(LEFT_PAREN)
        elif char == ")":
            tokens.append(RIGHT_PAREN)
        elif is_operator(char):
            tokens.append(Token.operator(char))
        else:
            raise InvalidCharacterError(f"Unexpected character '{char}' at position {index}")
        index += 1
    return tokens


def join_tokens(tokens: Iterable[Token], separator: str = " ") -> str:
    return separator.join(token.text for token in tokens)


__all__ = [
    "Associativity",
    "OperatorInfo",
    "OPERATORS",
    "TokenKind",
    "Token",
    "LEFT_PAREN",
    "RIGHT_PAREN",
    "is_operator",
    "is_operand_char",
    "clean_expression",
    "tokenize",
    "join_tokens",
]

"""Infix to postfix/prefix conversion using the Shunting Yard algorithm."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from .errors import UnmatchedParenError
from .tokens import Token, TokenKind, clean_expression, join_tokens, tokenize
from .validator import validate

logger = logging.getLogger(__name__)

POSTFIX_HEADER = "Converting to Postfix (Shunting Yard Algorithm):"
PREFIX_HEADER = "Converting to Prefix:"


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """Converted expression plus the trace of algorithm steps that produced it."""

    result: str
    steps: tuple[str, ...]

    def to_dict(self) -> dict[str, object]:
        return {"result": self.result, "steps": list(self.steps)}


def _snapshot(tokens: Sequence[Token]) -> str:
    return "[" + join_tokens(tokens, ", ") + "]"


def _should_pop(top: Token, incoming: Token, *, mirrored: bool) -> bool:
    if top.kind is not TokenKind.OPERATOR:
        return False
    if top.precedence > incoming.precedence:
        return True
    if top.precedence == incoming.precedence:
        # Reading a reversed expression flips associativity.
        return incoming.is_left_associative != mirrored
    return False


def shunting_yard(
    tokens: Sequence[Token],
    *,
    mirrored: bool = False,
    steps: list[str] | None = None,
) -> list[Token]:
    """Reorder infix ``tokens`` into postfix order.

    With ``mirrored`` set the tokens are treated as a reversed expression, which
    is how the prefix conversion reuses this routine. When ``steps`` is given,
    a line describing every stack action is appended to it.
    """

    def trace(message: str) -> None:
        if steps is not None:
            steps.append(message)

    output: list[Token] = []
    stack: list[Token] = []

    for token in tokens:
        if token.kind is TokenKind.OPERAND:
            output.append(token)
            trace(f"Read operand '{token}' -> Output: {_snapshot(output)}")
        elif token.kind is TokenKind.LEFT_PAREN:
            stack.append(token)
            trace(f"Read '(' -> Push to stack: {_snapshot(stack)}")
        elif token.kind is TokenKind.RIGHT_PAREN:
            while stack and stack[-1].kind is not TokenKind.LEFT_PAREN:
                op = stack.pop()
                output.append(op)
                trace(f"Read ')' -> Pop '{op}' to output: {_snapshot(output)}")
            if not stack:
                raise UnmatchedParenError("Unmatched closing parenthesis")
            stack.pop()
            trace(f"Remove '(' from stack: {_snapshot(stack)}")
        else:
            while stack and _should_pop(stack[-1], token, mirrored=mirrored):
                op = stack.pop()
                output.append(op)
                trace(f"Pop '{op}' (higher/equal precedence) to output: {_snapshot(output)}")
            stack.append(token)
            trace(f"Push '{token}' to stack: {_snapshot(stack)}")

    while stack:
        op = stack.pop()
        if op.kind is TokenKind.LEFT_PAREN:
            raise UnmatchedParenError("Unmatched opening parenthesis")
        output.append(op)
        trace(f"Pop remaining '{op}' to output: {_snapshot(output)}")

    return output


def to_postfix(infix: str) -> ConversionResult:
    """Validate ``infix`` and convert it to space separated postfix notation."""

    validate(infix)
    steps: list[str] = [POSTFIX_HEADER]
    output = shunting_yard(tokenize(infix), steps=steps)
    postfix = join_tokens(output)
    steps.append(f"Final Postfix: {postfix}")
    logger.debug("converted %r to postfix %r", infix, postfix)
    return ConversionResult(result=postfix, steps=tuple(steps))


def to_prefix(infix: str) -> ConversionResult:
    """Validate ``infix`` and convert it to prefix notation.

    The expression is reversed token by token with its parentheses swapped,
    converted to postfix, and the postfix tokens are reversed again.
    """

    validate(infix)
    tokens = tokenize(infix)
    reversed_tokens = tokens[::-1]
    mirrored_tokens = [token.mirrored() for token in reversed_tokens]

    steps: list[str] = [PREFIX_HEADER]
    steps.append(f"1. Reverse infix: {join_tokens(reversed_tokens, '')}")
    steps.append(f"2. Replace ( with ) and vice versa: {join_tokens(mirrored_tokens, '')}")

    postfix_tokens = shunting_yard(mirrored_tokens, mirrored=True)
    steps.append(f"3. Convert to postfix: {join_tokens(postfix_tokens)}")

    prefix = join_tokens(postfix_tokens[::-1])
    steps.append(f"4. Reverse result: {prefix}")
    logger.debug("converted %r to prefix %r", clean_expression(infix), prefix)
    return ConversionResult(result=prefix, steps=tuple(steps))


__all__ = [
    "ConversionResult",
    "POSTFIX_HEADER",
    "PREFIX_HEADER",
    "shunting_yard",
    "to_postfix",
    "to_prefix",
]

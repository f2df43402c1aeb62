"""Command line interface for the Expression Converter plugin."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from .core import (
    SAMPLE_EXPRESSIONS,
    ExpressionError,
    convert_expression,
    evaluate_notation,
    to_postfix,
    to_prefix,
)


def _print(payload: dict[str, Any]) -> None:
    print(json.dumps(payload, indent=2, sort_keys=True))


def command_convert(args: argparse.Namespace) -> None:
    result = convert_expression(args.expression)
    if not args.steps:
        result.pop("steps")
    _print(result)


def command_postfix(args: argparse.Namespace) -> None:
    _print(to_postfix(args.expression).to_dict())


def command_prefix(args: argparse.Namespace) -> None:
    _print(to_prefix(args.expression).to_dict())


def command_evaluate(args: argparse.Namespace) -> None:
    value = evaluate_notation(args.expression, args.notation)
    _print({"notation": args.notation, "expression": args.expression, "result": value})


def command_samples(args: argparse.Namespace) -> None:
    _print({"samples": list(SAMPLE_EXPRESSIONS)})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Infix to postfix/prefix converter and evaluator")
    subparsers = parser.add_subparsers(dest="command", required=True)

    convert_parser = subparsers.add_parser("convert", help="Convert infix to postfix and prefix")
    convert_parser.add_argument("expression", help="Infix expression, e.g. '(2 + 3) * 4'")
    convert_parser.add_argument("--steps", action="store_true", help="Include the algorithm steps")
    convert_parser.set_defaults(func=command_convert)

    postfix_parser = subparsers.add_parser("postfix", help="Convert infix to postfix")
    postfix_parser.add_argument("expression", help="Infix expression")
    postfix_parser.set_defaults(func=command_postfix)

    prefix_parser = subparsers.add_parser("prefix", help="Convert infix to prefix")
    prefix_parser.add_argument("expression", help="Infix expression")
    prefix_parser.set_defaults(func=command_prefix)

    evaluate_parser = subparsers.add_parser("evaluate", help="Evaluate a postfix or prefix expression")
    evaluate_parser.add_argument("expression", help="Space separated tokens, e.g. '2 3 + 4 *'")
    evaluate_parser.add_argument(
        "--notation", default="postfix", choices=["postfix", "prefix"], help="Token order"
    )
    evaluate_parser.set_defaults(func=command_evaluate)

    samples_parser = subparsers.add_parser("samples", help="List sample expressions")
    samples_parser.set_defaults(func=command_samples)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except ExpressionError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

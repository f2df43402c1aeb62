"""API routes for the Expression Converter plugin."""

from __future__ import annotations

from typing import Literal

from flask import Blueprint, Response, current_app, request

from common.errors import ValidationAppError
from common.logging import get_logger
from common.responses import fail, ok
from common.validation import (
    LimitExceededError,
    SchemaModel,
    TextLimit,
    ValidationError,
    enforce_text_limit,
    parse_model,
)

from ..core import (
    SAMPLE_EXPRESSIONS,
    ExpressionError,
    clean_expression,
    convert_expression,
    evaluate_notation,
    to_postfix,
    to_prefix,
    validate,
)

_DEFAULT_MAX_LENGTH = 256

logger = get_logger()


class ExpressionPayload(SchemaModel):
    expression: str


class EvaluatePayload(SchemaModel):
    expression: str
    notation: Literal["postfix", "prefix"] = "postfix"


api_bp = Blueprint("expression_converter_api", __name__, url_prefix="/api/expression_converter")


def _expression_limit() -> TextLimit:
    settings = current_app.config.get("PLUGIN_SETTINGS", {}).get("expression_converter")
    return TextLimit.from_settings(settings, default_max_length=_DEFAULT_MAX_LENGTH)


def _parse(model: type[SchemaModel]) -> SchemaModel:
    payload = parse_model(model, request.get_json(silent=True) or {})
    enforce_text_limit(payload.expression, _expression_limit())
    return payload


def _invalid_request(exc: ValidationError) -> Response:
    if isinstance(exc, LimitExceededError):
        return fail(ValidationAppError(message=str(exc), code="expr.too_long", details=exc.details))
    return fail(
        ValidationAppError(
            message=str(exc),
            code="expr.invalid_request",
            details={"errors": exc.details or []},
        )
    )


def _expression_failed(exc: ExpressionError) -> Response:
    logger.info("rejected expression: %s (%s)", exc, exc.kind.value)
    return fail(
        ValidationAppError(
            message=str(exc),
            code=f"expr.{exc.kind.value}",
            details=exc.to_details(),
        )
    )


@api_bp.post("/validate")
def validate_endpoint() -> Response:
    try:
        payload = _parse(ExpressionPayload)
    except ValidationError as exc:
        return _invalid_request(exc)
    try:
        validate(payload.expression)
    except ExpressionError as exc:
        return _expression_failed(exc)
    return ok({"valid": True, "expression": clean_expression(payload.expression)})


@api_bp.post("/convert")
def convert() -> Response:
    try:
        payload = _parse(ExpressionPayload)
    except ValidationError as exc:
        return _invalid_request(exc)
    try:
        result = convert_expression(payload.expression)
    except ExpressionError as exc:
        return _expression_failed(exc)
    return ok(result)


@api_bp.post("/postfix")
def postfix() -> Response:
    try:
        payload = _parse(ExpressionPayload)
    except ValidationError as exc:
        return _invalid_request(exc)
    try:
        result = to_postfix(payload.expression)
    except ExpressionError as exc:
        return _expression_failed(exc)
    return ok(result.to_dict())


@api_bp.post("/prefix")
def prefix() -> Response:
    try:
        payload = _parse(ExpressionPayload)
    except ValidationError as exc:
        return _invalid_request(exc)
    try:
        result = to_prefix(payload.expression)
    except ExpressionError as exc:
        return _expression_failed(exc)
    return ok(result.to_dict())


@api_bp.post("/evaluate")
def evaluate() -> Response:
    try:
        payload = _parse(EvaluatePayload)
    except ValidationError as exc:
        return _invalid_request(exc)
    try:
        value = evaluate_notation(payload.expression, payload.notation)
    except ExpressionError as exc:
        return _expression_failed(exc)
    return ok({"notation": payload.notation, "expression": payload.expression, "result": value})


@api_bp.get("/samples")
def samples() -> Response:
    return ok({"samples": list(SAMPLE_EXPRESSIONS)})


blueprints = [api_bp]


__all__ = [
    "blueprints",
    "validate_endpoint",
    "convert",
    "postfix",
    "prefix",
    "evaluate",
    "samples",
]

"""Validation primitives for plugin APIs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, TypeVar

import pydantic
from pydantic import BaseModel


class ValidationError(ValueError):
    """Raised when validation fails."""

    def __init__(self, message: str, *, details: Any | None = None):
        super().__init__(message)
        self.details = details


class SchemaModel(BaseModel):
    """Strict base model for request/response validation."""

    model_config = pydantic.ConfigDict(extra="forbid", str_strip_whitespace=True)


TModel = TypeVar("TModel", bound=SchemaModel)


def parse_model(model: type[TModel], payload: Mapping[str, Any] | None) -> TModel:
    payload = payload or {}
    try:
        return model.model_validate(payload)
    except pydantic.ValidationError as exc:
        raise ValidationError(
            "Invalid request payload",
            details=exc.errors(include_url=False, include_context=False),
        ) from exc


class LimitExceededError(ValidationError):
    """Raised when an input is larger than the configured limit."""


@dataclass(slots=True)
class TextLimit:
    max_length: int

    @classmethod
    def from_settings(
        cls,
        settings: Mapping[str, Any] | None,
        *,
        key: str = "max_expression_length",
        default_max_length: int,
    ) -> "TextLimit":
        """Build a :class:`TextLimit` from plugin configuration.

        ``settings`` is usually the plugin block of ``config.yml``. Missing or
        malformed values fall back to ``default_max_length``.
        """

        max_length = default_max_length
        if settings:
            try:
                max_length = int(settings.get(key))
            except (TypeError, ValueError):
                max_length = default_max_length
        return cls(max_length=max(max_length, 1))


def enforce_text_limit(value: str, limit: TextLimit) -> None:
    if len(value) > limit.max_length:
        raise LimitExceededError(
            f"Input exceeds {limit.max_length} characters",
            details={"max_length": limit.max_length, "length": len(value)},
        )


__all__ = [
    "ValidationError",
    "SchemaModel",
    "parse_model",
    "LimitExceededError",
    "TextLimit",
    "enforce_text_limit",
]

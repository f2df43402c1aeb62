"""Error envelopes shared by the HTTP layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(slots=True)
class AppError(Exception):
    """Base application error that serializes into the failure envelope."""

    message: str
    code: str = "error"
    status_code: int = 400
    details: Mapping[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": dict(self.details or {}),
        }


@dataclass(slots=True)
class ValidationAppError(AppError):
    """Rejected user input: malformed payloads and invalid expressions."""

    code: str = "validation_error"
    status_code: int = 400


@dataclass(slots=True)
class NotFoundAppError(AppError):
    code: str = "not_found"
    status_code: int = 404


@dataclass(slots=True)
class InternalAppError(AppError):
    """Wrapper for unexpected failures."""

    code: str = "internal_error"
    status_code: int = 500


def ensure_app_error(error: AppError | Exception, *, fallback_code: str) -> AppError:
    """Return ``error`` unchanged if it is an :class:`AppError`, else wrap it."""

    if isinstance(error, AppError):
        return error
    return InternalAppError(message=str(error), code=fallback_code)


__all__ = [
    "AppError",
    "ValidationAppError",
    "NotFoundAppError",
    "InternalAppError",
    "ensure_app_error",
]

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, cast


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    context: Mapping[str, Any] | None = None
    message: str | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message or self.code)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.message or self.code, "code": self.code}
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class DomainError(AppError):
    def __init__(
        self,
        *,
        code: str | None = None,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
        message: str | None = None,
    ) -> None:
        resolved_code = code or cast(str, getattr(self, "code", "domain_error"))
        resolved_status = status or cast(
            HTTPStatus, getattr(self, "status", HTTPStatus.BAD_REQUEST)
        )
        resolved_message = message or cast("str | None", getattr(self, "message", None))
        super().__init__(
            code=resolved_code,
            status=resolved_status,
            context=context,
            message=resolved_message,
        )


class InfrastructureError(AppError):
    def __init__(
        self,
        code: str = "infrastructure_error",
        *,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
        message: str | None = None,
    ) -> None:
        resolved_status = status or HTTPStatus.INTERNAL_SERVER_ERROR
        super().__init__(code=code, status=resolved_status, context=context, message=message)


class PersistenceError(InfrastructureError):
    def __init__(self, message: str = "Database operation failed") -> None:
        super().__init__(code="persistence_error", message=message)


class TokenSigningError(InfrastructureError):
    def __init__(self) -> None:
        super().__init__(code="token_signing_failed", message="Failed to issue session token")


class ValidationError(AppError):
    def __init__(
        self,
        code: str = "validation_error",
        *,
        context: Mapping[str, Any] | None = None,
        message: str | None = None,
    ) -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.BAD_REQUEST,
            context=context,
            message=message or "Invalid request payload",
        )


class MissingFieldsError(ValidationError):
    def __init__(self) -> None:
        super().__init__(code="missing_fields", message="All fields are required")


class PasswordTooShortError(ValidationError):
    def __init__(self, min_length: int) -> None:
        super().__init__(
            code="password_too_short",
            context={"min_length": min_length},
            message=f"Password must be at least {min_length} characters long",
        )


class PasswordTooLongError(ValidationError):
    def __init__(self, max_bytes: int) -> None:
        super().__init__(
            code="password_too_long",
            context={"max_bytes": max_bytes},
            message=f"Password must be at most {max_bytes} bytes long",
        )


class InvalidResourceIdError(AppError):
    def __init__(self, resource_id: str) -> None:
        super().__init__(
            code="invalid_id_format",
            status=HTTPStatus.BAD_REQUEST,
            context={"id": resource_id},
            message="Invalid ID format",
        )


class UnauthorizedError(AppError):
    def __init__(self, reason: str | None = None) -> None:
        super().__init__(
            code="unauthorized",
            status=HTTPStatus.UNAUTHORIZED,
            context={"reason": reason} if reason else None,
            message="Unauthorized",
        )


class RateLimitedError(AppError):
    def __init__(self, retry_after: float) -> None:
        super().__init__(
            code="rate_limited",
            status=HTTPStatus.TOO_MANY_REQUESTS,
            context={"retry_after_seconds": round(retry_after, 1)},
            message="Too many requests",
        )

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from suicide_analysis.application.use_cases.users.login_user import LoginUserUseCase
from suicide_analysis.application.use_cases.users.logout_user import LogoutUserUseCase
from suicide_analysis.application.use_cases.users.results import (
    AuthErrorKind,
    AuthFailure,
    AuthSuccess,
)
from suicide_analysis.application.use_cases.users.signup_user import SignupUserUseCase
from suicide_analysis.infrastructure.audit import AuditAction, AuditLogger
from suicide_analysis.infrastructure.auth import SessionCookie
from suicide_analysis.interfaces.http.dto.auth import (
    AuthResponseDTO,
    LoginRequestDTO,
    MessageDTO,
    SignupRequestDTO,
    UserDTO,
)
from suicide_analysis.interfaces.http.request_context import client_ip
from suicide_analysis.shared.errors import AppError
from suicide_analysis.shared.errors.validation import raise_validation_error
from suicide_analysis.shared.logging import logger
from suicide_analysis.shared.middleware.rate_limit import InMemoryRateLimiter, rate_limit

API_PREFIX = "/api/v1/suicides"

FAILURE_STATUS: dict[AuthErrorKind, HTTPStatus] = {
    AuthErrorKind.VALIDATION: HTTPStatus.BAD_REQUEST,
    AuthErrorKind.DUPLICATE_EMAIL: HTTPStatus.BAD_REQUEST,
    AuthErrorKind.INVALID_CREDENTIALS: HTTPStatus.BAD_REQUEST,
    AuthErrorKind.PERSISTENCE: HTTPStatus.INTERNAL_SERVER_ERROR,
}


def failure_to_error(failure: AuthFailure) -> AppError:
    return AppError(
        code=failure.code,
        status=FAILURE_STATUS[failure.kind],
        context=failure.context,
        message=failure.message,
    )


class AuthController:
    def __init__(
        self,
        *,
        signup_use_case: SignupUserUseCase,
        login_use_case: LoginUserUseCase,
        logout_use_case: LogoutUserUseCase,
        session_cookie: SessionCookie,
        audit: AuditLogger,
        signup_limiter: InMemoryRateLimiter | None = None,
        login_limiter: InMemoryRateLimiter | None = None,
    ) -> None:
        self._signup_use_case = signup_use_case
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case
        self._session_cookie = session_cookie
        self._audit = audit
        self._signup_limiter = signup_limiter
        self._login_limiter = login_limiter

    def _authenticated_response(self, success: AuthSuccess, status: HTTPStatus, message: str | None = None) -> tuple[Response, int]:
        payload = AuthResponseDTO(
            user=UserDTO.from_domain(success.user),
            token=success.token.token,
            message=message,
        ).model_dump(mode="json", by_alias=True, exclude_none=True)
        response = jsonify(payload)
        self._session_cookie.attach(response, success.token.token)
        return response, status

    def signup(self) -> tuple[Response, int]:
        try:
            dto = SignupRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        result = self._signup_use_case.execute(
            dto.username, dto.password, dto.email, dto.country_code
        )
        if isinstance(result, AuthFailure):
            logger.info(f"auth.signup: rejected kind={result.kind.value}")
            raise failure_to_error(result)

        self._audit.log(
            AuditAction.SIGNUP,
            user_id=result.user.id,
            ip_address=client_ip(),
            details={"username": result.user.username, "country_code": result.user.country_code},
            success=True,
        )
        return self._authenticated_response(result, HTTPStatus.CREATED)

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        ip_address = client_ip()
        result = self._login_use_case.execute(dto.email, dto.password)
        if isinstance(result, AuthFailure):
            self._audit.log(
                AuditAction.LOGIN_FAILED,
                user_id=None,
                ip_address=ip_address,
                details={"reason": result.kind.value},
                success=False,
            )
            raise failure_to_error(result)

        self._audit.log(
            AuditAction.LOGIN_SUCCESS,
            user_id=result.user.id,
            ip_address=ip_address,
            success=True,
        )
        return self._authenticated_response(result, HTTPStatus.OK, message="Login successful")

    def logout(self) -> tuple[Response, int]:
        user_id = self._logout_use_case.execute(self._session_cookie.read(request))

        if user_id is not None:
            self._audit.log(
                AuditAction.LOGOUT,
                user_id=user_id,
                ip_address=client_ip(),
                success=True,
            )

        response = jsonify(MessageDTO(message="User logged out successfully").model_dump())
        self._session_cookie.clear(response)
        return response, HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix=API_PREFIX)
        bp.add_url_rule(
            "/signup",
            view_func=rate_limit(self._signup_limiter)(self.signup),
            methods=["POST"],
            endpoint="signup",
        )
        bp.add_url_rule(
            "/login",
            view_func=rate_limit(self._login_limiter)(self.login),
            methods=["POST"],
            endpoint="login",
        )
        bp.add_url_rule("/logout", view_func=self.logout, methods=["POST"], endpoint="logout")
        return bp

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from suicide_analysis.domain.users.exceptions import InvalidCredentialsError
from suicide_analysis.domain.users.repositories import PasswordHasher, TokenService, UserRepository
from suicide_analysis.shared.errors import InfrastructureError
from suicide_analysis.shared.logging import logger

from .credentials import normalize_email
from .results import AuthErrorKind, AuthFailure, AuthResult, AuthSuccess


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, email: str | None, password: str | None) -> AuthResult:
        # Unknown email and wrong password are reported identically.
        invalid = AuthFailure.from_error(
            AuthErrorKind.INVALID_CREDENTIALS, InvalidCredentialsError()
        )
        email = normalize_email(email)
        if not email or not password:
            return invalid

        try:
            user = self._users.find_by_email(email)
            password_valid = user is not None and self._password_hasher.verify(
                password, user.password_hash
            )
            if user is None or not password_valid:
                logger.info("auth.login: invalid credentials")
                return invalid

            token = self._tokens.issue(user.id)
        except InfrastructureError as exc:
            logger.error(f"auth.login: {exc.code}: {exc.__cause__!r}")
            return AuthFailure(
                kind=AuthErrorKind.PERSISTENCE,
                message="Failed to log in",
                code="login_failed",
            )

        logger.info(f"User {user.id} logged in successfully")
        return AuthSuccess(user=user, token=token)

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from suicide_analysis.domain.users.entities import User
from suicide_analysis.domain.users.exceptions import DuplicateEmailError
from suicide_analysis.domain.users.repositories import PasswordHasher, TokenService, UserRepository
from suicide_analysis.shared.errors import InfrastructureError, MissingFieldsError
from suicide_analysis.shared.logging import logger

from .credentials import normalize_country_code, normalize_email, password_problem
from .results import AuthErrorKind, AuthFailure, AuthResult, AuthSuccess


class SignupUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenService,
        password_hasher: PasswordHasher,
        clock: Callable[[], datetime] = lambda: datetime.now(UTC),
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher
        self._clock = clock

    def execute(
        self,
        username: str | None,
        password: str | None,
        email: str | None,
        country_code: str | None,
    ) -> AuthResult:
        username = (username or "").strip()
        email = normalize_email(email)
        country_code = normalize_country_code(country_code)
        if not username or not password or not email or not country_code:
            return AuthFailure.from_error(AuthErrorKind.VALIDATION, MissingFieldsError())

        problem = password_problem(password)
        if problem is not None:
            return AuthFailure.from_error(AuthErrorKind.VALIDATION, problem)

        try:
            if self._users.find_by_email(email) is not None:
                return AuthFailure.from_error(AuthErrorKind.DUPLICATE_EMAIL, DuplicateEmailError())

            hashed = self._password_hasher.hash(password)
            user = User(
                id=0,
                username=username,
                email=email,
                password_hash=hashed,
                country_code=country_code,
                created_at=self._clock(),
            )
            persisted = self._users.add(user)
            token = self._tokens.issue(persisted.id)
        except DuplicateEmailError as exc:
            # Lost a race with a concurrent signup for the same email.
            return AuthFailure.from_error(AuthErrorKind.DUPLICATE_EMAIL, exc)
        except InfrastructureError as exc:
            logger.error(f"auth.signup: {exc.code}: {exc.__cause__!r}")
            return AuthFailure(
                kind=AuthErrorKind.PERSISTENCE,
                message="Failed to register user",
                code="signup_failed",
            )

        logger.info(f"auth.signup: ok user_id={persisted.id}")
        return AuthSuccess(user=persisted, token=token)

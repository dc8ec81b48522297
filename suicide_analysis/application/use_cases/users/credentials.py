# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from suicide_analysis.application.services.password_hashing import BCRYPT_MAX_PASSWORD_BYTES
from suicide_analysis.shared.errors import (
    PasswordTooLongError,
    PasswordTooShortError,
    ValidationError,
)

MIN_PASSWORD_LENGTH = 6


def password_problem(password: str) -> ValidationError | None:
    if len(password) < MIN_PASSWORD_LENGTH:
        return PasswordTooShortError(MIN_PASSWORD_LENGTH)
    if len(password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
        return PasswordTooLongError(BCRYPT_MAX_PASSWORD_BYTES)
    return None


def normalize_email(email: str | None) -> str:
    return (email or "").strip().lower()


def normalize_country_code(country_code: str | None) -> str:
    return (country_code or "").strip().upper()

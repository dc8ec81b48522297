# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from suicide_analysis.shared.errors.base import DomainError


class DuplicateEmailError(DomainError):
    code = "duplicate_email"
    message = "Email is already in use"


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    message = "Invalid email or password"


class UserNotFoundError(DomainError):
    code = "user_not_found"
    status = HTTPStatus.NOT_FOUND
    message = "User not found"

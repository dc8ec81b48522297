# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Outcome types returned by the signup and login use cases.

Credential flows report failures as values instead of raising; the HTTP
layer decides which status each :class:`AuthErrorKind` maps to.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from suicide_analysis.domain.users.entities import SessionToken, User
from suicide_analysis.shared.errors import AppError


class AuthErrorKind(str, Enum):
    VALIDATION = "validation"
    DUPLICATE_EMAIL = "duplicate_email"
    INVALID_CREDENTIALS = "invalid_credentials"
    PERSISTENCE = "persistence"


@dataclass(slots=True, frozen=True)
class AuthSuccess:
    user: User
    token: SessionToken


@dataclass(slots=True, frozen=True)
class AuthFailure:
    kind: AuthErrorKind
    message: str
    code: str
    context: Mapping[str, Any] | None = None

    @classmethod
    def from_error(cls, kind: AuthErrorKind, error: AppError) -> AuthFailure:
        return cls(
            kind=kind,
            message=error.message or error.code,
            code=error.code,
            context=error.context,
        )


AuthResult = AuthSuccess | AuthFailure

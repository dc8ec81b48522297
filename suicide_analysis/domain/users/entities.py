# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: int
    username: str
    email: str
    password_hash: str
    country_code: str
    created_at: datetime


@dataclass(slots=True, frozen=True)
class UserChanges:
    """Profile fields to overwrite; ``None`` keeps the stored value."""

    username: str | None = None
    email: str | None = None
    password_hash: str | None = None
    country_code: str | None = None


@dataclass(slots=True, frozen=True)
class SessionToken:

    user_id: int
    token: str
    expires_at: datetime


@dataclass(slots=True, frozen=True)
class TokenClaims:

    user_id: int
    issued_at: datetime
    expires_at: datetime

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Stateless session tokens.

Tokens are HS256 JWTs carrying ``{"userId", "iat", "exp"}``. Nothing is stored
server-side: a token is valid while its signature checks out and ``exp`` is in
the future, so logging out only drops the client's copy.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import jwt
from jose.exceptions import JOSEError

from suicide_analysis.domain.users.entities import SessionToken, TokenClaims
from suicide_analysis.domain.users.repositories import TokenService
from suicide_analysis.shared.errors import TokenSigningError, UnauthorizedError
from suicide_analysis.shared.logging import logger

USER_ID_CLAIM = "userId"

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JoseTokenService(TokenService):
    def __init__(
        self,
        secret: str,
        *,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(hours=24),
        clock: Clock = _utcnow,
    ) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = ttl
        self._clock = clock

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(self, user_id: int) -> SessionToken:
        issued_at = self._clock().replace(microsecond=0)
        expires_at = issued_at + self._ttl
        claims: dict[str, Any] = {
            USER_ID_CLAIM: user_id,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        try:
            token = jwt.encode(claims, self._secret, algorithm=self._algorithm)
        except JOSEError as exc:
            logger.error(f"tokens.issue: signing failed for user={user_id}: {exc}")
            raise TokenSigningError() from exc
        return SessionToken(user_id=user_id, token=token, expires_at=expires_at)

    def verify(self, token: str) -> TokenClaims:
        if not token:
            raise UnauthorizedError("missing_token")
        try:
            # Expiry is checked below against the injected clock.
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"verify_exp": False},
            )
        except JOSEError as exc:
            raise UnauthorizedError("invalid_token") from exc

        user_id = payload.get(USER_ID_CLAIM)
        exp = payload.get("exp")
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            raise UnauthorizedError("invalid_token")
        if not isinstance(exp, int | float):
            raise UnauthorizedError("invalid_token")

        expires_at = datetime.fromtimestamp(exp, UTC)
        if expires_at <= self._clock():
            raise UnauthorizedError("token_expired")

        iat = payload.get("iat")
        issued_at = (
            datetime.fromtimestamp(iat, UTC)
            if isinstance(iat, int | float)
            else expires_at - self._ttl
        )
        return TokenClaims(user_id=user_id, issued_at=issued_at, expires_at=expires_at)

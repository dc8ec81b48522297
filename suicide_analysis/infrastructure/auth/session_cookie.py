# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Request, Response

from suicide_analysis.shared.config import AuthConfig, SecurityConfig


class SessionCookie:
    """Carries the session token between client and server in an HttpOnly cookie."""

    def __init__(
        self,
        name: str = "jwtToken",
        *,
        max_age: int | None = 24 * 60 * 60,
        secure: bool = False,
        samesite: str = "Lax",
    ) -> None:
        self.name = name
        self._max_age = max_age
        self._secure = secure
        self._samesite = samesite

    @classmethod
    def from_config(cls, auth: AuthConfig, security: SecurityConfig) -> SessionCookie:
        return cls(
            auth.cookie_name,
            max_age=auth.token_ttl_seconds,
            secure=security.cookie_secure,
            samesite=security.cookie_samesite,
        )

    def attach(self, response: Response, token: str) -> None:
        response.set_cookie(
            self.name,
            token,
            max_age=self._max_age,
            httponly=True,
            secure=self._secure,
            samesite=self._samesite,
        )

    def clear(self, response: Response) -> None:
        response.delete_cookie(
            self.name,
            httponly=True,
            secure=self._secure,
            samesite=self._samesite,
        )

    def read(self, request: Request) -> str:
        """Bearer header wins over the cookie, mirroring how API clients send it."""
        auth_header = request.headers.get("Authorization", "")
        if auth_header.startswith("Bearer "):
            token = auth_header[7:].strip()
            if token:
                return token
        return request.cookies.get(self.name, "")

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import wraps
from typing import cast

from flask import Flask, Request, current_app, g, request

from suicide_analysis.domain.users.repositories import TokenService
from suicide_analysis.shared.errors import UnauthorizedError
from suicide_analysis.shared.logging import logger

from .session_cookie import SessionCookie
from .tokens import JoseTokenService

_TOKENS_KEY = "suicide_analysis.tokens"
_COOKIE_KEY = "suicide_analysis.session_cookie"


def init_auth(app: Flask, *, tokens: TokenService, cookie: SessionCookie) -> None:
    app.extensions[_TOKENS_KEY] = tokens
    app.extensions[_COOKIE_KEY] = cookie


class AuthedRequest(Request):
    user_id: int


def authed_request() -> AuthedRequest:
    """Return the current request cast to include authentication attributes."""
    return cast(AuthedRequest, request)


def auth_required(f):
    @wraps(f)
    def inner(*a, **kw):
        tokens: TokenService = current_app.extensions[_TOKENS_KEY]
        cookie: SessionCookie = current_app.extensions[_COOKIE_KEY]

        token = cookie.read(request)
        if not token:
            logger.warning(
                f"No Authorization header/cookie on {request.method} {request.path} "
                f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
            )
            raise UnauthorizedError("missing_token")

        try:
            claims = tokens.verify(token)
        except UnauthorizedError as exc:
            logger.warning(f"Auth failed ({exc.context}) on {request.method} {request.path}")
            raise

        request.user_id = claims.user_id
        g.user_id = claims.user_id
        logger.debug(f"Auth OK: user={claims.user_id} {request.method} {request.path}")
        return f(*a, **kw)

    return inner


__all__ = [
    "AuthedRequest",
    "JoseTokenService",
    "SessionCookie",
    "auth_required",
    "authed_request",
    "init_auth",
]

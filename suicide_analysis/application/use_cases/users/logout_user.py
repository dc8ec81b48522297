"""Use-case for ending a client session."""

from __future__ import annotations

from suicide_analysis.domain.users.repositories import TokenService
from suicide_analysis.shared.errors import UnauthorizedError
from suicide_analysis.shared.logging import logger


class LogoutUserUseCase:
    def __init__(self, *, tokens: TokenService) -> None:
        self._tokens = tokens

    def execute(self, token: str | None) -> int | None:
        """Identify who is logging out; tokens stay valid until they expire."""
        if not token:
            return None
        try:
            claims = self._tokens.verify(token)
        except UnauthorizedError:
            return None
        logger.info(f"User {claims.user_id} logged out successfully")
        return claims.user_id

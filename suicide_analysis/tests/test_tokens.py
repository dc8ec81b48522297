from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from suicide_analysis.infrastructure.auth.tokens import JoseTokenService
from suicide_analysis.shared.errors import UnauthorizedError

ISSUED_AT = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)


class MovableClock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture()
def clock() -> MovableClock:
    return MovableClock(ISSUED_AT)


@pytest.fixture()
def tokens(clock: MovableClock) -> JoseTokenService:
    return JoseTokenService("test-secret", clock=clock)


def test_issue_embeds_user_id_and_lifetime(tokens: JoseTokenService) -> None:
    issued = tokens.issue(7)

    payload = jwt.decode(
        issued.token, "test-secret", algorithms=["HS256"], options={"verify_exp": False}
    )
    assert payload["userId"] == 7
    assert payload["exp"] - payload["iat"] == 24 * 60 * 60
    assert issued.expires_at == ISSUED_AT + timedelta(hours=24)


def test_token_accepted_within_lifetime(tokens: JoseTokenService, clock: MovableClock) -> None:
    issued = tokens.issue(7)
    clock.now = ISSUED_AT + timedelta(hours=1)

    claims = tokens.verify(issued.token)

    assert claims.user_id == 7
    assert claims.issued_at == ISSUED_AT
    assert claims.expires_at == ISSUED_AT + timedelta(hours=24)


def test_token_rejected_after_expiry(tokens: JoseTokenService, clock: MovableClock) -> None:
    issued = tokens.issue(7)
    clock.now = ISSUED_AT + timedelta(hours=25)

    with pytest.raises(UnauthorizedError) as excinfo:
        tokens.verify(issued.token)

    assert excinfo.value.context == {"reason": "token_expired"}


def test_tampered_token_rejected(tokens: JoseTokenService) -> None:
    issued = tokens.issue(7)
    header, payload, signature = issued.token.split(".")
    tampered = ".".join([header, payload, signature[::-1]])

    with pytest.raises(UnauthorizedError):
        tokens.verify(tampered)


def test_token_signed_with_other_secret_rejected(clock: MovableClock) -> None:
    foreign = JoseTokenService("other-secret", clock=clock).issue(7)

    with pytest.raises(UnauthorizedError):
        JoseTokenService("test-secret", clock=clock).verify(foreign.token)


def test_token_without_user_id_rejected(tokens: JoseTokenService) -> None:
    token = jwt.encode(
        {"sub": "7", "exp": int((ISSUED_AT + timedelta(hours=1)).timestamp())},
        "test-secret",
        algorithm="HS256",
    )

    with pytest.raises(UnauthorizedError):
        tokens.verify(token)


def test_empty_token_rejected(tokens: JoseTokenService) -> None:
    with pytest.raises(UnauthorizedError) as excinfo:
        tokens.verify("")

    assert excinfo.value.context == {"reason": "missing_token"}

from __future__ import annotations

import pytest
from pydantic import ValidationError

from suicide_analysis.shared.config import AppConfig, AuthConfig, SecurityConfig


def test_defaults() -> None:
    auth = AuthConfig()
    security = SecurityConfig()

    assert auth.cookie_name == "jwtToken"
    assert auth.bcrypt_rounds == 10
    assert auth.token_ttl_seconds == 24 * 60 * 60
    assert security.cookie_samesite == "Lax"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example")
    monkeypatch.setenv("ENABLE_RATE_LIMIT", "no")
    monkeypatch.setenv("TOKEN_TTL_HOURS", "2")

    security = SecurityConfig()
    auth = AuthConfig()

    assert security.allowed_origins == ["https://a.example", "https://b.example"]
    assert security.enable_rate_limit is False
    assert auth.token_ttl_seconds == 2 * 60 * 60


def test_production_refuses_default_secret() -> None:
    with pytest.raises(SystemExit):
        AppConfig(APP_ENV="production", SECRET_KEY="dev")


def test_config_is_frozen() -> None:
    config = AppConfig(SECRET_KEY="test-secret")

    with pytest.raises(ValidationError):
        config.secret_key = "other"  # type: ignore[misc]

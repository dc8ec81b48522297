from __future__ import annotations

from flask import Flask

from suicide_analysis.shared.middleware.error_handler import configure_error_handling
from suicide_analysis.shared.middleware.rate_limit import InMemoryRateLimiter, rate_limit


class FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


def test_limiter_blocks_after_limit_and_recovers() -> None:
    clock = FakeClock()
    limiter = InMemoryRateLimiter(2, 60, clock=clock)

    assert limiter.allow("k")
    assert limiter.allow("k")
    assert not limiter.allow("k")
    assert limiter.allow("other")

    clock.now += 61
    assert limiter.allow("k")


def test_rate_limited_view_returns_429() -> None:
    app = Flask(__name__)
    configure_error_handling(app)
    limiter = InMemoryRateLimiter(1, 60)

    @app.post("/limited")
    @rate_limit(limiter)
    def limited():
        return "ok"

    with app.test_client() as client:
        assert client.post("/limited").status_code == 200
        response = client.post("/limited")

    assert response.status_code == 429
    assert response.get_json()["code"] == "rate_limited"


def test_disabled_limiter_passes_view_through() -> None:
    def view():
        return "ok"

    assert rate_limit(None)(view) is view


def test_stale_keys_are_evicted() -> None:
    clock = FakeClock()
    limiter = InMemoryRateLimiter(5, 60, clock=clock)
    for n in range(50):
        limiter.allow(f"client-{n}")
    assert limiter.tracked_keys == 50

    clock.now += 61
    limiter.allow("fresh")

    assert limiter.tracked_keys == 1


def _limited_app(limiter: InMemoryRateLimiter) -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)

    @app.post("/limited")
    @rate_limit(limiter)
    def limited():
        return "ok"

    return app


def test_forwarded_header_ignored_without_trusted_proxy() -> None:
    app = _limited_app(InMemoryRateLimiter(1, 60))

    with app.test_client() as client:
        assert client.post("/limited", headers={"X-Forwarded-For": "10.0.0.1"}).status_code == 200
        response = client.post("/limited", headers={"X-Forwarded-For": "10.0.0.2"})

    assert response.status_code == 429


def test_forwarded_header_used_behind_trusted_proxy() -> None:
    app = _limited_app(InMemoryRateLimiter(1, 60, trust_forwarded=True))

    with app.test_client() as client:
        assert client.post("/limited", headers={"X-Forwarded-For": "10.0.0.1"}).status_code == 200
        assert client.post("/limited", headers={"X-Forwarded-For": "10.0.0.2"}).status_code == 200
        response = client.post("/limited", headers={"X-Forwarded-For": "10.0.0.1"})

    assert response.status_code == 429

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from suicide_analysis.app import CONTAINER_KEY, create_app
from suicide_analysis.infrastructure.container import Container
from suicide_analysis.shared.config import AppConfig, AuthConfig, DatabaseConfig, SecurityConfig


def make_config(tmp_path: Path) -> AppConfig:
    return AppConfig(
        APP_ENV="test",
        SECRET_KEY="test-secret",
        database=DatabaseConfig(DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}"),
        auth=AuthConfig(BCRYPT_ROUNDS=4),
        security=SecurityConfig(ENABLE_RATE_LIMIT=False),
    )


@pytest.fixture()
def app_config(tmp_path: Path) -> AppConfig:
    return make_config(tmp_path)


@pytest.fixture()
def app(app_config: AppConfig) -> Iterator[Flask]:
    flask_app = create_app(app_config)
    flask_app.config.update(TESTING=True)
    yield flask_app
    container: Container = flask_app.extensions[CONTAINER_KEY]
    container.engine.dispose()


@pytest.fixture()
def container(app: Flask) -> Container:
    return app.extensions[CONTAINER_KEY]


@pytest.fixture()
def client(app: Flask) -> Iterator[FlaskClient]:
    with app.test_client() as test_client:
        yield test_client

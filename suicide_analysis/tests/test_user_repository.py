from __future__ import annotations

from datetime import UTC, datetime

import pytest

from suicide_analysis.domain.users.entities import User, UserChanges
from suicide_analysis.domain.users.exceptions import DuplicateEmailError
from suicide_analysis.infrastructure.container import Container


def _user(email: str) -> User:
    return User(
        id=0,
        username="alice",
        email=email,
        password_hash="$2b$04$hash",
        country_code="US",
        created_at=datetime(2024, 1, 1, tzinfo=UTC),
    )


def test_add_and_find(container: Container) -> None:
    repo = container.user_repository

    created = repo.add(_user("alice@example.com"))

    assert created.id > 0
    assert repo.find_by_email("alice@example.com") == repo.find_by_id(created.id)
    assert repo.find_by_email("missing@example.com") is None


def test_unique_email_enforced_by_store(container: Container) -> None:
    repo = container.user_repository
    repo.add(_user("alice@example.com"))

    with pytest.raises(DuplicateEmailError):
        repo.add(_user("alice@example.com"))


def test_update_changes_only_given_fields(container: Container) -> None:
    repo = container.user_repository
    created = repo.add(_user("alice@example.com"))

    updated = repo.update(created.id, UserChanges(username="alicia"))

    assert updated is not None
    assert updated.username == "alicia"
    assert updated.email == "alice@example.com"
    assert repo.update(999, UserChanges(username="ghost")) is None

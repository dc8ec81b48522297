# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from suicide_analysis.domain.users.entities import User, UserChanges
from suicide_analysis.domain.users.exceptions import DuplicateEmailError, UserNotFoundError
from suicide_analysis.domain.users.repositories import PasswordHasher, UserRepository
from suicide_analysis.shared.logging import logger

from .credentials import normalize_country_code, normalize_email, password_problem


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


class UpdateUserUseCase:
    def __init__(self, *, users: UserRepository, password_hasher: PasswordHasher) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(
        self,
        user_id: int,
        *,
        username: str | None = None,
        password: str | None = None,
        email: str | None = None,
        country_code: str | None = None,
    ) -> User:
        password_hash = None
        if password:
            problem = password_problem(password)
            if problem is not None:
                raise problem
            password_hash = self._password_hasher.hash(password)

        new_email = normalize_email(email) or None
        if new_email is not None:
            owner = self._users.find_by_email(new_email)
            if owner is not None and owner.id != user_id:
                raise DuplicateEmailError()

        changes = UserChanges(
            username=_blank_to_none(username),
            email=new_email,
            password_hash=password_hash,
            country_code=normalize_country_code(country_code) or None,
        )

        updated = self._users.update(user_id, changes)
        if updated is None:
            raise UserNotFoundError(context={"user_id": user_id})

        changed = [
            name
            for name in ("username", "email", "password_hash", "country_code")
            if getattr(changes, name) is not None
        ]
        logger.info(f"users.update: ok user_id={user_id} fields={changed}")
        return updated

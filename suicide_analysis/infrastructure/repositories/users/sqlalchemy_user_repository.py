# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from suicide_analysis.domain.users.entities import User as DomainUser
from suicide_analysis.domain.users.entities import UserChanges
from suicide_analysis.domain.users.exceptions import DuplicateEmailError
from suicide_analysis.domain.users.repositories import UserRepository
from suicide_analysis.infrastructure.db.models import User
from suicide_analysis.infrastructure.db.session import SessionFactory, session_scope


def _flush_unique_email(session: Session) -> None:
    try:
        session.flush()
    except IntegrityError as exc:
        raise DuplicateEmailError() from exc


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        email=row.email,
        password_hash=row.password_hash,
        country_code=row.country_code,
        created_at=row.created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: SessionFactory):
        self._session_factory = session_factory

    def find_by_email(self, email: str) -> DomainUser | None:
        with session_scope(self._session_factory) as session:
            row = session.query(User).filter(User.email == email).first()
            return _to_domain(row) if row else None

    def find_by_id(self, user_id: int) -> DomainUser | None:
        with session_scope(self._session_factory) as session:
            row = session.get(User, user_id)
            return _to_domain(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        with session_scope(self._session_factory) as session:
            row = User(
                username=user.username,
                email=user.email,
                password_hash=user.password_hash,
                country_code=user.country_code,
                created_at=user.created_at,
            )
            session.add(row)
            _flush_unique_email(session)
            session.refresh(row)
            return _to_domain(row)

    def update(self, user_id: int, changes: UserChanges) -> DomainUser | None:
        with session_scope(self._session_factory) as session:
            row = session.get(User, user_id)
            if not row:
                return None
            if changes.username is not None:
                row.username = changes.username
            if changes.email is not None:
                row.email = changes.email
            if changes.password_hash is not None:
                row.password_hash = changes.password_hash
            if changes.country_code is not None:
                row.country_code = changes.country_code
            _flush_unique_email(session)
            return _to_domain(row)

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from suicide_analysis.domain.users.entities import User
from suicide_analysis.domain.users.exceptions import UserNotFoundError
from suicide_analysis.domain.users.repositories import UserRepository


class GetUserInfoUseCase:
    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def execute(self, user_id: int) -> User:
        user = self._users.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(context={"user_id": user_id})
        return user

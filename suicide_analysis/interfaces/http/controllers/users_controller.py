# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from suicide_analysis.application.use_cases.users.get_user_info import GetUserInfoUseCase
from suicide_analysis.application.use_cases.users.update_user import UpdateUserUseCase
from suicide_analysis.infrastructure.audit import AuditAction, AuditLogger
from suicide_analysis.infrastructure.auth import auth_required, authed_request
from suicide_analysis.interfaces.http.dto.auth import UserDTO
from suicide_analysis.interfaces.http.dto.users import UpdateUserRequestDTO
from suicide_analysis.interfaces.http.request_context import client_ip
from suicide_analysis.shared.errors import InfrastructureError, PersistenceError
from suicide_analysis.shared.errors.validation import raise_validation_error
from suicide_analysis.shared.logging import logger

API_PREFIX = "/api/v1/suicides"


class UsersController:
    def __init__(
        self,
        *,
        get_user_info_use_case: GetUserInfoUseCase,
        update_user_use_case: UpdateUserUseCase,
        audit: AuditLogger,
    ) -> None:
        self._get_user_info_use_case = get_user_info_use_case
        self._update_user_use_case = update_user_use_case
        self._audit = audit

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("users", __name__, url_prefix=API_PREFIX)
        bp.add_url_rule("/user", view_func=self.get_user, methods=["GET"], endpoint="user_get")
        bp.add_url_rule("/user", view_func=self.update_user, methods=["PUT"], endpoint="user_update")
        return bp

    @auth_required
    def get_user(self):
        try:
            user = self._get_user_info_use_case.execute(authed_request().user_id)
        except PersistenceError as exc:
            raise InfrastructureError(
                code="user_fetch_failed", message="Failed to fetch user info"
            ) from exc
        return jsonify(UserDTO.from_domain(user).model_dump(mode="json", by_alias=True))

    @auth_required
    def update_user(self):
        try:
            dto = UpdateUserRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user_id = authed_request().user_id
        try:
            user = self._update_user_use_case.execute(
                user_id,
                username=dto.username,
                password=dto.password,
                email=dto.email,
                country_code=dto.country_code,
            )
        except PersistenceError as exc:
            logger.exception("users.update: store failure")
            raise InfrastructureError(
                code="user_update_failed", message="Failed to update user"
            ) from exc

        changed_fields = {
            name: value
            for name, value in (
                ("username", dto.username),
                ("country_code", dto.country_code),
            )
            if value
        }
        if dto.email:
            changed_fields["email"] = "changed"
        if dto.password:
            changed_fields["password"] = "changed"

        self._audit.log(
            AuditAction.PROFILE_UPDATED,
            user_id=user_id,
            ip_address=client_ip(),
            details=changed_fields,
            success=True,
        )
        return jsonify(UserDTO.from_domain(user).model_dump(mode="json", by_alias=True))

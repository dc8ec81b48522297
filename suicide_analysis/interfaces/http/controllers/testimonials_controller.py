# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from suicide_analysis.application.use_cases.statistics.testimonials import (
    AddTestimonialUseCase,
    ListTestimonialsUseCase,
)
from suicide_analysis.infrastructure.audit import AuditAction, AuditLogger
from suicide_analysis.infrastructure.auth import auth_required, authed_request
from suicide_analysis.interfaces.http.dto.statistics import AddTestimonialRequestDTO, TestimonialDTO
from suicide_analysis.interfaces.http.request_context import client_ip
from suicide_analysis.shared.errors import InfrastructureError, PersistenceError
from suicide_analysis.shared.errors.validation import raise_validation_error

API_PREFIX = "/api/v1/suicides"


class TestimonialsController:
    def __init__(
        self,
        *,
        list_testimonials_use_case: ListTestimonialsUseCase,
        add_testimonial_use_case: AddTestimonialUseCase,
        audit: AuditLogger,
    ) -> None:
        self._list_testimonials_use_case = list_testimonials_use_case
        self._add_testimonial_use_case = add_testimonial_use_case
        self._audit = audit

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("testimonials", __name__, url_prefix=API_PREFIX)
        bp.add_url_rule(
            "/testimonials",
            view_func=self.list_testimonials,
            methods=["GET"],
            endpoint="testimonials_list",
        )
        bp.add_url_rule(
            "/testimonial",
            view_func=self.add_testimonial,
            methods=["POST"],
            endpoint="testimonial_add",
        )
        return bp

    def list_testimonials(self):
        try:
            testimonials = self._list_testimonials_use_case.execute()
        except PersistenceError as exc:
            raise InfrastructureError(
                code="testimonials_fetch_failed", message="Failed to fetch testimonials"
            ) from exc
        return jsonify(
            [TestimonialDTO.from_domain(t).model_dump(mode="json", by_alias=True) for t in testimonials]
        )

    @auth_required
    def add_testimonial(self):
        try:
            dto = AddTestimonialRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user_id = authed_request().user_id
        try:
            created = self._add_testimonial_use_case.execute(user_id, dto.testimonial)
        except PersistenceError as exc:
            raise InfrastructureError(
                code="testimonial_add_failed", message="Failed to add testimonial"
            ) from exc

        self._audit.log(
            AuditAction.TESTIMONIAL_ADDED,
            user_id=user_id,
            ip_address=client_ip(),
            details={"testimonial_id": created.id},
            success=True,
        )
        return jsonify(TestimonialDTO.from_domain(created).model_dump(mode="json", by_alias=True)), HTTPStatus.CREATED

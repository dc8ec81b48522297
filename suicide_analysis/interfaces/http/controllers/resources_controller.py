# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from suicide_analysis.application.use_cases.statistics.resources import (
    GetCountryResourcesUseCase,
    ListResourcesUseCase,
)
from suicide_analysis.interfaces.http.dto.statistics import ResourceDTO
from suicide_analysis.shared.errors import InfrastructureError, PersistenceError

API_PREFIX = "/api/v1/suicides"


class ResourcesController:
    def __init__(
        self,
        *,
        list_resources_use_case: ListResourcesUseCase,
        country_resources_use_case: GetCountryResourcesUseCase,
    ) -> None:
        self._list_resources_use_case = list_resources_use_case
        self._country_resources_use_case = country_resources_use_case

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("resources", __name__, url_prefix=API_PREFIX)
        bp.add_url_rule("/resources", view_func=self.list_resources, methods=["GET"], endpoint="resources_list")
        bp.add_url_rule(
            "/resources/<resource_id>",
            view_func=self.country_resources,
            methods=["GET"],
            endpoint="resources_country",
        )
        return bp

    def list_resources(self):
        try:
            resources = self._list_resources_use_case.execute()
        except PersistenceError as exc:
            raise InfrastructureError(
                code="resources_fetch_failed", message="Internal server error"
            ) from exc
        return jsonify([ResourceDTO.from_domain(r).model_dump(mode="json", by_alias=True) for r in resources])

    def country_resources(self, resource_id: str):
        try:
            resources = self._country_resources_use_case.execute(resource_id)
        except PersistenceError as exc:
            raise InfrastructureError(
                code="resources_fetch_failed", message="Internal server error"
            ) from exc
        return jsonify([ResourceDTO.from_domain(r).model_dump(mode="json", by_alias=True) for r in resources])

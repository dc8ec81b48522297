# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from suicide_analysis.application.use_cases.statistics.suicides import (
    ListSuicidesUseCase,
    SearchSuicidesUseCase,
)
from suicide_analysis.interfaces.http.dto.statistics import SuicideRecordDTO, SuicidesQueryDTO
from suicide_analysis.shared.errors import InfrastructureError, PersistenceError
from suicide_analysis.shared.errors.validation import raise_validation_error

API_PREFIX = "/api/v1/suicides"


def _records_json(records):
    return jsonify(
        [SuicideRecordDTO.from_domain(r).model_dump(mode="json", by_alias=True) for r in records]
    )


class StatisticsController:
    def __init__(
        self,
        *,
        list_suicides_use_case: ListSuicidesUseCase,
        search_suicides_use_case: SearchSuicidesUseCase,
    ) -> None:
        self._list_suicides_use_case = list_suicides_use_case
        self._search_suicides_use_case = search_suicides_use_case

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("statistics", __name__, url_prefix=API_PREFIX)
        bp.add_url_rule(
            "/",
            view_func=self.list_suicides,
            methods=["GET"],
            endpoint="suicides_list",
            strict_slashes=False,
        )
        bp.add_url_rule("/data", view_func=self.search_suicides, methods=["GET"], endpoint="suicides_data")
        return bp

    def list_suicides(self):
        try:
            records = self._list_suicides_use_case.execute()
        except PersistenceError as exc:
            raise InfrastructureError(
                code="suicides_fetch_failed", message="Internal server error"
            ) from exc
        return _records_json(records)

    def search_suicides(self):
        try:
            query = SuicidesQueryDTO.model_validate(request.args.to_dict())
        except ValidationError as exc:
            raise_validation_error(exc)

        try:
            records = self._search_suicides_use_case.execute(query.to_filter())
        except PersistenceError as exc:
            raise InfrastructureError(
                code="suicides_data_failed", message="Failed to fetch suicides data"
            ) from exc
        return _records_json(records)

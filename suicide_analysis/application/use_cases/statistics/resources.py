# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from suicide_analysis.domain import Resource
from suicide_analysis.domain.statistics.repositories import ResourceRepository
from suicide_analysis.shared.errors import InvalidResourceIdError

COUNTRY_CODE_LENGTH = 3


class ListResourcesUseCase:
    def __init__(self, *, resources: ResourceRepository) -> None:
        self._resources = resources

    def execute(self) -> Sequence[Resource]:
        return self._resources.list_all()


class GetCountryResourcesUseCase:
    def __init__(self, *, resources: ResourceRepository) -> None:
        self._resources = resources

    def execute(self, resource_id: str) -> Sequence[Resource]:
        """Resources are addressed by the three-letter code of their country."""
        if len(resource_id) != COUNTRY_CODE_LENGTH:
            raise InvalidResourceIdError(resource_id)
        return self._resources.list_for_country(resource_id.upper())

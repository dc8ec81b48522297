# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from suicide_analysis.domain import SuicideFilter, SuicideRecord
from suicide_analysis.domain.statistics.repositories import SuicideRepository


class ListSuicidesUseCase:
    def __init__(self, *, suicides: SuicideRepository) -> None:
        self._suicides = suicides

    def execute(self) -> Sequence[SuicideRecord]:
        return self._suicides.list_all()


class SearchSuicidesUseCase:
    def __init__(self, *, suicides: SuicideRepository) -> None:
        self._suicides = suicides

    def execute(self, criteria: SuicideFilter) -> Sequence[SuicideRecord]:
        return self._suicides.search(criteria)

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Resource, SuicideFilter, SuicideRecord, Testimonial


class SuicideRepository(Protocol):
    def list_all(self) -> Sequence[SuicideRecord]: ...
    def search(self, criteria: SuicideFilter) -> Sequence[SuicideRecord]: ...


class ResourceRepository(Protocol):
    def list_all(self) -> Sequence[Resource]: ...
    def list_for_country(self, country_code: str) -> Sequence[Resource]: ...


class TestimonialRepository(Protocol):
    def list_all(self) -> Sequence[Testimonial]: ...
    def add(self, user_id: int, text: str) -> Testimonial: ...

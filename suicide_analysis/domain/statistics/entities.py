# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class SuicideRecord:

    id: int
    country_code: str
    stage_id: int | None
    year: int
    gender: str | None
    suicides: int
    population: int | None


@dataclass(slots=True, frozen=True)
class SuicideFilter:
    """Optional filters; ``None`` disables a criterion, the year range is inclusive."""

    stage_id: int | None = None
    year_start: int | None = None
    year_end: int | None = None
    gender: str | None = None
    country_code: str | None = None


@dataclass(slots=True, frozen=True)
class Resource:

    id: int
    country_code: str
    name: str
    phone: str | None
    url: str | None
    description: str | None


@dataclass(slots=True, frozen=True)
class Testimonial:

    id: int
    user_id: int
    testimonial: str
    created_at: datetime
    username: str | None = None

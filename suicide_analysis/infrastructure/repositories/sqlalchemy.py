# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import joinedload

from suicide_analysis.domain import Resource, SuicideFilter, SuicideRecord, Testimonial
from suicide_analysis.domain.statistics.repositories import (
    ResourceRepository,
    SuicideRepository,
    TestimonialRepository,
)
from suicide_analysis.infrastructure.db import models
from suicide_analysis.infrastructure.db.session import SessionFactory, session_scope


def _record(row: models.SuicideRecord) -> SuicideRecord:
    return SuicideRecord(
        id=row.id,
        country_code=row.country_code,
        stage_id=row.stage_id,
        year=row.year,
        gender=row.gender,
        suicides=int(row.suicides or 0),
        population=int(row.population) if row.population is not None else None,
    )


def _resource(row: models.Resource) -> Resource:
    return Resource(
        id=row.id,
        country_code=row.country_code,
        name=row.name,
        phone=row.phone,
        url=row.url,
        description=row.description,
    )


def _testimonial(row: models.Testimonial) -> Testimonial:
    return Testimonial(
        id=row.id,
        user_id=row.user_id,
        testimonial=row.testimonial,
        created_at=row.created_at,
        username=row.user.username if row.user is not None else None,
    )


class SqlAlchemySuicideRepository(SuicideRepository):
    def __init__(self, session_factory: SessionFactory):
        self._session_factory = session_factory

    def list_all(self) -> Sequence[SuicideRecord]:
        return self.search(SuicideFilter())

    def search(self, criteria: SuicideFilter) -> Sequence[SuicideRecord]:
        stmt = select(models.SuicideRecord)
        if criteria.stage_id is not None:
            stmt = stmt.where(models.SuicideRecord.stage_id == criteria.stage_id)
        if criteria.year_start is not None:
            stmt = stmt.where(models.SuicideRecord.year >= criteria.year_start)
        if criteria.year_end is not None:
            stmt = stmt.where(models.SuicideRecord.year <= criteria.year_end)
        if criteria.gender is not None:
            stmt = stmt.where(func.lower(models.SuicideRecord.gender) == criteria.gender.lower())
        if criteria.country_code is not None:
            stmt = stmt.where(models.SuicideRecord.country_code == criteria.country_code)
        stmt = stmt.order_by(
            models.SuicideRecord.year.asc(),
            models.SuicideRecord.country_code.asc(),
            models.SuicideRecord.id.asc(),
        )

        with session_scope(self._session_factory) as session:
            rows = session.scalars(stmt).all()
            return [_record(row) for row in rows]


class SqlAlchemyResourceRepository(ResourceRepository):
    def __init__(self, session_factory: SessionFactory):
        self._session_factory = session_factory

    def list_all(self) -> Sequence[Resource]:
        with session_scope(self._session_factory) as session:
            rows = session.scalars(
                select(models.Resource).order_by(
                    models.Resource.country_code.asc(), models.Resource.id.asc()
                )
            ).all()
            return [_resource(row) for row in rows]

    def list_for_country(self, country_code: str) -> Sequence[Resource]:
        with session_scope(self._session_factory) as session:
            rows = session.scalars(
                select(models.Resource)
                .where(models.Resource.country_code == country_code)
                .order_by(models.Resource.id.asc())
            ).all()
            return [_resource(row) for row in rows]


class SqlAlchemyTestimonialRepository(TestimonialRepository):
    def __init__(self, session_factory: SessionFactory):
        self._session_factory = session_factory

    def list_all(self) -> Sequence[Testimonial]:
        with session_scope(self._session_factory) as session:
            rows = session.scalars(
                select(models.Testimonial)
                .options(joinedload(models.Testimonial.user))
                .order_by(models.Testimonial.created_at.desc(), models.Testimonial.id.desc())
            ).all()
            return [_testimonial(row) for row in rows]

    def add(self, user_id: int, text: str) -> Testimonial:
        with session_scope(self._session_factory) as session:
            row = models.Testimonial(user_id=user_id, testimonial=text)
            session.add(row)
            session.flush()
            session.refresh(row)
            return _testimonial(row)

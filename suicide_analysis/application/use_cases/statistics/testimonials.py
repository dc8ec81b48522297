# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from suicide_analysis.domain import Testimonial
from suicide_analysis.domain.statistics.repositories import TestimonialRepository
from suicide_analysis.shared.errors import MissingFieldsError
from suicide_analysis.shared.logging import logger


class ListTestimonialsUseCase:
    def __init__(self, *, testimonials: TestimonialRepository) -> None:
        self._testimonials = testimonials

    def execute(self) -> Sequence[Testimonial]:
        return self._testimonials.list_all()


class AddTestimonialUseCase:
    def __init__(self, *, testimonials: TestimonialRepository) -> None:
        self._testimonials = testimonials

    def execute(self, user_id: int | None, text: str | None) -> Testimonial:
        text = (text or "").strip()
        if not user_id or not text:
            raise MissingFieldsError()
        created = self._testimonials.add(user_id, text)
        logger.info(f"testimonials.add: ok id={created.id} user_id={user_id}")
        return created

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from suicide_analysis.domain import Resource, SuicideFilter, SuicideRecord, Testimonial


class SuicidesQueryDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id_stage: int | None = None
    year_start: int | None = Field(None, ge=0, le=9999)
    year_end: int | None = Field(None, ge=0, le=9999)
    gender: str | None = Field(None, max_length=16)
    id_country: str | None = Field(None, max_length=3)

    @field_validator("*", mode="before")
    @classmethod
    def _empty_as_missing(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @model_validator(mode="after")
    def _check_year_range(self) -> SuicidesQueryDTO:
        if (
            self.year_start is not None
            and self.year_end is not None
            and self.year_start > self.year_end
        ):
            raise ValueError("year_start must not be after year_end")
        return self

    def to_filter(self) -> SuicideFilter:
        return SuicideFilter(
            stage_id=self.id_stage,
            year_start=self.year_start,
            year_end=self.year_end,
            gender=self.gender.strip().lower() if self.gender else None,
            country_code=self.id_country.strip().upper() if self.id_country else None,
        )


class SuicideRecordDTO(BaseModel):
    id: int
    country_code: str = Field(serialization_alias="countryCode")
    stage_id: int | None = Field(serialization_alias="stageId")
    year: int
    gender: str | None
    suicides: int
    population: int | None

    @classmethod
    def from_domain(cls, record: SuicideRecord) -> SuicideRecordDTO:
        return cls(
            id=record.id,
            country_code=record.country_code,
            stage_id=record.stage_id,
            year=record.year,
            gender=record.gender,
            suicides=record.suicides,
            population=record.population,
        )


class ResourceDTO(BaseModel):
    id: int
    country_code: str = Field(serialization_alias="countryCode")
    name: str
    phone: str | None
    url: str | None
    description: str | None

    @classmethod
    def from_domain(cls, resource: Resource) -> ResourceDTO:
        return cls(
            id=resource.id,
            country_code=resource.country_code,
            name=resource.name,
            phone=resource.phone,
            url=resource.url,
            description=resource.description,
        )


class AddTestimonialRequestDTO(BaseModel):
    testimonial: str | None = Field(None, max_length=5000)


class TestimonialDTO(BaseModel):
    id: int
    user_id: int = Field(serialization_alias="userId")
    username: str | None
    testimonial: str
    created_at: datetime = Field(serialization_alias="createdAt")

    @classmethod
    def from_domain(cls, testimonial: Testimonial) -> TestimonialDTO:
        return cls(
            id=testimonial.id,
            user_id=testimonial.user_id,
            username=testimonial.username,
            testimonial=testimonial.testimonial,
            created_at=testimonial.created_at,
        )

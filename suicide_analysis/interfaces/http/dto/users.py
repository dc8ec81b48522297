from __future__ import annotations

from pydantic import AliasChoices, BaseModel, Field

from suicide_analysis.interfaces.http.dto.auth import CountryCode


class UpdateUserRequestDTO(BaseModel):
    username: str | None = Field(None, max_length=64)
    password: str | None = Field(None, max_length=128)
    email: str | None = Field(None, max_length=255)
    country_code: CountryCode | None = Field(
        None,
        validation_alias=AliasChoices("countryCode", "id_country", "country_code"),
    )

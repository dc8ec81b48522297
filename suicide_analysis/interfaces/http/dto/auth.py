from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from suicide_analysis.domain.users.entities import User

CountryCode = Annotated[str, StringConstraints(strip_whitespace=True, max_length=3)]


class SignupRequestDTO(BaseModel):
    """Required-ness is checked by the signup use case so it can report it uniformly."""

    model_config = ConfigDict(populate_by_name=True)

    username: str | None = Field(None, max_length=64)
    password: str | None = Field(None, max_length=128)
    email: str | None = Field(None, max_length=255)
    country_code: CountryCode | None = Field(None, alias="countryCode")


class LoginRequestDTO(BaseModel):
    """No length caps: any bad credential must fail as invalid credentials."""

    email: str | None = None
    password: str | None = None


class UserDTO(BaseModel):
    """Public view of a user; the password hash never leaves the server."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    username: str
    email: str
    country_code: str = Field(serialization_alias="countryCode")

    @classmethod
    def from_domain(cls, user: User) -> UserDTO:
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            country_code=user.country_code,
        )


class AuthResponseDTO(BaseModel):
    user: UserDTO
    token: str
    message: str | None = None


class MessageDTO(BaseModel):
    message: str

"""Pydantic models for JSON request bodies."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class RegisterRequest(BaseModel):
    """Registration payload."""

    email: EmailStr
    username: str = Field(max_length=50)
    password: str = Field(max_length=256)


class LoginRequest(BaseModel):
    """Sign-in payload."""

    email: str
    password: str


class ArtworkCreateRequest(BaseModel):
    """New artwork payload."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(max_length=200)
    description: str = Field(max_length=5000)
    image_url: str = Field(alias="imageUrl", max_length=2048)


class ArtworkUpdateRequest(BaseModel):
    """Partial artwork update; omitted fields stay unchanged."""

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = Field(default=None, max_length=200)
    description: str | None = Field(default=None, max_length=5000)
    image_url: str | None = Field(default=None, alias="imageUrl", max_length=2048)


class RateRequest(BaseModel):
    """Rating payload from an anonymous rating session."""

    model_config = ConfigDict(populate_by_name=True)

    rating: int = Field(strict=True)
    session_id: str = Field(alias="sessionId")

"""Pydantic schemas for profile and talent endpoints."""

from datetime import datetime
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    TypeAdapter,
    field_validator,
)

_http_url = TypeAdapter(HttpUrl)

MAX_HOBBIES = 10


def _check_url(value: str) -> str:
    _http_url.validate_python(value)
    return value


def _check_optional_url(value: str) -> str:
    return value if value == "" else _check_url(value)


Url = Annotated[str, AfterValidator(_check_url)]
UrlOrEmpty = Annotated[str, AfterValidator(_check_optional_url)]
DisplayName = Annotated[str, Field(min_length=2, max_length=100)]


class SocialLinks(BaseModel):
    website: Url | None = None
    instagram: str | None = Field(None, max_length=255)
    tiktok: str | None = Field(None, max_length=255)


class ProfileUpdateRequest(BaseModel):
    """Partial profile update. Only the fields sent are changed."""

    display_name: DisplayName | None = None
    bio: str | None = Field(None, max_length=2000)
    hobbies: list[str] | None = Field(None, max_length=MAX_HOBBIES)
    social_links: SocialLinks | None = None
    avatar_url: UrlOrEmpty | None = None

    @field_validator("display_name", "hobbies")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("field may not be null")
        return v

    def changes(self) -> dict[str, Any]:
        """Return the sent fields as column values."""
        data = self.model_dump(exclude_unset=True)
        if data.get("avatar_url") == "":
            data["avatar_url"] = None
        return data


class ProfileCreateRequest(ProfileUpdateRequest):
    display_name: DisplayName
    hobbies: list[str] = Field(default_factory=list, max_length=MAX_HOBBIES)

    def changes(self) -> dict[str, Any]:
        data = self.model_dump()
        if data.get("avatar_url") == "":
            data["avatar_url"] = None
        return data


class ProfileResponse(BaseModel):
    id: str
    user_id: str
    display_name: str
    bio: str | None = None
    hobbies: list[str]
    social_links: dict[str, Any] | None = None
    avatar_url: str | None = None
    is_public: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class TalentResponse(BaseModel):
    """A public profile as shown in the talent gallery."""

    id: str
    display_name: str
    bio: str | None = None
    hobbies: list[str]
    social_links: dict[str, Any] | None = None
    avatar_url: str | None = None

    model_config = ConfigDict(from_attributes=True)


class TalentListResponse(BaseModel):
    talents: list[TalentResponse]
    total: int

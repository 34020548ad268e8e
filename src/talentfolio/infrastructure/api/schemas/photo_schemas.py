"""Pydantic schemas for admin photo records and the public gallery."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from talentfolio.infrastructure.api.schemas.profile_schemas import Url
from talentfolio.infrastructure.persistence.models import PHOTO_FOLDERS


class PhotoCreateRequest(BaseModel):
    """Register a file that is already in storage."""

    filename: str = Field(..., min_length=1, max_length=255)
    path: str = Field(..., min_length=1, max_length=1024)
    url: Url
    folder: str = Field(..., description=f"One of: {', '.join(PHOTO_FOLDERS)}")
    original_name: str = Field(..., min_length=1, max_length=255)
    size: int = Field(0, ge=0)

    @field_validator("folder")
    @classmethod
    def validate_folder(cls, v: str) -> str:
        folder = v.strip().lower()
        if folder not in PHOTO_FOLDERS:
            raise ValueError(f"Invalid folder. Allowed: {', '.join(PHOTO_FOLDERS)}")
        return folder


class PhotoResponse(BaseModel):
    id: str
    filename: str
    url: str
    folder: str
    original_name: str
    size: int
    created_at: datetime
    uploaded_by_email: str | None = None


class PhotoListResponse(BaseModel):
    photos: list[PhotoResponse]
    total: int

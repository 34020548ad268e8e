"""Pydantic schemas for admin endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from talentfolio.infrastructure.api.schemas.profile_schemas import ProfileResponse


class DashboardStats(BaseModel):
    total_users: int
    total_profiles: int
    public_profiles: int
    pending_invites: int
    total_notes: int
    total_photos: int


class DashboardResponse(BaseModel):
    admin_id: str
    admin_email: str
    stats: DashboardStats


class AdminTalentResponse(ProfileResponse):
    email: str


class AdminTalentListResponse(BaseModel):
    profiles: list[AdminTalentResponse]
    total: int


class TalentVisibilityUpdate(BaseModel):
    is_public: bool | None = None


class NoteCreateRequest(BaseModel):
    talent_user_id: str = Field(..., min_length=1)
    body: str = Field(..., min_length=1, max_length=1000)


class NoteResponse(BaseModel):
    id: str
    talent_user_id: str
    admin_user_id: str
    body: str
    created_at: datetime
    talent_display_name: str | None = None
    talent_avatar_url: str | None = None

    model_config = ConfigDict(from_attributes=True)


class NoteListResponse(BaseModel):
    notes: list[NoteResponse]
    total: int

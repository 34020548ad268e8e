"""Pydantic schemas for authentication endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from talentfolio.infrastructure.api.schemas.profile_schemas import ProfileResponse


class SignInRequest(BaseModel):
    """Request schema for password sign-in."""

    email: EmailStr = Field(..., description="Account email address")
    password: str = Field(..., min_length=1, description="Account password")


class SetPasswordRequest(BaseModel):
    """Request schema for setting the caller's password."""

    password: str = Field(
        ...,
        min_length=8,
        description="New password, at least 8 characters",
    )


class UserResponse(BaseModel):
    """Public representation of a user."""

    id: str
    email: str
    role: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class MeResponse(UserResponse):
    """The caller together with their profile, if any."""

    profile: ProfileResponse | None = None


class AuthResponse(BaseModel):
    """Response schema for a successful sign-in."""

    token: str = Field(..., description="Bearer access token")
    expires_in: int = Field(..., description="Token lifetime in seconds")
    user: UserResponse
    needs_onboarding: bool = Field(
        False, description="True when the user has not created a profile yet"
    )


class MessageResponse(BaseModel):
    success: bool = True
    message: str

"""Pydantic schemas for invite endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from talentfolio.domain.entities import InviteStatus


class InviteCreateRequest(BaseModel):
    """Request schema for creating an email invite.

    The address is validated by the invite service so that a malformed
    address is reported the same way from every entry point.
    """

    email: str = Field(..., max_length=255, description="Email address to invite")


class InviteResponse(BaseModel):
    """Invite details as shown in the admin listing. Never includes the token."""

    id: str
    email: str
    expires_at: datetime
    consumed_at: datetime | None = None
    created_at: datetime
    created_by_id: str
    status: InviteStatus

    model_config = ConfigDict(from_attributes=True)


class InviteCreatedResponse(InviteResponse):
    """Returned once, at creation; the only response that carries the token."""

    token: str = Field(..., description="Plaintext invite token")
    invite_url: str = Field(..., description="Acceptance URL for manual distribution")
    email_sent: bool = Field(False, description="Whether the invite notification was handed off")


class GenericInviteResponse(BaseModel):
    """A generic invite, for QR code distribution."""

    id: str
    token: str
    invite_url: str
    expires_at: datetime


class InviteListResponse(BaseModel):
    invites: list[InviteResponse]
    total: int


class InviteValidationResponse(BaseModel):
    valid: bool
    email: str | None = None


class InviteConsumeRequest(BaseModel):
    """Request schema for consuming an invite.

    ``email`` is required for generic invites and ignored otherwise.
    """

    email: str | None = Field(None, max_length=255)


class InviteConsumeResponse(BaseModel):
    success: bool = True
    message: str
    email: str


class InvitePruneRequest(BaseModel):
    older_than_days: int = Field(0, ge=0, description="Grace period after expiry")


class InvitePruneResponse(BaseModel):
    deleted: int

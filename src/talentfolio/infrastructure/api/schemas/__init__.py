"""Pydantic schemas for API requests and responses."""

from talentfolio.infrastructure.api.schemas.admin_schemas import (
    AdminTalentListResponse,
    AdminTalentResponse,
    DashboardResponse,
    DashboardStats,
    NoteCreateRequest,
    NoteListResponse,
    NoteResponse,
    TalentVisibilityUpdate,
)
from talentfolio.infrastructure.api.schemas.auth_schemas import (
    AuthResponse,
    MeResponse,
    MessageResponse,
    SetPasswordRequest,
    SignInRequest,
    UserResponse,
)
from talentfolio.infrastructure.api.schemas.invite_schemas import (
    GenericInviteResponse,
    InviteConsumeRequest,
    InviteConsumeResponse,
    InviteCreateRequest,
    InviteCreatedResponse,
    InviteListResponse,
    InvitePruneRequest,
    InvitePruneResponse,
    InviteResponse,
    InviteValidationResponse,
)
from talentfolio.infrastructure.api.schemas.photo_schemas import (
    PhotoCreateRequest,
    PhotoListResponse,
    PhotoResponse,
)
from talentfolio.infrastructure.api.schemas.profile_schemas import (
    ProfileCreateRequest,
    ProfileResponse,
    ProfileUpdateRequest,
    SocialLinks,
    TalentListResponse,
    TalentResponse,
)

__all__ = [
    "AdminTalentListResponse",
    "AdminTalentResponse",
    "AuthResponse",
    "DashboardResponse",
    "DashboardStats",
    "GenericInviteResponse",
    "InviteConsumeRequest",
    "InviteConsumeResponse",
    "InviteCreateRequest",
    "InviteCreatedResponse",
    "InviteListResponse",
    "InvitePruneRequest",
    "InvitePruneResponse",
    "InviteResponse",
    "InviteValidationResponse",
    "MeResponse",
    "MessageResponse",
    "NoteCreateRequest",
    "NoteListResponse",
    "NoteResponse",
    "PhotoCreateRequest",
    "PhotoListResponse",
    "PhotoResponse",
    "ProfileCreateRequest",
    "ProfileResponse",
    "ProfileUpdateRequest",
    "SetPasswordRequest",
    "SignInRequest",
    "SocialLinks",
    "TalentListResponse",
    "TalentResponse",
    "TalentVisibilityUpdate",
    "UserResponse",
]

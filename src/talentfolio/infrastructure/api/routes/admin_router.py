"""Admin API routes: dashboard, talent management and private notes."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, Response

from talentfolio.core.logging import get_logger
from talentfolio.domain.services import InviteService
from talentfolio.infrastructure.api.dependencies import AdminUser, DbSession, get_invite_service
from talentfolio.infrastructure.api.schemas import (
    AdminTalentListResponse,
    AdminTalentResponse,
    DashboardResponse,
    DashboardStats,
    NoteCreateRequest,
    NoteListResponse,
    NoteResponse,
    ProfileResponse,
    TalentVisibilityUpdate,
)
from talentfolio.infrastructure.persistence.models import NoteModel, ProfileModel, UserModel
from talentfolio.infrastructure.persistence.repositories import (
    NoteRepository,
    PhotoRepository,
    ProfileRepository,
    UserRepository,
)

logger = get_logger(__name__)

router = APIRouter()


def _talent_response(profile: ProfileModel) -> AdminTalentResponse:
    return AdminTalentResponse(
        **ProfileResponse.model_validate(profile).model_dump(),
        email=profile.user.email,
    )


def _note_response(note: NoteModel, talent: UserModel | None = None) -> NoteResponse:
    talent = talent or note.talent_user
    profile = talent.profile if talent else None
    return NoteResponse(
        id=note.id,
        talent_user_id=note.talent_user_id,
        admin_user_id=note.admin_user_id,
        body=note.body,
        created_at=note.created_at,
        talent_display_name=profile.display_name if profile else None,
        talent_avatar_url=profile.avatar_url if profile else None,
    )


def _not_found(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": "not_found", "message": message},
    )


@router.get("/dashboard", response_model=DashboardResponse)
async def dashboard(
    admin: AdminUser,
    session: DbSession,
    invites: Annotated[InviteService, Depends(get_invite_service)],
) -> DashboardResponse:
    """Summary counts for the admin dashboard."""
    profiles = ProfileRepository(session)
    stats = DashboardStats(
        total_users=await UserRepository(session).count(),
        total_profiles=await profiles.count(),
        public_profiles=await profiles.count(public_only=True),
        pending_invites=await invites.count_pending(),
        total_notes=await NoteRepository(session).count(),
        total_photos=await PhotoRepository(session).count(),
    )
    return DashboardResponse(admin_id=admin.user_id, admin_email=admin.email, stats=stats)


@router.get("/talent", response_model=AdminTalentListResponse)
async def list_talent(admin: AdminUser, session: DbSession) -> AdminTalentListResponse:
    """List every profile, public or not, with the owner's email."""
    profiles = await ProfileRepository(session).list_all()
    return AdminTalentListResponse(
        profiles=[_talent_response(profile) for profile in profiles],
        total=len(profiles),
    )


@router.patch(
    "/talent/{profile_id}",
    response_model=AdminTalentResponse,
    responses={404: {"description": "Profile not found"}},
)
async def update_talent(
    profile_id: str,
    request: TalentVisibilityUpdate,
    admin: AdminUser,
    session: DbSession,
) -> AdminTalentResponse | JSONResponse:
    """Publish or hide a profile in the public gallery."""
    repo = ProfileRepository(session)
    profile = await repo.get_by_id(profile_id)
    if profile is None:
        return _not_found("Profile not found")

    if request.is_public is not None:
        await repo.update(profile, is_public=request.is_public)
        await session.commit()
        logger.info(
            "Profile visibility changed",
            profile_id=profile.id,
            is_public=profile.is_public,
            admin_id=admin.user_id,
        )
    return _talent_response(profile)


@router.get("/notes", response_model=NoteListResponse)
async def list_notes(admin: AdminUser, session: DbSession) -> NoteListResponse:
    """List the caller's own notes, newest first."""
    notes = await NoteRepository(session).list_by_admin(admin.user_id)
    return NoteListResponse(notes=[_note_response(note) for note in notes], total=len(notes))


@router.post(
    "/notes",
    status_code=status.HTTP_201_CREATED,
    response_model=NoteResponse,
    responses={404: {"description": "Talent not found"}},
)
async def create_note(
    request: NoteCreateRequest,
    admin: AdminUser,
    session: DbSession,
) -> NoteResponse | JSONResponse:
    talent = await UserRepository(session).get_by_id(request.talent_user_id)
    if talent is None:
        return _not_found("Talent not found")

    note = await NoteRepository(session).create(talent.id, admin.user_id, request.body)
    await session.commit()

    logger.info("Note created", note_id=note.id, talent_user_id=talent.id)
    return _note_response(note, talent)


@router.delete(
    "/notes/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"description": "Note not found"}},
)
async def delete_note(note_id: str, admin: AdminUser, session: DbSession) -> Response:
    """Delete one of the caller's notes. Other admins' notes are not visible."""
    deleted = await NoteRepository(session).delete_owned(note_id, admin.user_id)
    if not deleted:
        return _not_found("Note not found")
    await session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)

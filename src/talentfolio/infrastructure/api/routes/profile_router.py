"""Profile API routes for the signed-in talent."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from talentfolio.core.logging import get_logger
from talentfolio.infrastructure.api.dependencies import AuthenticatedUser, DbSession
from talentfolio.infrastructure.api.schemas import (
    ProfileCreateRequest,
    ProfileResponse,
    ProfileUpdateRequest,
)
from talentfolio.infrastructure.persistence.repositories import ProfileRepository

logger = get_logger(__name__)

router = APIRouter()


def _no_profile() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": "not_found", "message": "Profile not found"},
    )


@router.get("", response_model=ProfileResponse, responses={404: {"description": "No profile yet"}})
async def get_profile(
    current_user: AuthenticatedUser, session: DbSession
) -> ProfileResponse | JSONResponse:
    profile = await ProfileRepository(session).get_by_user_id(current_user.user_id)
    if profile is None:
        return _no_profile()
    return ProfileResponse.model_validate(profile)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ProfileResponse,
    responses={409: {"description": "Profile already exists"}},
)
async def create_profile(
    request: ProfileCreateRequest,
    current_user: AuthenticatedUser,
    session: DbSession,
) -> ProfileResponse | JSONResponse:
    """Create the caller's profile. New profiles are not public."""
    repo = ProfileRepository(session)
    if await repo.get_by_user_id(current_user.user_id) is not None:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"error": "conflict", "message": "Profile already exists"},
        )

    profile = await repo.create(current_user.user_id, **request.changes())
    await session.commit()

    logger.info("Profile created", user_id=current_user.user_id, profile_id=profile.id)
    return ProfileResponse.model_validate(profile)


@router.patch(
    "",
    response_model=ProfileResponse,
    responses={404: {"description": "No profile yet"}},
)
async def update_profile(
    request: ProfileUpdateRequest,
    current_user: AuthenticatedUser,
    session: DbSession,
) -> ProfileResponse | JSONResponse:
    """Update only the fields present in the request."""
    repo = ProfileRepository(session)
    profile = await repo.get_by_user_id(current_user.user_id)
    if profile is None:
        return _no_profile()

    changes = request.changes()
    await repo.update(profile, **changes)
    await session.commit()

    logger.info("Profile updated", profile_id=profile.id, fields=sorted(changes))
    return ProfileResponse.model_validate(profile)

"""Public talent gallery routes."""

from fastapi import APIRouter, Query

from talentfolio.infrastructure.api.dependencies import DbSession
from talentfolio.infrastructure.api.schemas import TalentListResponse, TalentResponse
from talentfolio.infrastructure.persistence.repositories import ProfileRepository

router = APIRouter()


@router.get("", response_model=TalentListResponse)
async def list_talents(
    session: DbSession,
    search: str | None = Query(None, max_length=100, description="Filter by display name"),
) -> TalentListResponse:
    """List public profiles, most recently updated first."""
    profiles = await ProfileRepository(session).list_public(search)
    return TalentListResponse(
        talents=[TalentResponse.model_validate(profile) for profile in profiles],
        total=len(profiles),
    )

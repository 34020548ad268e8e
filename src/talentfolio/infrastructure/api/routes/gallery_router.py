"""Public photo gallery routes."""

from fastapi import APIRouter, Query

from talentfolio.infrastructure.api.dependencies import DbSession
from talentfolio.infrastructure.api.routes.admin_photos_router import photo_response
from talentfolio.infrastructure.api.schemas import PhotoListResponse
from talentfolio.infrastructure.persistence.repositories import PhotoRepository

router = APIRouter()


@router.get("/photos", response_model=PhotoListResponse)
async def list_gallery_photos(
    session: DbSession,
    search: str | None = Query(None, max_length=100, description="Filter by file name"),
) -> PhotoListResponse:
    """List photos in the public gallery folder, newest first."""
    photos = await PhotoRepository(session).list_gallery(search)
    return PhotoListResponse(photos=[photo_response(p) for p in photos], total=len(photos))

"""Admin photo routes.

Photo files are stored by an external provider; these routes manage the
records that point at them.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse, Response

from talentfolio.core.logging import get_logger
from talentfolio.infrastructure.api.dependencies import AdminUser, DbSession
from talentfolio.infrastructure.api.schemas import (
    PhotoCreateRequest,
    PhotoListResponse,
    PhotoResponse,
)
from talentfolio.infrastructure.persistence.models import PhotoModel
from talentfolio.infrastructure.persistence.repositories import PhotoRepository

logger = get_logger(__name__)

router = APIRouter()


def photo_response(photo: PhotoModel) -> PhotoResponse:
    return PhotoResponse(
        id=photo.id,
        filename=photo.filename,
        url=photo.url,
        folder=photo.folder,
        original_name=photo.original_name,
        size=photo.size,
        created_at=photo.created_at,
        uploaded_by_email=photo.uploaded_by.email if photo.uploaded_by else None,
    )


@router.get("", response_model=PhotoListResponse)
async def list_photos(admin: AdminUser, session: DbSession) -> PhotoListResponse:
    """List photos in every folder, newest first."""
    photos = await PhotoRepository(session).list_all()
    return PhotoListResponse(photos=[photo_response(p) for p in photos], total=len(photos))


@router.post("", status_code=status.HTTP_201_CREATED, response_model=PhotoResponse)
async def create_photo(
    request: PhotoCreateRequest,
    admin: AdminUser,
    session: DbSession,
) -> PhotoResponse:
    """Record a photo that was put in storage."""
    repo = PhotoRepository(session)
    photo = await repo.create(admin.user_id, **request.model_dump())
    await session.commit()
    await session.refresh(photo, attribute_names=["uploaded_by"])
    logger.info("Photo recorded", photo_id=photo.id, folder=photo.folder, admin_id=admin.user_id)
    return photo_response(photo)


@router.delete(
    "/{photo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"description": "Photo not found"}},
)
async def delete_photo(photo_id: str, admin: AdminUser, session: DbSession) -> Response:
    """Delete a photo record."""
    repo = PhotoRepository(session)
    photo = await repo.get_by_id(photo_id)
    if photo is None:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": "not_found", "message": "Photo not found"},
        )

    path = photo.path
    await repo.delete(photo)
    await session.commit()
    logger.info("Photo deleted", photo_id=photo_id, path=path, admin_id=admin.user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

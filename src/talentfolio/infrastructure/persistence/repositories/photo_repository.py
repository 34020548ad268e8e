"""Photo repository for database operations."""

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from talentfolio.infrastructure.persistence.models import GALLERY_FOLDER, PhotoModel


class PhotoRepository:
    """Repository for admin photo records."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(
        self,
        uploaded_by_id: str,
        *,
        filename: str,
        path: str,
        url: str,
        folder: str,
        original_name: str,
        size: int = 0,
    ) -> PhotoModel:
        photo = PhotoModel(
            uploaded_by_id=uploaded_by_id,
            filename=filename,
            path=path,
            url=url,
            folder=folder,
            original_name=original_name,
            size=size,
        )
        self.session.add(photo)
        await self.session.flush()
        return photo

    async def get_by_id(self, photo_id: str) -> PhotoModel | None:
        result = await self.session.execute(
            select(PhotoModel).where(PhotoModel.id == photo_id)
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> list[PhotoModel]:
        """List every photo, newest first."""
        result = await self.session.execute(
            select(PhotoModel).order_by(PhotoModel.created_at.desc())
        )
        return list(result.scalars().all())

    async def list_gallery(self, search: str | None = None) -> list[PhotoModel]:
        """List public gallery photos, newest first.

        Args:
            search: Optional case-insensitive substring of the original or
                stored file name.
        """
        query = select(PhotoModel).where(PhotoModel.folder == GALLERY_FOLDER)
        if search and search.strip():
            term = search.strip().lower()
            query = query.where(
                or_(
                    func.lower(PhotoModel.original_name).contains(term),
                    func.lower(PhotoModel.filename).contains(term),
                )
            )
        query = query.order_by(PhotoModel.created_at.desc())
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def delete(self, photo: PhotoModel) -> None:
        await self.session.delete(photo)
        await self.session.flush()

    async def count(self) -> int:
        result = await self.session.execute(select(func.count(PhotoModel.id)))
        return result.scalar_one()

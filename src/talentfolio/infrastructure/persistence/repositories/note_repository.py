"""Note repository for database operations."""

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from talentfolio.infrastructure.persistence.models import NoteModel


class NoteRepository:
    """Repository for admin note database operations."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(self, talent_user_id: str, admin_user_id: str, body: str) -> NoteModel:
        note = NoteModel(
            talent_user_id=talent_user_id,
            admin_user_id=admin_user_id,
            body=body,
        )
        self.session.add(note)
        await self.session.flush()
        return note

    async def list_by_admin(self, admin_user_id: str) -> list[NoteModel]:
        """List the notes written by one administrator, newest first."""
        result = await self.session.execute(
            select(NoteModel)
            .where(NoteModel.admin_user_id == admin_user_id)
            .order_by(NoteModel.created_at.desc())
        )
        return list(result.scalars().all())

    async def delete_owned(self, note_id: str, admin_user_id: str) -> bool:
        """Delete a note only if it belongs to the given administrator.

        Returns:
            True if a note was deleted, False if not found or not owned.
        """
        result = await self.session.execute(
            delete(NoteModel).where(
                NoteModel.id == note_id,
                NoteModel.admin_user_id == admin_user_id,
            )
        )
        await self.session.flush()
        return result.rowcount > 0

    async def count(self) -> int:
        result = await self.session.execute(select(func.count(NoteModel.id)))
        return result.scalar_one()

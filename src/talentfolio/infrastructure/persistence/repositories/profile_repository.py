"""Profile repository for database operations."""

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from talentfolio.infrastructure.persistence.models import ProfileModel


class ProfileRepository:
    """Repository for talent profile database operations."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_id(self, profile_id: str) -> ProfileModel | None:
        result = await self.session.execute(
            select(ProfileModel).where(ProfileModel.id == profile_id)
        )
        return result.scalar_one_or_none()

    async def get_by_user_id(self, user_id: str) -> ProfileModel | None:
        result = await self.session.execute(
            select(ProfileModel).where(ProfileModel.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def create(self, user_id: str, **fields: Any) -> ProfileModel:
        """Create a profile. New profiles are private."""
        profile = ProfileModel(user_id=user_id, is_public=False, **fields)
        self.session.add(profile)
        await self.session.flush()
        return profile

    async def update(self, profile: ProfileModel, **fields: Any) -> ProfileModel:
        """Apply a partial update to a profile."""
        for name, value in fields.items():
            setattr(profile, name, value)
        await self.session.flush()
        return profile

    async def list_public(self, search: str | None = None) -> list[ProfileModel]:
        """List public profiles, most recently updated first.

        Args:
            search: Optional case-insensitive substring of the display name.
        """
        query = select(ProfileModel).where(ProfileModel.is_public.is_(True))
        if search:
            query = query.where(
                func.lower(ProfileModel.display_name).contains(search.strip().lower())
            )
        query = query.order_by(ProfileModel.updated_at.desc())
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def list_all(self) -> list[ProfileModel]:
        """List every profile, most recently updated first."""
        result = await self.session.execute(
            select(ProfileModel).order_by(ProfileModel.updated_at.desc())
        )
        return list(result.scalars().all())

    async def count(self, public_only: bool = False) -> int:
        query = select(func.count(ProfileModel.id))
        if public_only:
            query = query.where(ProfileModel.is_public.is_(True))
        result = await self.session.execute(query)
        return result.scalar_one()

"""User repository for database operations."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from talentfolio.infrastructure.persistence.models import UserModel, UserRole


class UserRepository:
    """Repository for user database operations."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_id(self, user_id: str) -> UserModel | None:
        result = await self.session.execute(
            select(UserModel).where(UserModel.id == user_id)
        )
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> UserModel | None:
        """Look up a user by email address (case-insensitive)."""
        result = await self.session.execute(
            select(UserModel).where(UserModel.email == email.strip().lower())
        )
        return result.scalar_one_or_none()

    async def create(
        self,
        email: str,
        role: UserRole = UserRole.USER,
        password_hash: str | None = None,
    ) -> UserModel:
        user = UserModel(
            email=email.strip().lower(),
            role=role,
            password_hash=password_hash,
        )
        self.session.add(user)
        await self.session.flush()
        return user

    async def get_or_create(
        self, email: str, role: UserRole = UserRole.USER
    ) -> UserModel:
        """Return the user with this email, creating it when missing.

        An existing user keeps its role.
        """
        user = await self.get_by_email(email)
        if user is None:
            user = await self.create(email, role=role)
        return user

    async def count(self) -> int:
        result = await self.session.execute(select(func.count(UserModel.id)))
        return result.scalar_one()

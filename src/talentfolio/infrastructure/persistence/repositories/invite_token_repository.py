"""Invite token repository: the durable invite store."""

import uuid
from datetime import datetime

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from talentfolio.core.clock import Clock, ensure_utc, utcnow
from talentfolio.domain.entities.invite_token import INVITE_TTL, InviteToken
from talentfolio.domain.exceptions import (
    AlreadyConsumedError,
    DuplicateTokenError,
    NotFoundError,
)
from talentfolio.domain.services.token_generator import TokenGenerator, token_generator
from talentfolio.infrastructure.persistence.models import InviteTokenModel


class InviteTokenRepository:
    """Repository for invite token database operations.

    Writes are flushed, not committed; the caller owns the transaction.
    """

    def __init__(
        self,
        session: AsyncSession,
        generator: TokenGenerator = token_generator,
        clock: Clock = utcnow,
    ) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
            generator: Source of new tokens.
            clock: Source of the current time when none is passed in.
        """
        self.session = session
        self.generator = generator
        self.clock = clock

    @staticmethod
    def _to_entity(model: InviteTokenModel) -> InviteToken:
        """Convert infrastructure model to domain entity."""
        return InviteToken(
            id=model.id,
            email=model.email,
            token=model.token,
            expires_at=ensure_utc(model.expires_at),
            created_at=ensure_utc(model.created_at),
            created_by_id=model.created_by_id,
            consumed_at=ensure_utc(model.consumed_at),
        )

    async def _token_exists(self, token: str) -> bool:
        result = await self.session.execute(
            select(InviteTokenModel.id).where(InviteTokenModel.token == token).limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def create(
        self,
        email: str,
        created_by_id: str,
        *,
        now: datetime | None = None,
    ) -> InviteToken:
        """Insert a new invite with a fresh token that expires in seven days.

        Args:
            email: Invitee address, empty for a generic invite.
            created_by_id: ID of the creating administrator.
            now: Creation time. Defaults to the repository clock.

        Returns:
            The stored invite.

        Raises:
            DuplicateTokenError: If the generated token already exists.
                The pending insert is rolled back; nothing is overwritten.
        """
        now = now or self.clock()
        model = InviteTokenModel(
            id=str(uuid.uuid4()),
            email=email,
            token=self.generator.generate(),
            expires_at=now + INVITE_TTL,
            created_at=now,
            created_by_id=created_by_id,
        )
        self.session.add(model)
        try:
            await self.session.flush()
        except IntegrityError as e:
            await self.session.rollback()
            if await self._token_exists(model.token):
                raise DuplicateTokenError() from e
            raise
        return self._to_entity(model)

    async def get_by_token(self, token: str) -> InviteToken | None:
        """Exact-match lookup by token.

        Always reads the stored row; consumption is written with a bulk
        UPDATE that does not touch objects already in the session.

        Args:
            token: Invite token.

        Returns:
            The invite if found, None otherwise.
        """
        result = await self.session.execute(
            select(InviteTokenModel)
            .where(InviteTokenModel.token == token)
            .execution_options(populate_existing=True)
        )
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def mark_consumed(self, token: str, *, now: datetime | None = None) -> datetime:
        """Set ``consumed_at`` on an unused invite.

        A single conditional UPDATE, so at most one caller can ever win for
        a given token. Expiry is not checked here.

        Args:
            token: Invite token.
            now: Consumption time. Defaults to the repository clock.

        Returns:
            The consumption timestamp that was written.

        Raises:
            NotFoundError: If no invite has this token.
            AlreadyConsumedError: If the invite was consumed already.
        """
        now = now or self.clock()
        result = await self.session.execute(
            update(InviteTokenModel)
            .where(
                InviteTokenModel.token == token,
                InviteTokenModel.consumed_at.is_(None),
            )
            .values(consumed_at=now)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 1:
            return now
        if await self._token_exists(token):
            raise AlreadyConsumedError()
        raise NotFoundError()

    async def list_recent(self, limit: int) -> list[InviteToken]:
        """List invites ordered by creation time, newest first.

        Args:
            limit: Maximum number of invites to return.
        """
        result = await self.session.execute(
            select(InviteTokenModel)
            .order_by(InviteTokenModel.created_at.desc(), InviteTokenModel.id.desc())
            .limit(limit)
            .execution_options(populate_existing=True)
        )
        return [self._to_entity(model) for model in result.scalars().all()]

    async def count_pending(self, now: datetime) -> int:
        """Count invites that are unused and not yet expired at ``now``."""
        result = await self.session.execute(
            select(func.count(InviteTokenModel.id)).where(
                InviteTokenModel.consumed_at.is_(None),
                InviteTokenModel.expires_at > now,
            )
        )
        return result.scalar_one()

    async def delete_expired_before(self, cutoff: datetime) -> int:
        """Delete unused invites whose expiry is earlier than ``cutoff``.

        Returns:
            Number of invites deleted.
        """
        result = await self.session.execute(
            delete(InviteTokenModel)
            .where(
                InviteTokenModel.consumed_at.is_(None),
                InviteTokenModel.expires_at < cutoff,
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

"""Invite lifecycle management.

Creates, validates and consumes invite tokens against the invite store.
The service keeps no state of its own; every decision is made from what
the store returns at the time of the call.
"""

from dataclasses import replace
from datetime import timedelta
from typing import TYPE_CHECKING

from email_validator import EmailNotValidError, validate_email
from sqlalchemy.ext.asyncio import AsyncSession

from talentfolio.core.clock import Clock, utcnow
from talentfolio.core.logging import get_logger
from talentfolio.domain.entities.invite_token import InviteToken, InviteValidation
from talentfolio.domain.exceptions import (
    DuplicateTokenError,
    InvalidInputError,
    InviteTokenError,
    NotFoundError,
)

if TYPE_CHECKING:
    from talentfolio.infrastructure.persistence.repositories.invite_token_repository import (
        InviteTokenRepository,
    )

logger = get_logger(__name__)

# One transparent regeneration after a token collision
MAX_CREATE_ATTEMPTS = 2


def normalize_invite_email(email: str | None) -> str:
    """Normalize an invite address.

    An empty address is allowed and marks a generic invite.

    Raises:
        InvalidInputError: If a non-empty address is malformed.
    """
    normalized = (email or "").strip().lower()
    if not normalized:
        return ""
    try:
        validate_email(normalized, check_deliverability=False)
    except EmailNotValidError as e:
        raise InvalidInputError(f"Invalid email address: {e}") from e
    return normalized


def _token_prefix(token: str) -> str:
    return token[:8]


class InviteService:
    """Service orchestrating the invite token lifecycle."""

    def __init__(
        self,
        session: AsyncSession,
        repository: "InviteTokenRepository",
        clock: Clock = utcnow,
    ) -> None:
        """Initialize the invite service.

        Args:
            session: SQLAlchemy async session shared with the repository.
            repository: Invite store.
            clock: Source of the current time.
        """
        self.session = session
        self.repository = repository
        self.clock = clock

    async def create_invite(self, email: str, admin_id: str) -> InviteToken:
        """Create a new invite on behalf of an administrator.

        The caller is trusted to have passed the admin gate already.

        Args:
            email: Invitee address, or "" for a generic invite.
            admin_id: ID of the creating administrator.

        Returns:
            The stored invite, including the plaintext token.

        Raises:
            InvalidInputError: If the email is malformed or admin_id is missing.
            DuplicateTokenError: If the retry after a collision collides again.
        """
        normalized_email = normalize_invite_email(email)
        if not admin_id:
            raise InvalidInputError("Creator ID is required")

        for attempt in range(1, MAX_CREATE_ATTEMPTS + 1):
            try:
                invite = await self.repository.create(
                    normalized_email, admin_id, now=self.clock()
                )
                break
            except DuplicateTokenError:
                logger.warning("Invite token collision", attempt=attempt)
                if attempt == MAX_CREATE_ATTEMPTS:
                    raise

        await self.session.commit()

        logger.info(
            "Invite created",
            invite_id=invite.id,
            email=invite.email or "<generic>",
            created_by_id=admin_id,
            expires_at=invite.expires_at.isoformat(),
        )
        return invite

    async def validate(self, token: str) -> InviteValidation:
        """Check whether a token can currently be used. Read-only."""
        invite = await self.repository.get_by_token(token) if token else None
        if invite is None:
            return InviteValidation.rejected(NotFoundError())

        reason = invite.rejection(self.clock())
        if reason is not None:
            return InviteValidation.rejected(reason, invite)
        return InviteValidation.accepted(invite)

    async def consume(self, token: str) -> InviteToken:
        """Mark a token as used.

        The token is validated again right before the write; the write
        itself only succeeds for the first of any concurrent callers.

        Returns:
            The invite with ``consumed_at`` set.

        Raises:
            NotFoundError, AlreadyConsumedError, ExpiredError.
        """
        result = await self.validate(token)
        if not result.valid:
            logger.info(
                "Invite consumption rejected",
                token_prefix=_token_prefix(token),
                reason=result.reason.code,
            )
            raise result.reason

        try:
            consumed_at = await self.repository.mark_consumed(token, now=self.clock())
        except InviteTokenError as e:
            await self.session.rollback()
            logger.info(
                "Invite consumption lost race",
                invite_id=result.invite.id,
                reason=e.code,
            )
            raise
        await self.session.commit()

        logger.info("Invite consumed", invite_id=result.invite.id)
        return replace(result.invite, consumed_at=consumed_at)

    async def list_recent(self, limit: int) -> list[InviteToken]:
        """List the most recently created invites, newest first."""
        if limit < 1:
            raise InvalidInputError("limit must be at least 1")
        return await self.repository.list_recent(limit)

    async def count_pending(self) -> int:
        """Count invites that are currently usable."""
        return await self.repository.count_pending(self.clock())

    async def prune_expired(self, older_than: timedelta = timedelta(0)) -> int:
        """Delete unused invites that expired before ``now - older_than``.

        Consumed invites are kept as the record of who onboarded.

        Returns:
            Number of invites deleted.
        """
        if older_than < timedelta(0):
            raise InvalidInputError("older_than must not be negative")
        cutoff = self.clock() - older_than
        deleted = await self.repository.delete_expired_before(cutoff)
        await self.session.commit()
        logger.info("Pruned expired invites", deleted=deleted, cutoff=cutoff.isoformat())
        return deleted

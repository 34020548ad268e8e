"""Invite token entity.

An invite token is a single-use credential that lets a new talent onboard.
Validity is never stored: it is derived from ``consumed_at`` and
``expires_at`` every time it is checked.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

from talentfolio.domain.exceptions import (
    AlreadyConsumedError,
    ExpiredError,
    InviteTokenError,
)

INVITE_TTL = timedelta(days=7)


class InviteStatus(str, Enum):
    """Derived lifecycle state of an invite."""

    PENDING = "pending"
    CONSUMED = "consumed"
    EXPIRED = "expired"


@dataclass
class InviteToken:
    """Invite token entity.

    Attributes:
        id: Unique identifier (UUID string).
        email: Target address, or an empty string for a generic invite.
        token: Opaque random lookup key handed to the invitee.
        expires_at: Creation time plus seven days.
        created_at: When the invite was created.
        created_by_id: ID of the administrator who created it.
        consumed_at: When the invite was used, ``None`` while unused.
    """

    id: str
    email: str
    token: str
    expires_at: datetime
    created_at: datetime
    created_by_id: str
    consumed_at: datetime | None = None

    @property
    def is_consumed(self) -> bool:
        return self.consumed_at is not None

    @property
    def is_generic(self) -> bool:
        """Generic invites are not tied to one address (QR distribution)."""
        return self.email == ""

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at <= now

    def rejection(self, now: datetime) -> InviteTokenError | None:
        """Return why this invite cannot be used at ``now``, if anything.

        Consumption is reported before expiry.
        """
        if self.is_consumed:
            return AlreadyConsumedError()
        if self.is_expired(now):
            return ExpiredError()
        return None

    def status(self, now: datetime) -> InviteStatus:
        if self.is_consumed:
            return InviteStatus.CONSUMED
        if self.is_expired(now):
            return InviteStatus.EXPIRED
        return InviteStatus.PENDING


@dataclass(frozen=True)
class InviteValidation:
    """Outcome of validating a token."""

    valid: bool
    invite: InviteToken | None = None
    reason: InviteTokenError | None = None

    @property
    def email(self) -> str | None:
        return self.invite.email if self.invite is not None else None

    @classmethod
    def accepted(cls, invite: InviteToken) -> "InviteValidation":
        return cls(valid=True, invite=invite)

    @classmethod
    def rejected(
        cls, reason: InviteTokenError, invite: InviteToken | None = None
    ) -> "InviteValidation":
        return cls(valid=False, invite=invite, reason=reason)

"""SQLAlchemy model for the invite_tokens table."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from talentfolio.infrastructure.persistence.database import Base


class InviteTokenModel(Base):
    """SQLAlchemy model for the invite_tokens table.

    Rows are never updated except to set ``consumed_at`` once.

    Attributes:
        id: Primary key (UUID string).
        email: Invitee address, empty for generic invites.
        token: Unique random token presented by the invitee.
        expires_at: Timestamp when the invite stops being usable.
        consumed_at: Timestamp when the invite was used.
        created_at: Timestamp when the invite was created.
        created_by_id: Foreign key to the creating administrator.
    """

    __tablename__ = "invite_tokens"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        comment="Invite ID (UUID)",
    )
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="",
        comment="Invitee email address, empty for generic invites",
    )
    token: Mapped[str] = mapped_column(
        String(128),
        nullable=False,
        unique=True,
        index=True,
        comment="Secure random token for accepting the invite",
    )
    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="Timestamp when the invite expires",
    )
    consumed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        comment="Timestamp when the invite was consumed",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )
    created_by_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
        comment="Foreign key to users table (creating admin)",
    )

    __table_args__ = (
        Index("ix_invite_tokens_created_at", "created_at"),
        Index("ix_invite_tokens_expires_at", "expires_at"),
    )

    def __repr__(self) -> str:
        return f"<InviteToken(id={self.id}, email={self.email!r})>"

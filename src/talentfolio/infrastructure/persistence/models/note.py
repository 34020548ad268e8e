"""SQLAlchemy model for the notes table."""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from talentfolio.core.clock import utcnow
from talentfolio.infrastructure.persistence.database import Base


class NoteModel(Base):
    """Private note an administrator keeps about a talent."""

    __tablename__ = "notes"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    talent_user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    admin_user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    body: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    talent_user: Mapped["UserModel"] = relationship(  # noqa: F821
        "UserModel",
        foreign_keys=[talent_user_id],
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, talent_user_id={self.talent_user_id})>"

"""SQLAlchemy model for the photos table."""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from talentfolio.core.clock import utcnow
from talentfolio.infrastructure.persistence.database import Base

GALLERY_FOLDER = "gallery"
PHOTO_FOLDERS = (GALLERY_FOLDER, "marketing", "events", "misc")


class PhotoModel(Base):
    """Record of an image an administrator put in storage.

    Only photos in the gallery folder are shown publicly. The file itself
    lives with the storage provider at ``path``.

    Attributes:
        filename: Stored file name.
        path: Provider path, used to remove the file.
        url: Public URL of the file.
        folder: One of ``PHOTO_FOLDERS``.
        original_name: File name as uploaded.
        size: File size in bytes.
        uploaded_by_id: Administrator who added the photo.
    """

    __tablename__ = "photos"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    filename: Mapped[str] = mapped_column(String(255), nullable=False)
    path: Mapped[str] = mapped_column(String(1024), nullable=False)
    url: Mapped[str] = mapped_column(String(2048), nullable=False)
    folder: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    original_name: Mapped[str] = mapped_column(String(255), nullable=False)
    size: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    uploaded_by_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        index=True,
    )

    uploaded_by: Mapped["UserModel"] = relationship(  # noqa: F821
        "UserModel",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<Photo(id={self.id}, folder={self.folder}, filename={self.filename!r})>"

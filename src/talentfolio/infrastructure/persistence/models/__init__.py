"""SQLAlchemy models for Talentfolio.

All models inherit from the Base class defined in database.py.
"""

from talentfolio.infrastructure.persistence.models.invite_token import InviteTokenModel
from talentfolio.infrastructure.persistence.models.note import NoteModel
from talentfolio.infrastructure.persistence.models.photo import (
    GALLERY_FOLDER,
    PHOTO_FOLDERS,
    PhotoModel,
)
from talentfolio.infrastructure.persistence.models.profile import ProfileModel
from talentfolio.infrastructure.persistence.models.user import UserModel, UserRole

__all__ = [
    "GALLERY_FOLDER",
    "InviteTokenModel",
    "NoteModel",
    "PHOTO_FOLDERS",
    "PhotoModel",
    "ProfileModel",
    "UserModel",
    "UserRole",
]

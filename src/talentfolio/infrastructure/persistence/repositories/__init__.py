"""Persistence repositories for database operations."""

from talentfolio.infrastructure.persistence.repositories.invite_token_repository import (
    InviteTokenRepository,
)
from talentfolio.infrastructure.persistence.repositories.note_repository import (
    NoteRepository,
)
from talentfolio.infrastructure.persistence.repositories.photo_repository import (
    PhotoRepository,
)
from talentfolio.infrastructure.persistence.repositories.profile_repository import (
    ProfileRepository,
)
from talentfolio.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "InviteTokenRepository",
    "NoteRepository",
    "PhotoRepository",
    "ProfileRepository",
    "UserRepository",
]

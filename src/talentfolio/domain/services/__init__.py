"""Domain services for Talentfolio.

Services hold business logic that does not belong to a single entity.
"""

from talentfolio.domain.services.invite_service import (
    InviteService,
    normalize_invite_email,
)
from talentfolio.domain.services.token_generator import (
    TOKEN_BYTES,
    TokenGenerator,
    token_generator,
)

__all__ = [
    "InviteService",
    "TOKEN_BYTES",
    "TokenGenerator",
    "normalize_invite_email",
    "token_generator",
]

"""Domain entities for Talentfolio.

Entities are plain dataclasses with no dependencies on infrastructure
or external frameworks.
"""

from talentfolio.domain.entities.invite_token import (
    INVITE_TTL,
    InviteStatus,
    InviteToken,
    InviteValidation,
)

__all__ = [
    "INVITE_TTL",
    "InviteStatus",
    "InviteToken",
    "InviteValidation",
]

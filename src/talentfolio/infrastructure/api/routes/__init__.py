"""API routes for Talentfolio."""

from talentfolio.infrastructure.api.routes.admin_invites_router import (
    router as admin_invites_router,
)
from talentfolio.infrastructure.api.routes.admin_photos_router import (
    router as admin_photos_router,
)
from talentfolio.infrastructure.api.routes.admin_router import router as admin_router
from talentfolio.infrastructure.api.routes.auth_router import router as auth_router
from talentfolio.infrastructure.api.routes.gallery_router import router as gallery_router
from talentfolio.infrastructure.api.routes.invites_router import router as invites_router
from talentfolio.infrastructure.api.routes.profile_router import router as profile_router
from talentfolio.infrastructure.api.routes.talents_router import router as talents_router

__all__ = [
    "admin_invites_router",
    "admin_photos_router",
    "admin_router",
    "auth_router",
    "gallery_router",
    "invites_router",
    "profile_router",
    "talents_router",
]

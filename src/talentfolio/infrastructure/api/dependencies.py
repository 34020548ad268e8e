"""FastAPI dependencies for authentication and authorization.

The caller's identity is resolved once per request from the bearer token
and passed explicitly to every handler that needs it.
"""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from talentfolio.core.logging import get_logger
from talentfolio.domain.exceptions import AuthorizationError
from talentfolio.domain.services import InviteService
from talentfolio.infrastructure.auth import (
    InvalidTokenError,
    TokenExpiredError,
    jwt_service,
)
from talentfolio.infrastructure.persistence.database import get_db_session
from talentfolio.infrastructure.persistence.models import UserRole
from talentfolio.infrastructure.persistence.repositories import InviteTokenRepository

logger = get_logger(__name__)


@dataclass(frozen=True)
class CurrentUser:
    """The authenticated caller, extracted from a valid access token."""

    user_id: str
    email: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    authorization: Annotated[str | None, Header()] = None,
) -> CurrentUser:
    """Extract and validate the current user from the Authorization header.

    Raises:
        HTTPException: 401 if the token is missing, invalid, or expired.
    """
    if authorization is None:
        logger.info("Authentication failed: missing Authorization header")
        raise _unauthorized("Missing Authorization header")

    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        logger.info("Authentication failed: invalid Authorization header format")
        raise _unauthorized("Could not validate credentials")

    try:
        payload = jwt_service.validate_access_token(parts[1])
        return CurrentUser(
            user_id=payload["user_id"],
            email=payload["email"],
            role=payload["role"],
        )
    except TokenExpiredError:
        logger.info("Authentication failed: token expired")
        raise _unauthorized("Token has expired")
    except InvalidTokenError as e:
        logger.info("Authentication failed: invalid token", error=str(e))
        raise _unauthorized("Invalid token")
    except KeyError as e:
        logger.warning("Authentication failed: missing claim in token", missing_claim=str(e))
        raise _unauthorized("Invalid token")


AuthenticatedUser = Annotated[CurrentUser, Depends(get_current_user)]


async def require_admin(current_user: AuthenticatedUser) -> CurrentUser:
    """Admin authorization gate.

    Raises:
        AuthorizationError: If the caller is not an administrator.
    """
    if not current_user.is_admin:
        logger.info("Admin access denied", user_id=current_user.user_id)
        raise AuthorizationError()
    return current_user


AdminUser = Annotated[CurrentUser, Depends(require_admin)]

DbSession = Annotated[AsyncSession, Depends(get_db_session)]


def get_invite_service(session: DbSession) -> InviteService:
    """Build the invite lifecycle service for the request's session."""
    return InviteService(session, InviteTokenRepository(session))

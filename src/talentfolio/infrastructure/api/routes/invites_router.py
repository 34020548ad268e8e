"""Public invite API routes.

Anyone holding a token can check it and use it. Each rejection has its
own status code so the invitee sees why a link does not work.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from talentfolio.core.logging import get_logger
from talentfolio.domain.exceptions import AccountExistsError, InvalidInputError
from talentfolio.domain.services import InviteService, normalize_invite_email
from talentfolio.infrastructure.api.dependencies import DbSession, get_invite_service
from talentfolio.infrastructure.api.errors import error_response
from talentfolio.infrastructure.api.schemas import (
    InviteConsumeRequest,
    InviteConsumeResponse,
    InviteValidationResponse,
)
from talentfolio.infrastructure.auth import jwt_service
from talentfolio.infrastructure.persistence.models import UserModel
from talentfolio.infrastructure.persistence.repositories import UserRepository
from talentfolio.infrastructure.services import (
    NotificationDispatcher,
    NotificationError,
    build_magic_link_url,
    get_notification_dispatcher,
)

logger = get_logger(__name__)

router = APIRouter()

Invites = Annotated[InviteService, Depends(get_invite_service)]
Dispatcher = Annotated[NotificationDispatcher, Depends(get_notification_dispatcher)]

REJECTION_RESPONSES = {
    404: {"description": "Unknown invite token"},
    409: {"description": "Invite already used"},
    410: {"description": "Invite expired"},
}


@router.get(
    "/{token}/validate",
    response_model=InviteValidationResponse,
    responses=REJECTION_RESPONSES,
)
async def validate_invite(token: str, service: Invites) -> InviteValidationResponse | JSONResponse:
    """Check an invite token without using it."""
    result = await service.validate(token)
    if not result.valid:
        return error_response(result.reason, valid=False)
    return InviteValidationResponse(valid=True, email=result.email)


async def _ensure_user(session: AsyncSession, email: str) -> tuple[UserModel, bool]:
    """Return the user for ``email`` and whether it was created now.

    The insert is only flushed; it is committed together with the invite.
    """
    users = UserRepository(session)
    user = await users.get_by_email(email)
    if user is not None:
        return user, False
    try:
        return await users.create(email), True
    except IntegrityError:
        # Created by a concurrent request since the lookup
        await session.rollback()
        user = await users.get_by_email(email)
        if user is None:
            raise
        return user, False


@router.post(
    "/{token}/consume",
    response_model=InviteConsumeResponse,
    responses={
        400: {"description": "Email missing or malformed"},
        **REJECTION_RESPONSES,
        409: {"description": "Invite already used, or account already exists"},
    },
)
async def consume_invite(
    token: str,
    service: Invites,
    session: DbSession,
    dispatcher: Dispatcher,
    request: InviteConsumeRequest | None = None,
) -> InviteConsumeResponse:
    """Use an invite and send a sign-in link to the invitee.

    Generic invites take the invitee's address from the request body and
    only onboard new accounts. The address is checked before the invite
    is used up, and the sign-in link only ever goes to the dispatcher.
    """
    result = await service.validate(token)
    if not result.valid:
        raise result.reason

    if result.invite.is_generic:
        email = normalize_invite_email(request.email if request else None)
        if not email:
            raise InvalidInputError("Email is required for this invite")
    else:
        email = result.invite.email

    user, created = await _ensure_user(session, email)
    if result.invite.is_generic and not created:
        await session.rollback()
        logger.info("Generic invite refused for existing account", invite_id=result.invite.id)
        raise AccountExistsError()

    # Commits the new user with the consumption, or rolls both back
    await service.consume(token)

    link = build_magic_link_url(jwt_service.create_magic_link_token(user.email))
    try:
        await dispatcher.send_magic_link(user.email, link)
    except NotificationError as e:
        logger.warning("Magic link notification failed", user_id=user.id, error=str(e))

    return InviteConsumeResponse(
        message="Invite accepted. Check your email for a sign-in link.",
        email=user.email,
    )

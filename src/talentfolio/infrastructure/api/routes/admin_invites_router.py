"""Admin invite API routes.

Only administrators can create, list and prune invites.
"""

from datetime import timedelta
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from talentfolio.core.config import get_settings
from talentfolio.core.logging import get_logger
from talentfolio.domain.entities import InviteToken
from talentfolio.domain.exceptions import InvalidInputError
from talentfolio.domain.services import InviteService
from talentfolio.infrastructure.api.dependencies import AdminUser, get_invite_service
from talentfolio.infrastructure.api.schemas import (
    GenericInviteResponse,
    InviteCreateRequest,
    InviteCreatedResponse,
    InviteListResponse,
    InvitePruneRequest,
    InvitePruneResponse,
    InviteResponse,
)
from talentfolio.infrastructure.services import (
    NotificationDispatcher,
    NotificationError,
    build_invite_url,
    get_notification_dispatcher,
)

logger = get_logger(__name__)

router = APIRouter()

Invites = Annotated[InviteService, Depends(get_invite_service)]
Dispatcher = Annotated[NotificationDispatcher, Depends(get_notification_dispatcher)]


def _to_response(invite: InviteToken, service: InviteService) -> InviteResponse:
    return InviteResponse(
        id=invite.id,
        email=invite.email,
        expires_at=invite.expires_at,
        consumed_at=invite.consumed_at,
        created_at=invite.created_at,
        created_by_id=invite.created_by_id,
        status=invite.status(service.clock()),
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=InviteCreatedResponse,
    responses={
        400: {"description": "Malformed email address"},
        403: {"description": "Administrator access required"},
    },
)
async def create_invite(
    request: InviteCreateRequest,
    admin: AdminUser,
    service: Invites,
    dispatcher: Dispatcher,
) -> InviteCreatedResponse:
    """Create an invite for one email address and notify the invitee.

    The invite URL is always returned so it can be shared by hand when
    the notification could not be sent.
    """
    if not request.email.strip():
        raise InvalidInputError("Email is required; use the generic invite endpoint instead")

    invite = await service.create_invite(request.email, admin.user_id)
    invite_url = build_invite_url(invite.token)

    email_sent = False
    try:
        await dispatcher.send_invite(invite.email, invite_url)
        email_sent = True
    except NotificationError as e:
        logger.warning("Invite notification failed", invite_id=invite.id, error=str(e))

    base = _to_response(invite, service)
    return InviteCreatedResponse(
        **base.model_dump(),
        token=invite.token,
        invite_url=invite_url,
        email_sent=email_sent,
    )


@router.get("", response_model=InviteListResponse)
async def list_invites(
    admin: AdminUser,
    service: Invites,
    limit: int | None = Query(None, ge=1, le=100),
) -> InviteListResponse:
    """List the most recent invites, newest first."""
    invites = await service.list_recent(limit or get_settings().invite_list_limit)
    return InviteListResponse(
        invites=[_to_response(invite, service) for invite in invites],
        total=len(invites),
    )


@router.post(
    "/generic",
    status_code=status.HTTP_201_CREATED,
    response_model=GenericInviteResponse,
)
async def create_generic_invite(admin: AdminUser, service: Invites) -> GenericInviteResponse:
    """Create an invite not bound to an email address.

    The returned URL is meant to be rendered as a QR code by the client.
    """
    invite = await service.create_invite("", admin.user_id)
    return GenericInviteResponse(
        id=invite.id,
        token=invite.token,
        invite_url=build_invite_url(invite.token),
        expires_at=invite.expires_at,
    )


@router.post("/prune", response_model=InvitePruneResponse)
async def prune_invites(
    admin: AdminUser,
    service: Invites,
    request: InvitePruneRequest | None = None,
) -> InvitePruneResponse:
    """Delete unused invites that have expired."""
    older_than_days = request.older_than_days if request else 0
    deleted = await service.prune_expired(timedelta(days=older_than_days))
    logger.info("Invites pruned by admin", admin_id=admin.user_id, deleted=deleted)
    return InvitePruneResponse(deleted=deleted)

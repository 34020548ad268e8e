"""Authentication API routes.

Sign-in is either by password or by exchanging a magic link token that
was sent after an invite was consumed.
"""

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from talentfolio.core.logging import get_logger
from talentfolio.infrastructure.api.dependencies import AuthenticatedUser, DbSession
from talentfolio.infrastructure.api.schemas import (
    AuthResponse,
    MeResponse,
    MessageResponse,
    ProfileResponse,
    SetPasswordRequest,
    SignInRequest,
    UserResponse,
)
from talentfolio.infrastructure.auth import (
    InvalidTokenError,
    TokenExpiredError,
    hash_password,
    jwt_service,
    verify_password,
)
from talentfolio.infrastructure.persistence.models import UserModel
from talentfolio.infrastructure.persistence.repositories import (
    ProfileRepository,
    UserRepository,
)

logger = get_logger(__name__)

router = APIRouter()


def _auth_response(user: UserModel, needs_onboarding: bool) -> AuthResponse:
    token = jwt_service.create_access_token(
        user_id=user.id,
        email=user.email,
        role=user.role.value,
    )
    return AuthResponse(
        token=token,
        expires_in=jwt_service.get_expires_in(),
        user=UserResponse(
            id=user.id,
            email=user.email,
            role=user.role.value,
            created_at=user.created_at,
        ),
        needs_onboarding=needs_onboarding,
    )


@router.post(
    "/signin",
    response_model=AuthResponse,
    responses={401: {"description": "Invalid credentials"}},
)
async def signin(request: SignInRequest, session: DbSession) -> AuthResponse | JSONResponse:
    """Sign in with email and password.

    The same message is returned for an unknown email and a wrong password.
    """
    user = await UserRepository(session).get_by_email(request.email)
    if user is None or not verify_password(request.password, user.password_hash):
        logger.info("Sign-in failed", email=request.email)
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"error": "unauthorized", "message": "Invalid email or password"},
        )

    logger.info("User signed in", user_id=user.id)
    return _auth_response(user, needs_onboarding=user.profile is None)


@router.get(
    "/callback",
    response_model=AuthResponse,
    responses={401: {"description": "Invalid or expired sign-in link"}},
)
async def callback(
    session: DbSession,
    token: str = Query(..., min_length=1),
) -> AuthResponse | JSONResponse:
    """Exchange a magic link token for an access token.

    The user is created on first sign-in. ``needs_onboarding`` tells the
    client to send the user to profile creation.
    """
    try:
        payload = jwt_service.validate_magic_link_token(token)
    except TokenExpiredError:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"error": "unauthorized", "message": "Sign-in link has expired"},
        )
    except InvalidTokenError:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"error": "unauthorized", "message": "Invalid sign-in link"},
        )

    user = await UserRepository(session).get_or_create(payload["email"])
    await session.commit()

    profile = await ProfileRepository(session).get_by_user_id(user.id)

    logger.info("User signed in via magic link", user_id=user.id)
    return _auth_response(user, needs_onboarding=profile is None)


@router.post("/set-password", response_model=MessageResponse)
async def set_password(
    request: SetPasswordRequest,
    current_user: AuthenticatedUser,
    session: DbSession,
) -> MessageResponse | JSONResponse:
    """Set or replace the caller's password."""
    user = await UserRepository(session).get_by_id(current_user.user_id)
    if user is None:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": "not_found", "message": "User not found"},
        )

    user.password_hash = hash_password(request.password)
    await session.commit()

    logger.info("Password set", user_id=user.id)
    return MessageResponse(message="Password updated")


@router.get("/me", response_model=MeResponse)
async def me(current_user: AuthenticatedUser, session: DbSession) -> MeResponse | JSONResponse:
    """Return the caller and their profile."""
    user = await UserRepository(session).get_by_id(current_user.user_id)
    if user is None:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": "not_found", "message": "User not found"},
        )
    return MeResponse(
        id=user.id,
        email=user.email,
        role=user.role.value,
        created_at=user.created_at,
        profile=ProfileResponse.model_validate(user.profile) if user.profile else None,
    )

"""Mapping from domain errors to HTTP responses.

Every invite rejection gets its own status code and message so the
invitee can tell an unknown link from a used or an expired one.
"""

from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse

from talentfolio.domain.exceptions import (
    AccountExistsError,
    AlreadyConsumedError,
    AuthorizationError,
    DuplicateTokenError,
    ExpiredError,
    InvalidInputError,
    NotFoundError,
    TalentfolioError,
)

STATUS_BY_ERROR: dict[type[TalentfolioError], int] = {
    InvalidInputError: status.HTTP_400_BAD_REQUEST,
    AuthorizationError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    AlreadyConsumedError: status.HTTP_409_CONFLICT,
    AccountExistsError: status.HTTP_409_CONFLICT,
    ExpiredError: status.HTTP_410_GONE,
    DuplicateTokenError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(exc: TalentfolioError) -> int:
    for error_type in type(exc).__mro__:
        if error_type in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[error_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(exc: TalentfolioError, **extra: Any) -> JSONResponse:
    """Render a domain error as ``{"error": code, "message": text}``."""
    return JSONResponse(
        status_code=status_for(exc),
        content={"error": exc.code, "message": exc.detail, **extra},
    )

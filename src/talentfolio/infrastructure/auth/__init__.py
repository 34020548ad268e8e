"""Authentication infrastructure components.

This module provides password hashing and JWT token services.
"""

from talentfolio.infrastructure.auth.jwt_service import (
    InvalidTokenError,
    JWTError,
    JWTService,
    TokenExpiredError,
    jwt_service,
)
from talentfolio.infrastructure.auth.password_hasher import (
    hash_password,
    verify_password,
)

__all__ = [
    "InvalidTokenError",
    "JWTError",
    "JWTService",
    "TokenExpiredError",
    "hash_password",
    "jwt_service",
    "verify_password",
]

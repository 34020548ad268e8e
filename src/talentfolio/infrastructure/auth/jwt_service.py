"""JWT token service.

Issues the bearer tokens that identify callers, and the short-lived
tokens embedded in magic sign-in links.
"""

from datetime import timedelta
from typing import Any

import jwt

from talentfolio.core.clock import utcnow
from talentfolio.core.config import get_settings


class JWTError(Exception):
    """Base exception for JWT-related errors."""

    pass


class TokenExpiredError(JWTError):
    """Raised when a token has expired."""

    pass


class InvalidTokenError(JWTError):
    """Raised when a token is invalid."""

    pass


class JWTService:
    """Service for creating and validating JWT tokens."""

    ALGORITHM = "HS256"
    ISSUER = "talentfolio"

    def __init__(self, secret_key: str | None = None) -> None:
        """Initialize the JWT service.

        Args:
            secret_key: Secret key for signing tokens. If not provided,
                        uses the configured secret key from settings.
        """
        self._secret_key = secret_key

    @property
    def secret_key(self) -> str:
        """Get the secret key for signing tokens."""
        if self._secret_key:
            return self._secret_key
        return get_settings().secret_key

    def _encode(self, payload: dict[str, Any], expires_delta: timedelta) -> str:
        now = utcnow()
        claims = {
            "iss": self.ISSUER,
            "iat": now,
            "exp": now + expires_delta,
            **payload,
        }
        return jwt.encode(claims, self.secret_key, algorithm=self.ALGORITHM)

    def create_access_token(
        self,
        user_id: str,
        email: str,
        role: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create an access token.

        Args:
            user_id: The user's unique identifier.
            email: The user's email address.
            role: The user's role name.
            expires_delta: Custom expiration time. Defaults to config value.

        Returns:
            Encoded JWT access token.
        """
        if expires_delta is None:
            expires_delta = timedelta(minutes=get_settings().access_token_expire_minutes)
        return self._encode(
            {
                "sub": user_id,
                "user_id": user_id,
                "email": email,
                "role": role,
                "type": "access",
            },
            expires_delta,
        )

    def create_magic_link_token(
        self,
        email: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a token that signs ``email`` in when exchanged."""
        if expires_delta is None:
            expires_delta = timedelta(minutes=get_settings().magic_link_expire_minutes)
        return self._encode({"sub": email, "email": email, "type": "magic_link"}, expires_delta)

    def decode_token(self, token: str) -> dict[str, Any]:
        """Decode and validate a JWT token.

        Raises:
            TokenExpiredError: If the token has expired.
            InvalidTokenError: If the token is invalid.
        """
        try:
            return jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.ALGORITHM],
                issuer=self.ISSUER,
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError("Invalid token") from e

    def _validate_type(self, token: str, token_type: str) -> dict[str, Any]:
        payload = self.decode_token(token)
        if payload.get("type") != token_type:
            raise InvalidTokenError(f"Expected a {token_type} token")
        return payload

    def validate_access_token(self, token: str) -> dict[str, Any]:
        """Validate that a token is an access token and decode it."""
        return self._validate_type(token, "access")

    def validate_magic_link_token(self, token: str) -> dict[str, Any]:
        """Validate that a token is a magic link token and decode it."""
        return self._validate_type(token, "magic_link")

    def get_expires_in(self, expires_delta: timedelta | None = None) -> int:
        """Get the access token lifetime in seconds."""
        if expires_delta is None:
            expires_delta = timedelta(minutes=get_settings().access_token_expire_minutes)
        return int(expires_delta.total_seconds())


# Default JWT service instance
jwt_service = JWTService()

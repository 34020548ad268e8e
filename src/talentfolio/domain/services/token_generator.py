"""Invite token generation.

Tokens come from the operating system's cryptographically secure random
source. A guessable token would let anyone onboard without an invite.
"""

import secrets

TOKEN_BYTES = 32


class TokenGenerator:
    """Produces opaque, unpredictable invite tokens."""

    def __init__(self, nbytes: int = TOKEN_BYTES) -> None:
        if nbytes < TOKEN_BYTES:
            raise ValueError(f"Invite tokens need at least {TOKEN_BYTES} bytes of entropy")
        self.nbytes = nbytes

    def generate(self) -> str:
        """Generate a new token.

        Returns:
            Hexadecimal token string (64 characters for the default 32 bytes).
        """
        return secrets.token_hex(self.nbytes)


# Default generator instance
token_generator = TokenGenerator()

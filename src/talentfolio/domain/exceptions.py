"""Exceptions raised by the domain layer."""


class TalentfolioError(Exception):
    """Base class for all domain errors."""

    code = "error"
    message = "Something went wrong"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)

    @property
    def detail(self) -> str:
        return str(self)


class InvalidInputError(TalentfolioError):
    """Raised when a caller supplies a malformed or missing field."""

    code = "invalid_input"
    message = "Invalid input"


class DuplicateTokenError(TalentfolioError):
    """Raised when a generated invite token already exists."""

    code = "duplicate_token"
    message = "Generated invite token collided with an existing token"


class AuthorizationError(TalentfolioError):
    """Raised by the admin gate when the caller lacks admin rights."""

    code = "forbidden"
    message = "Administrator access required"


class InviteTokenError(TalentfolioError):
    """Base class for the reasons an invite token is rejected."""


class NotFoundError(InviteTokenError):
    """No invite matches the presented token."""

    code = "not_found"
    message = "Invalid invite link"


class AlreadyConsumedError(InviteTokenError):
    """The invite matched but has already been used."""

    code = "already_consumed"
    message = "This invite was already used"


class ExpiredError(InviteTokenError):
    """The invite matched and is unused, but its expiry has passed."""

    code = "expired"
    message = "This invite has expired"


class AccountExistsError(TalentfolioError):
    """A generic invite was presented for an address that already has an account."""

    code = "account_exists"
    message = "An account already exists for this email. Sign in instead."

"""Notification dispatch for invites and magic sign-in links.

In development, links are logged so they can be opened directly. When a
webhook URL is configured, notifications are POSTed to it and the
receiving service is responsible for delivering the email.
"""

from abc import ABC, abstractmethod
from urllib.parse import urlencode

import httpx

from talentfolio.core.config import get_settings
from talentfolio.core.logging import get_logger

logger = get_logger(__name__)


class NotificationError(Exception):
    """Raised when a notification could not be handed off."""

    pass


def build_invite_url(token: str, base_url: str | None = None) -> str:
    """Build the acceptance URL for an invite token."""
    base = (base_url or get_settings().external_url).rstrip("/")
    return f"{base}/invite/accept?{urlencode({'token': token})}"


def build_magic_link_url(token: str, base_url: str | None = None) -> str:
    """Build the sign-in URL carrying a magic link token."""
    settings = get_settings()
    base = (base_url or settings.external_url).rstrip("/")
    return f"{base}{settings.api_prefix}/auth/callback?{urlencode({'token': token})}"


class NotificationDispatcher(ABC):
    """Delivers invite and sign-in links to people."""

    @abstractmethod
    async def send_invite(self, email: str, invite_url: str) -> None:
        """Send an invite acceptance link."""
        ...

    @abstractmethod
    async def send_magic_link(self, email: str, link: str) -> None:
        """Send a passwordless sign-in link."""
        ...


class LoggingNotificationDispatcher(NotificationDispatcher):
    """Logs links instead of sending them."""

    async def send_invite(self, email: str, invite_url: str) -> None:
        logger.info("[MOCK] Invite link", email=email, invite_url=invite_url)

    async def send_magic_link(self, email: str, link: str) -> None:
        logger.info("[MOCK] Magic link", email=email, link=link)


class WebhookNotificationDispatcher(NotificationDispatcher):
    """POSTs notifications as JSON to an external delivery service."""

    def __init__(self, url: str, timeout: float = 10.0) -> None:
        self.url = url
        self.timeout = timeout

    async def _post(self, payload: dict[str, str]) -> None:
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.url, json=payload)
        except httpx.HTTPError as e:
            raise NotificationError(f"Notification webhook unreachable: {e}") from e

        if response.status_code >= 300:
            raise NotificationError(
                f"Notification webhook returned HTTP {response.status_code}"
            )
        logger.debug("Notification delivered", kind=payload["kind"], to=payload["email"])

    async def send_invite(self, email: str, invite_url: str) -> None:
        await self._post({"kind": "invite", "email": email, "url": invite_url})

    async def send_magic_link(self, email: str, link: str) -> None:
        await self._post({"kind": "magic_link", "email": email, "url": link})


def get_notification_dispatcher() -> NotificationDispatcher:
    """FastAPI dependency returning the configured dispatcher."""
    settings = get_settings()
    if settings.notification_webhook_url:
        return WebhookNotificationDispatcher(
            settings.notification_webhook_url,
            timeout=settings.notification_timeout_seconds,
        )
    return LoggingNotificationDispatcher()

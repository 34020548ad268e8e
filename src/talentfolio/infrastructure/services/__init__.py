"""Outbound services used by the API layer."""

from talentfolio.infrastructure.services.notification_service import (
    LoggingNotificationDispatcher,
    NotificationDispatcher,
    NotificationError,
    WebhookNotificationDispatcher,
    build_invite_url,
    build_magic_link_url,
    get_notification_dispatcher,
)

__all__ = [
    "LoggingNotificationDispatcher",
    "NotificationDispatcher",
    "NotificationError",
    "WebhookNotificationDispatcher",
    "build_invite_url",
    "build_magic_link_url",
    "get_notification_dispatcher",
]

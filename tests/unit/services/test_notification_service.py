import json

import httpx
import pytest
import respx

from talentfolio.core.config import Settings
from talentfolio.infrastructure.services import (
    LoggingNotificationDispatcher,
    NotificationError,
    WebhookNotificationDispatcher,
    build_invite_url,
    build_magic_link_url,
    get_notification_dispatcher,
)

WEBHOOK_URL = "https://hooks.example.com/notify"


def test_build_invite_url():
    url = build_invite_url("abc123", base_url="https://talent.example.com/")

    assert url == "https://talent.example.com/invite/accept?token=abc123"


def test_build_magic_link_url():
    url = build_magic_link_url("a.b.c", base_url="https://talent.example.com")

    assert url == "https://talent.example.com/api/v1/auth/callback?token=a.b.c"


@pytest.mark.asyncio
async def test_logging_dispatcher_never_fails():
    dispatcher = LoggingNotificationDispatcher()

    await dispatcher.send_invite("jane@example.com", "http://localhost/invite/accept?token=x")
    await dispatcher.send_magic_link("jane@example.com", "http://localhost/callback?token=y")


@pytest.mark.asyncio
@respx.mock
async def test_webhook_dispatcher_posts_payload():
    route = respx.post(WEBHOOK_URL).mock(return_value=httpx.Response(202))
    dispatcher = WebhookNotificationDispatcher(WEBHOOK_URL)

    await dispatcher.send_invite("jane@example.com", "https://t.example/invite/accept?token=x")

    assert route.called
    request = route.calls.last.request
    assert request.headers["content-type"] == "application/json"
    assert json.loads(request.content) == {
        "kind": "invite",
        "email": "jane@example.com",
        "url": "https://t.example/invite/accept?token=x",
    }


@pytest.mark.asyncio
@respx.mock
async def test_webhook_dispatcher_raises_on_error_status():
    respx.post(WEBHOOK_URL).mock(return_value=httpx.Response(500))
    dispatcher = WebhookNotificationDispatcher(WEBHOOK_URL)

    with pytest.raises(NotificationError, match="HTTP 500"):
        await dispatcher.send_magic_link("jane@example.com", "https://t.example/cb")


@pytest.mark.asyncio
@respx.mock
async def test_webhook_dispatcher_raises_when_unreachable():
    respx.post(WEBHOOK_URL).mock(side_effect=httpx.ConnectError("refused"))
    dispatcher = WebhookNotificationDispatcher(WEBHOOK_URL)

    with pytest.raises(NotificationError, match="unreachable"):
        await dispatcher.send_invite("jane@example.com", "https://t.example/invite")


def test_dispatcher_selection(monkeypatch):
    monkeypatch.setattr(
        "talentfolio.infrastructure.services.notification_service.get_settings",
        lambda: Settings(notification_webhook_url=WEBHOOK_URL),
    )
    assert isinstance(get_notification_dispatcher(), WebhookNotificationDispatcher)

    monkeypatch.setattr(
        "talentfolio.infrastructure.services.notification_service.get_settings",
        lambda: Settings(),
    )
    assert isinstance(get_notification_dispatcher(), LoggingNotificationDispatcher)

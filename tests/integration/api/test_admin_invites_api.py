"""Integration tests for the admin invite endpoints."""

import pytest
from urllib.parse import parse_qs, urlparse

from talentfolio.infrastructure.persistence.repositories import InviteTokenRepository

INVITES = "/api/v1/admin/invites"


@pytest.mark.asyncio
async def test_create_invite(client, admin_headers, admin_user, dispatcher):
    response = await client.post(INVITES, json={"email": "Jane@Example.com"}, headers=admin_headers)

    assert response.status_code == 201
    data = response.json()
    assert data["email"] == "jane@example.com"
    assert data["status"] == "pending"
    assert data["created_by_id"] == admin_user.id
    assert data["email_sent"] is True
    assert len(data["token"]) == 64
    assert parse_qs(urlparse(data["invite_url"]).query)["token"] == [data["token"]]
    assert dispatcher.invites == [("jane@example.com", data["invite_url"])]


@pytest.mark.asyncio
async def test_create_invite_survives_notification_failure(
    client, admin_headers, dispatcher, session_factory
):
    dispatcher.fail = True

    response = await client.post(INVITES, json={"email": "jane@example.com"}, headers=admin_headers)

    assert response.status_code == 201
    data = response.json()
    assert data["email_sent"] is False
    async with session_factory() as session:
        assert await InviteTokenRepository(session).get_by_token(data["token"]) is not None


@pytest.mark.asyncio
@pytest.mark.parametrize("email", ["not-an-email", "", "   "])
async def test_create_invite_rejects_bad_email(client, admin_headers, email):
    response = await client.post(INVITES, json={"email": email}, headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["error"] == "invalid_input"


@pytest.mark.asyncio
async def test_create_invite_requires_admin(client, talent_headers):
    response = await client.post(INVITES, json={"email": "jane@example.com"}, headers=talent_headers)

    assert response.status_code == 403
    assert response.json() == {
        "error": "forbidden",
        "message": "Administrator access required",
    }


@pytest.mark.asyncio
async def test_create_invite_requires_authentication(client):
    response = await client.post(INVITES, json={"email": "jane@example.com"})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_list_invites_hides_tokens(client, admin_headers):
    for email in ("a@example.com", "b@example.com", "c@example.com"):
        await client.post(INVITES, json={"email": email}, headers=admin_headers)

    response = await client.get(INVITES, params={"limit": 2}, headers=admin_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 2
    assert all("token" not in invite for invite in data["invites"])
    assert {invite["status"] for invite in data["invites"]} == {"pending"}


@pytest.mark.asyncio
async def test_list_invites_limit_bounds(client, admin_headers):
    assert (await client.get(INVITES, params={"limit": 0}, headers=admin_headers)).status_code == 422
    assert (await client.get(INVITES, params={"limit": 101}, headers=admin_headers)).status_code == 422


@pytest.mark.asyncio
async def test_list_invites_requires_admin(client, talent_headers):
    response = await client.get(INVITES, headers=talent_headers)

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_create_generic_invite(client, admin_headers, dispatcher):
    response = await client.post(f"{INVITES}/generic", headers=admin_headers)

    assert response.status_code == 201
    data = response.json()
    assert data["invite_url"].endswith(f"/invite/accept?token={data['token']}")
    assert dispatcher.invites == []

    validation = await client.get(f"/api/v1/invites/{data['token']}/validate")
    assert validation.json() == {"valid": True, "email": ""}


@pytest.mark.asyncio
async def test_prune_invites(client, admin_headers, expired_invite):
    response = await client.post(f"{INVITES}/prune", json={"older_than_days": 0}, headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {"deleted": 1}

    validation = await client.get(f"/api/v1/invites/{expired_invite.token}/validate")
    assert validation.status_code == 404


@pytest.mark.asyncio
async def test_prune_invites_without_body(client, admin_headers):
    response = await client.post(f"{INVITES}/prune", headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {"deleted": 0}


@pytest.mark.asyncio
async def test_prune_invites_rejects_negative_days(client, admin_headers):
    response = await client.post(
        f"{INVITES}/prune", json={"older_than_days": -1}, headers=admin_headers
    )

    assert response.status_code == 422

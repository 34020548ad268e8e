"""Integration tests for the authentication endpoints."""

from datetime import timedelta

import pytest

from talentfolio.infrastructure.auth import jwt_service

AUTH = "/api/v1/auth"
ADMIN_PASSWORD = "admin-pass-123"


@pytest.mark.asyncio
async def test_signin(client, admin_user):
    response = await client.post(
        f"{AUTH}/signin", json={"email": "Admin@Example.com", "password": ADMIN_PASSWORD}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["user"]["id"] == admin_user.id
    assert data["user"]["role"] == "admin"
    assert data["expires_in"] > 0
    payload = jwt_service.validate_access_token(data["token"])
    assert payload["user_id"] == admin_user.id


@pytest.mark.asyncio
async def test_signin_wrong_password(client, admin_user):
    response = await client.post(
        f"{AUTH}/signin", json={"email": "admin@example.com", "password": "wrong"}
    )

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid email or password"


@pytest.mark.asyncio
async def test_signin_unknown_user(client):
    response = await client.post(
        f"{AUTH}/signin", json={"email": "nobody@example.com", "password": "whatever"}
    )

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid email or password"


@pytest.mark.asyncio
async def test_callback_creates_user_once(client):
    token = jwt_service.create_magic_link_token("new@example.com")

    first = await client.get(f"{AUTH}/callback", params={"token": token})
    second = await client.get(f"{AUTH}/callback", params={"token": token})

    assert first.status_code == 200
    assert first.json()["user"]["role"] == "user"
    assert first.json()["user"]["id"] == second.json()["user"]["id"]


@pytest.mark.asyncio
async def test_callback_rejects_access_token(client, admin_user):
    token = jwt_service.create_access_token(admin_user.id, admin_user.email, "admin")

    response = await client.get(f"{AUTH}/callback", params={"token": token})

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid sign-in link"


@pytest.mark.asyncio
async def test_callback_rejects_expired_link(client):
    token = jwt_service.create_magic_link_token(
        "new@example.com", expires_delta=timedelta(seconds=-1)
    )

    response = await client.get(f"{AUTH}/callback", params={"token": token})

    assert response.status_code == 401
    assert response.json()["message"] == "Sign-in link has expired"


@pytest.mark.asyncio
async def test_set_password_then_signin(client, talent_user, talent_headers):
    response = await client.post(
        f"{AUTH}/set-password", json={"password": "brand-new-pass"}, headers=talent_headers
    )
    assert response.status_code == 200

    signin = await client.post(
        f"{AUTH}/signin", json={"email": talent_user.email, "password": "brand-new-pass"}
    )
    assert signin.status_code == 200


@pytest.mark.asyncio
async def test_set_password_too_short(client, talent_headers):
    response = await client.post(
        f"{AUTH}/set-password", json={"password": "short"}, headers=talent_headers
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_me(client, talent_user, talent_headers):
    response = await client.get(f"{AUTH}/me", headers=talent_headers)

    assert response.status_code == 200
    assert response.json()["email"] == talent_user.email
    assert response.json()["profile"] is None


@pytest.mark.asyncio
async def test_me_for_deleted_user(client):
    token = jwt_service.create_access_token("missing-user", "gone@example.com", "user")

    response = await client.get(f"{AUTH}/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 404


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "header",
    ["", "Bearer", "Basic abc", "Bearer not-a-token"],
)
async def test_me_rejects_bad_authorization(client, header):
    response = await client.get(f"{AUTH}/me", headers={"Authorization": header})

    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"

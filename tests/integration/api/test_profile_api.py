"""Integration tests for the profile endpoints."""

import pytest

PROFILE = "/api/v1/profile"

VALID_PROFILE = {
    "display_name": "Jane Doe",
    "bio": "Illustrator and amateur baker.",
    "hobbies": ["drawing", "baking"],
    "social_links": {"website": "https://jane.example.com", "instagram": "@jane"},
    "avatar_url": "https://cdn.example.com/jane.png",
}


@pytest.mark.asyncio
async def test_get_profile_before_creation(client, talent_headers):
    response = await client.get(PROFILE, headers=talent_headers)

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_create_profile(client, talent_user, talent_headers):
    response = await client.post(PROFILE, json=VALID_PROFILE, headers=talent_headers)

    assert response.status_code == 201
    data = response.json()
    assert data["user_id"] == talent_user.id
    assert data["display_name"] == "Jane Doe"
    assert data["hobbies"] == ["drawing", "baking"]
    assert data["social_links"]["website"] == "https://jane.example.com"
    assert data["avatar_url"] == "https://cdn.example.com/jane.png"
    assert data["is_public"] is False

    fetched = await client.get(PROFILE, headers=talent_headers)
    assert fetched.json()["id"] == data["id"]


@pytest.mark.asyncio
async def test_create_profile_twice(client, talent_headers):
    await client.post(PROFILE, json=VALID_PROFILE, headers=talent_headers)

    response = await client.post(PROFILE, json=VALID_PROFILE, headers=talent_headers)

    assert response.status_code == 409


@pytest.mark.asyncio
async def test_me_includes_profile_and_onboarding(client, talent_user, talent_headers):
    await client.post(PROFILE, json=VALID_PROFILE, headers=talent_headers)

    me = await client.get("/api/v1/auth/me", headers=talent_headers)
    signin = await client.post(
        "/api/v1/auth/signin",
        json={"email": talent_user.email, "password": "talent-pass-123"},
    )

    assert me.json()["profile"]["display_name"] == "Jane Doe"
    assert signin.json()["needs_onboarding"] is False


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides",
    [
        {"display_name": "J"},
        {"hobbies": [f"hobby {i}" for i in range(11)]},
        {"social_links": {"website": "not a url"}},
        {"avatar_url": "ftp//broken"},
    ],
)
async def test_create_profile_validation(client, talent_headers, overrides):
    response = await client.post(PROFILE, json={**VALID_PROFILE, **overrides}, headers=talent_headers)

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_create_profile_with_empty_avatar(client, talent_headers):
    response = await client.post(
        PROFILE, json={**VALID_PROFILE, "avatar_url": ""}, headers=talent_headers
    )

    assert response.status_code == 201
    assert response.json()["avatar_url"] is None


@pytest.mark.asyncio
async def test_update_profile_partially(client, talent_headers):
    await client.post(PROFILE, json=VALID_PROFILE, headers=talent_headers)

    response = await client.patch(PROFILE, json={"bio": "Now a potter."}, headers=talent_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["bio"] == "Now a potter."
    assert data["display_name"] == "Jane Doe"
    assert data["hobbies"] == ["drawing", "baking"]


@pytest.mark.asyncio
async def test_update_profile_cannot_publish_itself(client, talent_headers):
    await client.post(PROFILE, json=VALID_PROFILE, headers=talent_headers)

    response = await client.patch(PROFILE, json={"is_public": True}, headers=talent_headers)

    assert response.status_code == 200
    assert response.json()["is_public"] is False


@pytest.mark.asyncio
async def test_update_profile_rejects_null_display_name(client, talent_headers):
    await client.post(PROFILE, json=VALID_PROFILE, headers=talent_headers)

    response = await client.patch(PROFILE, json={"display_name": None}, headers=talent_headers)

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_update_missing_profile(client, talent_headers):
    response = await client.patch(PROFILE, json={"bio": "x"}, headers=talent_headers)

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_profile_requires_authentication(client):
    assert (await client.get(PROFILE)).status_code == 401

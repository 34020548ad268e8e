"""Integration tests for the public talent gallery."""

import pytest

from talentfolio.infrastructure.persistence.repositories import (
    ProfileRepository,
    UserRepository,
)

TALENTS = "/api/v1/talents"


async def make_profile(session_factory, email, display_name, is_public):
    async with session_factory() as session:
        user = await UserRepository(session).create(email)
        profiles = ProfileRepository(session)
        profile = await profiles.create(user.id, display_name=display_name, hobbies=["music"])
        await profiles.update(profile, is_public=is_public)
        await session.commit()
        return profile


@pytest.mark.asyncio
async def test_list_talents_only_public(client, session_factory):
    await make_profile(session_factory, "a@example.com", "Alice Artist", True)
    await make_profile(session_factory, "b@example.com", "Bob Builder", False)

    response = await client.get(TALENTS)

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 1
    assert data["talents"][0]["display_name"] == "Alice Artist"
    assert "user_id" not in data["talents"][0]


@pytest.mark.asyncio
async def test_list_talents_newest_update_first(client, session_factory):
    await make_profile(session_factory, "a@example.com", "First", True)
    await make_profile(session_factory, "b@example.com", "Second", True)

    response = await client.get(TALENTS)

    assert [t["display_name"] for t in response.json()["talents"]] == ["Second", "First"]


@pytest.mark.asyncio
async def test_search_talents_case_insensitive(client, session_factory):
    await make_profile(session_factory, "a@example.com", "Alice Artist", True)
    await make_profile(session_factory, "b@example.com", "Bob Builder", True)

    response = await client.get(TALENTS, params={"search": "aLiCe"})

    assert [t["display_name"] for t in response.json()["talents"]] == ["Alice Artist"]

"""Fixtures shared by the API integration tests."""

import uuid
from datetime import timedelta

import pytest_asyncio

from talentfolio.core.clock import utcnow
from talentfolio.domain.entities import INVITE_TTL
from talentfolio.infrastructure.persistence.models import InviteTokenModel


async def _insert_invite(session_factory, created_by_id, *, email, age, consumed=False):
    created_at = utcnow() - age
    invite = InviteTokenModel(
        id=str(uuid.uuid4()),
        email=email,
        token=uuid.uuid4().hex * 2,
        created_at=created_at,
        expires_at=created_at + INVITE_TTL,
        consumed_at=created_at + timedelta(hours=1) if consumed else None,
        created_by_id=created_by_id,
    )
    async with session_factory() as session:
        session.add(invite)
        await session.commit()
    return invite


@pytest_asyncio.fixture
async def expired_invite(session_factory, admin_user):
    return await _insert_invite(
        session_factory, admin_user.id, email="late@example.com", age=timedelta(days=8)
    )


@pytest_asyncio.fixture
async def consumed_invite(session_factory, admin_user):
    return await _insert_invite(
        session_factory, admin_user.id, email="done@example.com", age=timedelta(days=1), consumed=True
    )


@pytest_asyncio.fixture
async def pending_invite(session_factory, admin_user):
    return await _insert_invite(
        session_factory, admin_user.id, email="jane@example.com", age=timedelta(hours=1)
    )


@pytest_asyncio.fixture
async def generic_invite(session_factory, admin_user):
    return await _insert_invite(session_factory, admin_user.id, email="", age=timedelta(hours=1))

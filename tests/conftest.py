"""Pytest configuration for all tests."""

from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from talentfolio.infrastructure.auth import hash_password, jwt_service
from talentfolio.infrastructure.persistence.database import Base
from talentfolio.infrastructure.persistence.models import UserModel, UserRole
from talentfolio.infrastructure.services import NotificationDispatcher, NotificationError

ADMIN_PASSWORD = "admin-pass-123"
TALENT_PASSWORD = "talent-pass-123"


class FakeClock:
    """Controllable time source."""

    def __init__(self, now: datetime | None = None) -> None:
        self.now = now or datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


class RecordingDispatcher(NotificationDispatcher):
    """Keeps every notification in memory; can be told to fail."""

    def __init__(self) -> None:
        self.invites: list[tuple[str, str]] = []
        self.magic_links: list[tuple[str, str]] = []
        self.fail = False

    async def send_invite(self, email: str, invite_url: str) -> None:
        if self.fail:
            raise NotificationError("delivery failed")
        self.invites.append((email, invite_url))

    async def send_magic_link(self, email: str, link: str) -> None:
        if self.fail:
            raise NotificationError("delivery failed")
        self.magic_links.append((email, link))


def auth_headers(user: UserModel) -> dict[str, str]:
    token = jwt_service.create_access_token(
        user_id=user.id, email=user.email, role=user.role.value
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def dispatcher() -> RecordingDispatcher:
    return RecordingDispatcher()


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """In-memory SQLite database shared by every session of one test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def admin_user(session_factory: async_sessionmaker[AsyncSession]) -> UserModel:
    async with session_factory() as session:
        user = UserModel(
            email="admin@example.com",
            role=UserRole.ADMIN,
            password_hash=hash_password(ADMIN_PASSWORD),
        )
        session.add(user)
        await session.commit()
        return user


@pytest_asyncio.fixture
async def talent_user(session_factory: async_sessionmaker[AsyncSession]) -> UserModel:
    async with session_factory() as session:
        user = UserModel(
            email="talent@example.com",
            role=UserRole.USER,
            password_hash=hash_password(TALENT_PASSWORD),
        )
        session.add(user)
        await session.commit()
        return user


@pytest.fixture
def admin_headers(admin_user: UserModel) -> dict[str, str]:
    return auth_headers(admin_user)


@pytest.fixture
def talent_headers(talent_user: UserModel) -> dict[str, str]:
    return auth_headers(talent_user)


@pytest_asyncio.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
    dispatcher: RecordingDispatcher,
) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client with overridden database and notification dependencies.

    Each request gets its own session, as in production.
    """
    from talentfolio.infrastructure.api.app import app
    from talentfolio.infrastructure.persistence.database import get_db_session
    from talentfolio.infrastructure.services import get_notification_dispatcher

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_notification_dispatcher] = lambda: dispatcher

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides = {}

"""
Pytest fixtures for test database, client, and data factories.

Each test gets its own SQLite database file built from the ORM metadata,
and the app's get_db dependency is overridden to open sessions on it.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "test")

import itertools
from datetime import datetime
from typing import AsyncGenerator

import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from eventhub.main import app
from eventhub.db.base import Base
from eventhub.db.session import build_engine, build_sessionmaker, get_db
from eventhub.models.event import Event
from eventhub.models.ticket import Ticket

from tests.factories import future_date, past_date

_sequence = itertools.count(1)


@pytest_asyncio.fixture(scope="function")
async def test_engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """Fresh database per test for isolation."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'eventhub_test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def session_factory(test_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return build_sessionmaker(test_engine)


@pytest_asyncio.fixture(scope="function")
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client whose requests each get a committed session on the test DB."""

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def create_event(session_factory):
    """Factory inserting an event directly; name defaults to something unique."""

    async def _create(name: str | None = None, date: datetime | None = None) -> Event:
        async with session_factory() as session:
            event = Event(
                name=name or f"Event {next(_sequence)}",
                date=date or future_date(),
            )
            session.add(event)
            await session.commit()
            await session.refresh(event)
            return event

    return _create


@pytest_asyncio.fixture
async def create_ticket(session_factory, create_event):
    """Factory inserting a ticket, creating a future event when none is given."""

    async def _create(
        code: str | None = None,
        event_id: int | None = None,
        owner: str = "Maria Silva",
        used: bool = False,
    ) -> Ticket:
        if event_id is None:
            event_id = (await create_event()).id
        async with session_factory() as session:
            ticket = Ticket(
                code=code or f"CODE{next(_sequence):06d}",
                owner=owner,
                event_id=event_id,
                used=used,
            )
            session.add(ticket)
            await session.commit()
            await session.refresh(ticket)
            return ticket

    return _create


@pytest_asyncio.fixture
async def test_event(create_event) -> Event:
    return await create_event(name="Test Concert")


@pytest_asyncio.fixture
async def past_event(create_event) -> Event:
    return await create_event(name="Last Year's Festival", date=past_date())

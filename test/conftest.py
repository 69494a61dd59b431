"""Shared fixtures.

Unit tests run against an in-memory SQLite database created from the ORM
metadata; the Spanner specific statements are covered with mocks and by the
end-to-end tests.
"""

from __future__ import annotations

import random
from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel.pool import StaticPool

from pgadapter_sample.application import SampleContext, build_context
from pgadapter_sample.core.database import create_all, create_sessionmaker
from pgadapter_sample.services import RandomDataService

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """In-memory SQLite engine with all tables created."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_sessionmaker(engine)


@pytest.fixture
def random_data() -> RandomDataService:
    return RandomDataService(random.Random(42))


@pytest.fixture
def context(engine: AsyncEngine, random_data: RandomDataService) -> SampleContext:
    return build_context(engine, random_data)

"""Fixtures for the SQLite-backed record store."""

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine

from yost.config import DatabaseConfig
from yost.infrastructure.persistence.database import create_db_engine, create_session_factory
from yost.infrastructure.persistence.schema import ensure_records_table


@pytest_asyncio.fixture
async def engine():
    """Per-test in-memory SQLite engine with the records table."""
    engine = create_db_engine(DatabaseConfig(url="sqlite+aiosqlite:///:memory:"))
    await ensure_records_table(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine: AsyncEngine):
    factory = create_session_factory(engine)
    async with factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def bare_engine():
    """In-memory SQLite engine without any tables."""
    engine = create_db_engine(DatabaseConfig(url="sqlite+aiosqlite:///:memory:"))
    yield engine
    await engine.dispose()

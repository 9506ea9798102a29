"""Test fixtures for the ClipURL application."""

from typing import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from clipurl.core.config import Settings
from clipurl.db.base import Database, get_engine
from clipurl.main import create_app
# Import models to ensure they're registered with SQLModel metadata
from clipurl.models.link import ShortLink  # noqa: F401
from clipurl.repositories.link_repository import LinkRepository
from tests.utils import TEST_BASE_URL

# Test database URL - using SQLite in-memory
TEST_SQLALCHEMY_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings for an isolated app backed by a throwaway SQLite file."""
    return Settings(
        _env_file=None,
        ENVIRONMENT="testing",
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'clipurl_test.db'}",
        BASE_URL=TEST_BASE_URL,
        LOG_TO_FILE=False,
        LOG_LEVEL="WARNING",
    )


@pytest_asyncio.fixture
async def test_engine():
    """Create test database engine with in-memory SQLite."""
    engine = create_async_engine(
        TEST_SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_db(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session on the in-memory engine."""
    async_session = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False
    )

    async with async_session() as session:
        yield session


@pytest_asyncio.fixture
async def file_database(test_settings) -> AsyncGenerator[Database, None]:
    """A file-backed database that supports several concurrent connections."""
    database = Database(get_engine(test_settings))
    await database.create_all()
    yield database
    await database.dispose()


@pytest.fixture
def link_repository() -> LinkRepository:
    """Return link repository instance."""
    return LinkRepository()


@pytest.fixture
def test_app(test_settings) -> FastAPI:
    """Create FastAPI test app."""
    return create_app(test_settings)


@pytest.fixture
def client(test_app) -> Generator[TestClient, None, None]:
    """Return FastAPI TestClient instance; redirects are not followed."""
    with TestClient(test_app, follow_redirects=False) as test_client:
        yield test_client

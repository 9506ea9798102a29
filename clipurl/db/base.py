"""Database base configuration for SQLAlchemy with SQLModel.

This module provides base database configuration for async SQLAlchemy with SQLModel.
It includes:
- Engine configuration
- Session factory
- Schema creation
"""

from typing import AsyncGenerator, Dict
import logging
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool, StaticPool
from sqlmodel import SQLModel

from clipurl.core.config import Settings

logger = logging.getLogger(__name__)


def get_engine_config(settings: Settings) -> Dict:
    """Get the engine configuration for the configured backend and environment.

    Returns:
        Dict: Engine configuration parameters.
    """
    config: Dict = {"echo": settings.DB_ECHO}

    if settings.is_sqlite:
        config["connect_args"] = {"check_same_thread": False}
        # In-memory databases live as long as their single connection
        if ":memory:" in settings.DATABASE_URL:
            config["poolclass"] = StaticPool
        return config

    if settings.ENVIRONMENT.value == "testing":
        config["poolclass"] = NullPool
    else:
        config["pool_pre_ping"] = True
    return config


def get_engine(settings: Settings) -> AsyncEngine:
    """Create and configure an async SQLAlchemy engine.

    Returns:
        AsyncEngine: Configured SQLAlchemy async engine instance.
    """
    engine_config = get_engine_config(settings)
    logger.info(f"Creating database engine for {settings.DATABASE_URL.split('://', 1)[0]}")
    return create_async_engine(settings.DATABASE_URL, **engine_config)


class Database:
    """Owns the async engine and session factory for one application."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self.session_factory = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(get_engine(settings))

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Get async session with proper cleanup.

        Yields:
            AsyncSession: SQLAlchemy async session
        """
        session = self.session_factory()
        try:
            yield session
        finally:
            await session.close()

    async def create_all(self) -> None:
        """Create all tables registered on the SQLModel metadata."""
        # Registers the table models on the metadata
        from clipurl import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Database schema ready")

    async def dispose(self) -> None:
        await self.engine.dispose()

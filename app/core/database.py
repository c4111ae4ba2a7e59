"""
Database Configuration

Async SQLAlchemy engine and session factory for PostgreSQL via asyncpg.

The engine is created on first use so that importing models, schemas or
the application never opens a connection.
"""

import ssl
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.core.config import settings


class Base(DeclarativeBase):
    """Declarative base shared by every portal table."""


_engine: Optional[AsyncEngine] = None
_async_session_maker: Optional[async_sessionmaker[AsyncSession]] = None


def database_url() -> str:
    """
    The configured URL without its query string.

    Hosted providers hand out URLs such as ``...?sslmode=require`` which
    asyncpg does not understand; SSL is driven by ``DATABASE_SSL`` instead.
    """
    return settings.DATABASE_URL.split("?", 1)[0]


def _connect_args() -> dict:
    if not settings.DATABASE_SSL:
        return {}

    ssl_context = ssl.create_default_context()
    ssl_context.check_hostname = False
    ssl_context.verify_mode = ssl.CERT_NONE
    return {"ssl": ssl_context}


def get_engine() -> AsyncEngine:
    """Get or create the async engine."""
    global _engine
    if _engine is None:
        _engine = create_async_engine(
            database_url(),
            echo=settings.is_development,
            pool_pre_ping=True,
            pool_size=5,
            max_overflow=10,
            connect_args=_connect_args(),
        )
    return _engine


def get_session_maker() -> async_sessionmaker[AsyncSession]:
    global _async_session_maker
    if _async_session_maker is None:
        # Objects stay readable after commit; responses serialize them afterwards
        _async_session_maker = async_sessionmaker(
            bind=get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
    return _async_session_maker


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Request-scoped session dependency.

    Commits when the route returns normally and rolls back when it raises,
    including for ``HTTPException``.

    Yields:
        AsyncSession: Session bound to the shared engine.
    """
    async with get_session_maker()() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def close_db() -> None:
    """Dispose of the engine on shutdown."""
    global _engine, _async_session_maker
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _async_session_maker = None

# app/adapters/outbound/persistence/database.py (async version)

"""
Async engine and sessions for the item store.

SQLite (aiosqlite) is the default backend; PostgreSQL is used through
asyncpg when DATABASE_URL points at it.
"""

import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker

from app.adapters.configuration.config import settings
from app.adapters.outbound.persistence.models.base_model import Base

# Configure logger
logger = logging.getLogger(__name__)

# Connection pool of server backends
SERVER_POOL_OPTIONS = {
    "pool_size": 20,
    "max_overflow": 10,
    "pool_timeout": 30,
    "pool_recycle": 1800,
    "pool_pre_ping": True,
}


def build_engine(database_url: str) -> AsyncEngine:
    """
    Create the async engine for the given URL.

    SQLite keeps the default pool of its dialect.
    """
    url = make_url(database_url)
    options = {} if url.get_backend_name() == "sqlite" else dict(SERVER_POOL_OPTIONS)

    logger.info(f"Item store backend: {url.render_as_string(hide_password=True)}")
    return create_async_engine(url, echo=settings.DB_ECHO, **options)


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(
        bind=bind,
        autoflush=False,
        expire_on_commit=False,
    )


engine = build_engine(settings.DATABASE_URL)
AsyncSessionLocal = build_session_factory(engine)


async def create_tables(bind: AsyncEngine = engine) -> None:
    """Create the stored_items table if it doesn't exist."""
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Item store tables are ready")


@asynccontextmanager
async def get_db_context() -> AsyncGenerator[AsyncSession, None]:
    """
    Session scoped to one unit of work.

    Pending changes are committed on exit and rolled back when the block
    raises.

    Yields:
        AsyncSession: SQLAlchemy async session
    """
    session = AsyncSessionLocal()
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Request-scoped session for FastAPI Depends().

    Yields:
        AsyncSession: SQLAlchemy async session
    """
    async with get_db_context() as session:
        yield session

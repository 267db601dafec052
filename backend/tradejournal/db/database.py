"""
Database connection and session management.

Uses SQLite with aiosqlite for async support.
"""

import os
import logging
from typing import AsyncGenerator, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from tradejournal.db.models import Base, Trade
from tradejournal.core.config import settings

logger = logging.getLogger(__name__)

# Database path - create data directory if needed
DATA_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "data")


def _default_database_url() -> str:
    if settings.sqlite_path:
        return f"sqlite+aiosqlite:///{settings.sqlite_path}"
    os.makedirs(DATA_DIR, exist_ok=True)
    return f"sqlite+aiosqlite:///{os.path.join(DATA_DIR, 'tradejournal.db')}"


def create_engine(database_url: str) -> AsyncEngine:
    """
    Create an async SQLite engine.
    Note: SQLite requires check_same_thread=False for async
    """
    return create_async_engine(
        database_url,
        echo=False,  # Set to True for SQL debugging
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,  # Recommended for SQLite
    )


def create_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


DATABASE_URL = _default_database_url()
engine = create_engine(DATABASE_URL)
AsyncSessionLocal = create_session_factory(engine)


async def init_db(bind: Optional[AsyncEngine] = None) -> None:
    """
    Initialize the database - create all tables.
    Called on application startup.
    """
    bind = bind or engine
    try:
        async with bind.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info(f"Database initialized at: {bind.url}")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise


async def close_db() -> None:
    """
    Close database connections.
    Called on application shutdown.
    """
    await engine.dispose()
    logger.info("Database connections closed")


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency that provides a database session.
    Use with FastAPI Depends().
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


# CRUD helper functions

async def add_trade(session: AsyncSession, trade_data: dict) -> Trade:
    """Insert a trade row. Store assigns id and created_at."""
    trade = Trade(**trade_data)
    session.add(trade)
    await session.flush()
    await session.refresh(trade)
    return trade


async def get_trades(session: AsyncSession, user_id: str = "default") -> list[Trade]:
    """Get all trades for a user, newest first."""
    result = await session.execute(
        select(Trade)
        .where(Trade.user_id == user_id)
        .order_by(Trade.created_at.desc())
    )
    return list(result.scalars().all())


async def remove_trade(session: AsyncSession, trade_id: str, user_id: str = "default") -> int:
    """Delete one trade. Returns the number of rows removed."""
    result = await session.execute(
        delete(Trade).where(Trade.id == trade_id, Trade.user_id == user_id)
    )
    await session.flush()
    return result.rowcount

"""
Database connection management with SQLAlchemy async support.

Supports SQLite (development, tests) and MySQL/PostgreSQL (production) via DATABASE_URL.
"""
from typing import Optional
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool
from cms_domains.db.models import Base
import logging

logger = logging.getLogger(__name__)

# Database engine (will be initialized in init_db)
engine = None
async_session_maker = None


async def init_db(database_url: Optional[str] = None):
    """
    Initialize database connection and create tables.

    Args:
        database_url: Optional database URL override (defaults to settings.database_url)
    """
    global engine, async_session_maker

    if database_url is None:
        from cms_domains.config import settings
        database_url = settings.database_url

    logger.info(f"Initializing database: {database_url.split('://')[0]}://...")

    # Create async engine with appropriate settings based on database type
    if database_url.startswith("sqlite"):
        # StaticPool keeps a single connection, so ":memory:" databases survive across sessions
        engine = create_async_engine(
            database_url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_async_engine(
            database_url,
            echo=False,
            pool_pre_ping=True,  # Verify connections before using
            pool_recycle=3600,   # Recycle connections after 1 hour
        )

    # Create session factory
    async_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("✅ Database initialized successfully")


def get_session_maker() -> async_sessionmaker:
    """Return the session factory created by init_db()."""
    if async_session_maker is None:
        raise RuntimeError("Database not initialized. Call init_db() first.")
    return async_session_maker


async def close_db():
    """Close database connection."""
    global engine, async_session_maker
    if engine:
        await engine.dispose()
        logger.info("Database connection closed")
    engine = None
    async_session_maker = None

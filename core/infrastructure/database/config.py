"""
Database configuration.

Manages engine creation and the async session factory.
"""
from typing import Optional
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
import logging

from core.settings import get_app_settings
from core.settings.sections.database import DatabaseSettings


logger = logging.getLogger(__name__)


# =============================================================================
# ENGINE CREATION
# =============================================================================

def create_engine(settings: Optional[DatabaseSettings] = None) -> AsyncEngine:
    """
    Create async SQLAlchemy engine.

    Args:
        settings: Database settings (defaults to the application settings)

    Returns:
        Configured async engine
    """
    settings = settings or get_app_settings().database
    logger.info(f"Creating database engine: {settings.database_url}")

    if settings.is_sqlite:
        return create_async_engine(
            settings.database_url,
            echo=settings.echo_sql,
            connect_args={"check_same_thread": False},
        )

    return create_async_engine(
        settings.database_url,
        echo=settings.echo_sql,
        pool_size=settings.pool_size,
        max_overflow=settings.max_overflow,
        pool_timeout=settings.pool_timeout,
        pool_recycle=settings.pool_recycle,
        pool_pre_ping=True,  # Test connections before using
    )


# Global engine instance
engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker] = None


def get_engine() -> AsyncEngine:
    """
    Get or create global engine instance.

    Returns:
        Global async engine
    """
    global engine

    if engine is None:
        engine = create_engine()

    return engine


# =============================================================================
# SESSION FACTORY
# =============================================================================

def get_session_factory() -> async_sessionmaker:
    """
    Get session factory bound to the global engine.

    Returns:
        Session factory for creating sessions
    """
    global _session_factory

    if _session_factory is None:
        _session_factory = async_sessionmaker(
            bind=get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
    return _session_factory


# =============================================================================
# DATABASE INITIALIZATION
# =============================================================================

async def init_database(target: Optional[AsyncEngine] = None):
    """
    Initialize database.

    Creates all tables if they don't exist.
    """
    from core.data.models import Base

    logger.info("Initializing database...")

    target = target or get_engine()

    async with target.begin() as conn:
        # Create all tables
        await conn.run_sync(Base.metadata.create_all)

    logger.info("✅ Database initialized successfully")


async def ping_database(session_factory: Optional[async_sessionmaker] = None) -> bool:
    """Run SELECT 1 against the database."""
    factory = session_factory or get_session_factory()
    async with factory() as session:
        await session.execute(text("SELECT 1"))
    return True


async def close_database():
    """Close database connections."""
    global engine, _session_factory

    if engine:
        logger.info("Closing database connections...")
        await engine.dispose()
        engine = None
        _session_factory = None
        logger.info("✅ Database connections closed")

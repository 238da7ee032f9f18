"""Database setup and session management."""

from loguru import logger
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from minemap.config import settings


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""

    pass


def create_session_factory(url: str, **engine_kwargs) -> async_sessionmaker:
    """Engine plus session factory for a database URL."""
    engine = create_async_engine(url, future=True, **engine_kwargs)
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


# Application-wide session factory
async_session = create_session_factory(settings.database_url, echo=settings.debug)
engine: AsyncEngine = async_session.kw["bind"]


async def get_db() -> AsyncSession:
    """Dependency for getting database sessions."""
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception as e:
            logger.debug(f"Rolling back session: {e!r}")
            await session.rollback()
            raise


async def init_db(bind: AsyncEngine = engine):
    """Create tables that do not exist yet."""
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(f"Tables ready: {', '.join(sorted(Base.metadata.tables))}")


async def close_db(bind: AsyncEngine = engine):
    await bind.dispose()

from typing import AsyncGenerator
from fastapi import Request
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncEngine, AsyncSession
from sqlalchemy.orm import declarative_base
from bloglist.config import Settings

Base = declarative_base()

def async_database_url(url: str) -> str:
    """Convert a plain PostgreSQL URL to its asyncpg form"""
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url

def build_engine(settings: Settings) -> AsyncEngine:
    return create_async_engine(
        async_database_url(settings.DATABASE_URL),
        echo=settings.DATABASE_ECHO,
    )

def build_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency for getting async database session
    """
    async with request.app.state.session_factory() as session:
        try:
            yield session
        finally:
            await session.close()

async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all tables defined in the models
    """
    # Register the mappers on Base.metadata before create_all
    import bloglist.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

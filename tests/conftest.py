"""Shared pytest fixtures for the bloglist API tests."""

from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.config import Settings
from bloglist.database import create_tables
from bloglist.main import create_app
from bloglist.schemas.blog import BlogCreate
from bloglist.schemas.user import UserCreate
from bloglist.services.blog_service import BlogService
from bloglist.services.user_service import UserService
from tests.helpers import SEED_BLOGS, SEED_USERS


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'bloglist.db'}",
        SECRET_KEY="test-secret",
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
async def app(settings: Settings) -> AsyncGenerator[FastAPI, None]:
    """Build the app on a fresh database holding the seed users and blogs."""
    app = create_app(settings)
    await create_tables(app.state.engine)

    async with app.state.session_factory() as session:
        user_service = UserService(session)
        blog_service = BlogService(session)
        for user_data in SEED_USERS:
            user = await user_service.create_user(UserCreate(**user_data))
            for blog_data in SEED_BLOGS[user.username]:
                await blog_service.create_blog(user, BlogCreate(**blog_data))

    yield app

    await app.state.engine.dispose()


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
async def db_session(app: FastAPI) -> AsyncGenerator[AsyncSession, None]:
    async with app.state.session_factory() as session:
        yield session

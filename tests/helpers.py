"""Seed data and database helpers shared by the API tests."""

from typing import Any

from fastapi import FastAPI
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from bloglist.models import Blog, User
from bloglist.services.auth_service import AuthService

SEED_USERS = [
    {"username": "root", "name": "Superuser", "password": "sekret"},
    {"username": "mluukkai", "name": "Matti Luukkainen", "password": "salainen"},
]

SEED_BLOGS = {
    "root": [
        {"title": "React patterns", "author": "Michael Chan", "url": "https://reactpatterns.com/", "likes": 7},
        {"title": "Go To Statement Considered Harmful", "author": "Edsger W. Dijkstra",
         "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html", "likes": 5},
    ],
    "mluukkai": [
        {"title": "Canonical string reduction", "author": "Edsger W. Dijkstra",
         "url": "http://www.cs.utexas.edu/~EWD/transcriptions/EWD08xx/EWD808.html", "likes": 12},
        {"title": "First class tests", "author": "Robert C. Martin",
         "url": "http://blog.cleancoder.com/uncle-bob/2017/05/05/TestDefinitions.htmll", "likes": 10},
    ],
}

SEED_BLOG_COUNT = sum(len(blogs) for blogs in SEED_BLOGS.values())


async def blogs_in_db(app: FastAPI) -> list[Blog]:
    async with app.state.session_factory() as session:
        result = await session.execute(select(Blog))
        return list(result.scalars().all())


async def get_blog_from_db(app: FastAPI, blog_id: Any) -> Blog | None:
    async with app.state.session_factory() as session:
        return await session.get(Blog, blog_id)


async def get_user_from_db(app: FastAPI, username: str) -> User:
    async with app.state.session_factory() as session:
        result = await session.execute(
            select(User).where(User.username == username).options(selectinload(User.blog_links))
        )
        return result.scalars().one()


async def users_in_db(app: FastAPI) -> list[User]:
    async with app.state.session_factory() as session:
        result = await session.execute(select(User))
        return list(result.scalars().all())


async def auth_data(app: FastAPI, username: str) -> tuple[User, dict[str, str]]:
    """Return the user and an Authorization header carrying a fresh token."""
    user = await get_user_from_db(app, username)
    token = AuthService(None, app.state.settings).create_access_token(user)
    return user, {"Authorization": f"Bearer {token}"}

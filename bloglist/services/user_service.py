import logging
import uuid
from typing import Optional, List
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from bloglist.exceptions import ValidationError
from bloglist.models.user import User, UserBlog
from bloglist.schemas.user import UserCreate
from bloglist.services.auth_service import get_password_hash

logger = logging.getLogger(__name__)

class UserService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_user(self, user_data: UserCreate) -> User:
        """
        Register a new user with a hashed password
        """
        query = select(User).where(User.username == user_data.username)
        result = await self.db.execute(query)
        if result.scalars().first() is not None:
            raise ValidationError("expected `username` to be unique")

        user = User(
            username=user_data.username,
            name=user_data.name,
            password_hash=get_password_hash(user_data.password),
            blog_links=[],
        )
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration
            await self.db.rollback()
            raise ValidationError("expected `username` to be unique")

        logger.info("Registered user %s", user.username)
        return user

    async def list_users(self) -> List[User]:
        query = (
            select(User)
            .options(selectinload(User.blog_links).selectinload(UserBlog.blog))
            .order_by(User.created_at)
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get_user(self, user_id: uuid.UUID) -> Optional[User]:
        query = (
            select(User)
            .where(User.id == user_id)
            .options(selectinload(User.blog_links).selectinload(UserBlog.blog))
        )
        result = await self.db.execute(query)
        return result.scalars().first()

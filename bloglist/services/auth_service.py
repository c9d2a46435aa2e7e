import logging
import uuid
from datetime import datetime, timedelta
from typing import Optional
from jose import jwt, JWTError, ExpiredSignatureError
from passlib.context import CryptContext
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from bloglist.config import Settings
from bloglist.exceptions import Unauthenticated
from bloglist.models.user import User
from bloglist.schemas.user import Token, TokenData

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(plain_password: str, password_hash: str) -> bool:
    return pwd_context.verify(plain_password, password_hash)

class AuthService:
    def __init__(self, db: AsyncSession, settings: Settings):
        self.db = db
        self.settings = settings

    def create_access_token(self, user: User) -> str:
        """Create JWT access token carrying the user's id and username"""
        payload = {
            "id": str(user.id),
            "username": user.username,
            "exp": datetime.utcnow() + timedelta(minutes=self.settings.ACCESS_TOKEN_EXPIRE_MINUTES),
        }
        return jwt.encode(payload, self.settings.SECRET_KEY, algorithm=self.settings.JWT_ALGORITHM)

    def decode_access_token(self, token: str) -> TokenData:
        try:
            payload = jwt.decode(
                token,
                self.settings.SECRET_KEY,
                algorithms=[self.settings.JWT_ALGORITHM],
            )
        except ExpiredSignatureError:
            raise Unauthenticated("token expired")
        except JWTError:
            raise Unauthenticated("token invalid")

        if not payload.get("id"):
            raise Unauthenticated("token invalid")
        return TokenData(id=payload["id"], username=payload.get("username", ""))

    async def authenticate(self, username: Optional[str], password: Optional[str]) -> Token:
        """
        Check username and password and issue a token for the matching user
        """
        if not username or not password:
            raise Unauthenticated("invalid username or password")

        query = select(User).where(User.username == username)
        result = await self.db.execute(query)
        user = result.scalars().first()

        if user is None or not verify_password(password, user.password_hash):
            logger.warning("Failed login for username %r", username)
            raise Unauthenticated("invalid username or password")

        return Token(
            token=self.create_access_token(user),
            username=user.username,
            name=user.name,
        )

    async def resolve_user(self, token: Optional[str]) -> User:
        """
        Resolve a bearer token to its user, with the owned blog ids loaded
        """
        if not token:
            raise Unauthenticated("token missing")

        token_data = self.decode_access_token(token)
        try:
            user_id = uuid.UUID(token_data.id)
        except ValueError:
            raise Unauthenticated("token invalid")

        query = select(User).where(User.id == user_id).options(selectinload(User.blog_links))
        result = await self.db.execute(query)
        user = result.scalars().first()
        if user is None:
            logger.warning("Token for unknown user %s", user_id)
            raise Unauthenticated("token invalid")
        return user

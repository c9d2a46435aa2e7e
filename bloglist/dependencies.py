from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from bloglist.config import Settings
from bloglist.database import get_db
from bloglist.services.auth_service import AuthService
from bloglist.services.blog_service import BlogService
from bloglist.services.user_service import UserService

def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings

async def get_auth_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings)
):
    return AuthService(db, settings)

async def get_blog_service(db: AsyncSession = Depends(get_db)):
    return BlogService(db)

async def get_user_service(db: AsyncSession = Depends(get_db)):
    return UserService(db)

from typing import Optional
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from bloglist.dependencies import get_auth_service
from bloglist.models.user import User
from bloglist.services.auth_service import AuthService

# auto_error is off so a missing header reaches the Unauthenticated handler
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/login", auto_error=False)

async def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    auth_service: AuthService = Depends(get_auth_service)
) -> User:
    """Get current user from the bearer token"""
    return await auth_service.resolve_user(token)

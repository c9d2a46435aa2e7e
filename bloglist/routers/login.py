from typing import Optional
from fastapi import APIRouter, Depends

from bloglist.dependencies import get_auth_service
from bloglist.schemas.user import LoginRequest, Token
from bloglist.services.auth_service import AuthService

router = APIRouter()

@router.post("", response_model=Token)
async def login(
    credentials: Optional[LoginRequest] = None,
    auth_service: AuthService = Depends(get_auth_service)
):
    """
    Authenticate user and return JWT token
    """
    credentials = credentials or LoginRequest()
    return await auth_service.authenticate(credentials.username, credentials.password)

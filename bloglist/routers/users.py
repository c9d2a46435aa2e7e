import uuid
from typing import List
from fastapi import APIRouter, Depends, status

from bloglist.dependencies import get_user_service
from bloglist.exceptions import NotFound, ValidationError
from bloglist.schemas.user import UserCreate, User as UserSchema
from bloglist.services.user_service import UserService

router = APIRouter()

@router.get("", response_model=List[UserSchema])
async def list_users(user_service: UserService = Depends(get_user_service)):
    """
    List all users with the blogs they own
    """
    return await user_service.list_users()

@router.get("/{user_id}", response_model=UserSchema)
async def get_user(
    user_id: str,
    user_service: UserService = Depends(get_user_service)
):
    """
    Get a single user with the blogs they own
    """
    try:
        parsed_id = uuid.UUID(user_id)
    except ValueError:
        raise ValidationError("malformatted id")

    user = await user_service.get_user(parsed_id)
    if user is None:
        raise NotFound("user not found")
    return user

@router.post("", response_model=UserSchema, status_code=status.HTTP_201_CREATED)
async def register_user(
    user_data: UserCreate,
    user_service: UserService = Depends(get_user_service)
):
    """
    Register a new user with username, name and password
    """
    return await user_service.create_user(user_data)

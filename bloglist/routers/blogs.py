from typing import List
from fastapi import APIRouter, Depends, Response, status

from bloglist.dependencies import get_blog_service
from bloglist.models.user import User
from bloglist.schemas.blog import Blog as BlogSchema, BlogCreate, BlogUpdate
from bloglist.services.blog_service import BlogService
from bloglist.utils.auth import get_current_user

router = APIRouter()

@router.get("", response_model=List[BlogSchema])
async def list_blogs(blog_service: BlogService = Depends(get_blog_service)):
    """
    List all blogs with their owner's id, username and name
    """
    return await blog_service.list_blogs()

@router.post("", response_model=BlogSchema, status_code=status.HTTP_201_CREATED)
async def create_blog(
    blog_data: BlogCreate,
    current_user: User = Depends(get_current_user),
    blog_service: BlogService = Depends(get_blog_service)
):
    """
    Create a blog owned by the authenticated user
    """
    return await blog_service.create_blog(current_user, blog_data)

@router.delete("/{blog_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_blog(
    blog_id: str,
    current_user: User = Depends(get_current_user),
    blog_service: BlogService = Depends(get_blog_service)
):
    """
    Delete a blog; only its owner may do so
    """
    await blog_service.delete_blog(current_user, blog_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# No authentication on update, unlike create and delete
@router.put("/{blog_id}", response_model=BlogSchema)
async def update_blog(
    blog_id: str,
    blog_data: BlogUpdate,
    blog_service: BlogService = Depends(get_blog_service)
):
    return await blog_service.update_blog(blog_id, blog_data)

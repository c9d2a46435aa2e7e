import uuid
from typing import Optional
from pydantic import BaseModel, constr

class OwnerSummary(BaseModel):
    id: uuid.UUID
    username: str
    name: Optional[str] = None

    class Config:
        from_attributes = True

class BlogCreate(BaseModel):
    # title and url are checked by BlogService so the error reads the same
    # for create and update
    title: Optional[constr(max_length=255)] = None  # type: ignore
    url: Optional[constr(max_length=2048)] = None  # type: ignore
    author: Optional[constr(max_length=255)] = None  # type: ignore
    likes: Optional[int] = None

class BlogUpdate(BaseModel):
    """Editable blog fields; anything else in the request body is dropped"""
    title: Optional[constr(max_length=255)] = None  # type: ignore
    author: Optional[constr(max_length=255)] = None  # type: ignore
    likes: Optional[int] = None
    url: Optional[constr(max_length=2048)] = None  # type: ignore

class BlogSummary(BaseModel):
    id: uuid.UUID
    title: str
    author: str
    url: str
    likes: int

    class Config:
        from_attributes = True

class Blog(BlogSummary):
    user: Optional[OwnerSummary] = None

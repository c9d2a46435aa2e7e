import uuid
from typing import Optional, List
from pydantic import BaseModel, constr
from bloglist.schemas.blog import BlogSummary

class UserCreate(BaseModel):
    username: constr(strip_whitespace=True, min_length=3, max_length=100)  # type: ignore
    name: Optional[constr(max_length=100)] = None  # type: ignore
    password: constr(min_length=3)  # type: ignore

class User(BaseModel):
    id: uuid.UUID
    username: str
    name: Optional[str] = None
    blogs: List[BlogSummary] = []

    class Config:
        from_attributes = True

class LoginRequest(BaseModel):
    # Left optional so an empty body is a failed login (401), not a 400
    username: Optional[str] = None
    password: Optional[str] = None

class Token(BaseModel):
    token: str
    username: str
    name: Optional[str] = None

class TokenData(BaseModel):
    id: str
    username: str

import logging
import uuid
from typing import List
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from bloglist.exceptions import ValidationError, Forbidden, NotFound
from bloglist.models.blog import Blog
from bloglist.models.user import User
from bloglist.schemas.blog import BlogCreate, BlogUpdate

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("title", "author", "likes", "url")
REQUIRED_FIELDS = ("title", "url")

def parse_blog_id(blog_id: str) -> uuid.UUID:
    """
    Parse a blog id from the request path, rejecting malformed values
    """
    try:
        return uuid.UUID(str(blog_id))
    except ValueError:
        raise ValidationError("malformatted id")

def validate_blog(blog: Blog) -> None:
    missing = [field for field in REQUIRED_FIELDS if not getattr(blog, field)]
    if missing:
        errors = ", ".join(f"{field}: `{field}` is required" for field in missing)
        raise ValidationError(f"Blog validation failed: {errors}")

class BlogService:
    """
    Blog CRUD that keeps Blog.user and the owner's ordered blog ids in step.

    Create and delete each touch both the blog row and the owner's
    back-reference; both writes go through one commit so they succeed or
    roll back together.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_blogs(self) -> List[Blog]:
        query = select(Blog).options(selectinload(Blog.user)).order_by(Blog.created_at)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get_blog(self, blog_id: uuid.UUID) -> Blog:
        query = select(Blog).where(Blog.id == blog_id).options(selectinload(Blog.user))
        result = await self.db.execute(query)
        blog = result.scalars().first()
        if blog is None:
            raise NotFound("blog not found")
        return blog

    async def create_blog(self, user: User, blog_data: BlogCreate) -> Blog:
        """
        Create a blog owned by `user` and append it to the user's blog ids.

        `user` must have its blog_links loaded (see AuthService.resolve_user).
        """
        blog = Blog(
            title=blog_data.title,
            url=blog_data.url,
            author=blog_data.author or user.name or "unknown",
            likes=blog_data.likes if blog_data.likes is not None else 0,
            user=user,
        )
        validate_blog(blog)

        try:
            self.db.add(blog)
            await self.db.flush()
            user.blog_ids.append(blog.id)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info("User %s created blog %s", user.username, blog.id)
        return blog

    async def delete_blog(self, user: User, blog_id: str) -> None:
        """
        Delete a blog owned by `user`.

        `blog_id` must equal the string form of one of the user's own blog
        ids exactly; Blog.user is not consulted.
        """
        parsed_id = parse_blog_id(blog_id)

        link = next(
            (link for link in user.blog_links if str(link.blog_id) == blog_id),
            None,
        )
        if link is None:
            logger.warning("User %s tried to delete blog %s they do not own", user.username, blog_id)
            raise Forbidden("unauthorized blog operation")

        try:
            # Detach the back-reference first, then drop the blog row
            user.blog_links.remove(link)
            await self.db.flush()
            await self.db.execute(delete(Blog).where(Blog.id == parsed_id))
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info("User %s deleted blog %s", user.username, parsed_id)

    async def update_blog(self, blog_id: str, blog_data: BlogUpdate) -> Blog:
        """
        Apply a partial update of the editable fields
        """
        parsed_id = parse_blog_id(blog_id)
        blog = await self.get_blog(parsed_id)

        changes = blog_data.model_dump(exclude_unset=True)
        for field in EDITABLE_FIELDS:
            if field in changes:
                setattr(blog, field, changes[field])

        try:
            validate_blog(blog)
            if blog.likes is None:
                raise ValidationError("Blog validation failed: likes: `likes` is required")
            if blog.author is None:
                blog.author = "unknown"
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        return blog

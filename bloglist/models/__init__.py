from bloglist.models.user import User, UserBlog
from bloglist.models.blog import Blog

__all__ = ["User", "UserBlog", "Blog"]

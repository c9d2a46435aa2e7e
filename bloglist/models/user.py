import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Integer, ForeignKey, Uuid
from sqlalchemy.ext.associationproxy import association_proxy
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import relationship
from bloglist.database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    username = Column(String(100), unique=True, nullable=False, index=True)
    name = Column(String(100), nullable=True)
    password_hash = Column(String(100), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Ordered back-references to the blogs this user owns
    blog_links = relationship(
        "UserBlog",
        back_populates="user",
        order_by="UserBlog.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )
    blog_ids = association_proxy(
        "blog_links", "blog_id", creator=lambda blog_id: UserBlog(blog_id=blog_id)
    )

    @property
    def blogs(self):
        return [link.blog for link in self.blog_links]

    def __repr__(self):
        return f"<User {self.username}>"

class UserBlog(Base):
    __tablename__ = "user_blogs"

    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    blog_id = Column(Uuid, ForeignKey("blogs.id", ondelete="CASCADE"), primary_key=True)
    position = Column(Integer, nullable=False)

    user = relationship("User", back_populates="blog_links")
    blog = relationship("Blog")

    def __repr__(self):
        return f"<UserBlog {self.user_id} -> {self.blog_id}>"

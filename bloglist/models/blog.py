import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Integer, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from bloglist.database import Base

class Blog(Base):
    __tablename__ = "blogs"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    title = Column(String(255), nullable=False)
    author = Column(String(255), nullable=False, default="unknown")
    url = Column(String(2048), nullable=False)
    likes = Column(Integer, nullable=False, default=0)
    user_id = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    user = relationship("User")

    def __repr__(self):
        return f"<Blog {self.title}>"

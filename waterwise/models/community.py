"""
Community feed models: posts and comments.
"""

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from waterwise.core.database import Base
from waterwise.models.base import BaseModel, JSONType


class Post(Base, BaseModel):
    """A community story."""

    __tablename__ = "posts"

    user_id = Column(
        String(255),
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    content = Column(Text, nullable=False)
    image_url = Column(String(500), nullable=True)
    likes = Column(JSONType, nullable=False, default=list)  # liking user ids
    shares = Column(Integer, nullable=False, default=0)
    tags = Column(JSONType, nullable=False, default=list)

    author = relationship("Profile", back_populates="posts", lazy="joined")
    comments = relationship(
        "Comment",
        back_populates="post",
        cascade="all, delete-orphan",
        order_by="Comment.created_at",
    )


class Comment(Base, BaseModel):
    """A comment on a post. Only stored after passing moderation."""

    __tablename__ = "comments"

    post_id = Column(
        Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id = Column(
        String(255), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    )
    content = Column(Text, nullable=False)

    post = relationship("Post", back_populates="comments")
    author = relationship("Profile", lazy="joined")

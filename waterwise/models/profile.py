"""
Profile models.

A profile is the persisted identity of an auth-service user; its primary key
is the auth user id (the token subject).
"""

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from waterwise.core.database import Base
from waterwise.models.base import BaseModel, utcnow


class Profile(Base, BaseModel):
    """Member profile, created on first sign-in."""

    __tablename__ = "profiles"

    # Override ID to use the auth user id
    id = Column(String(255), primary_key=True, index=True)

    username = Column(String(100), unique=True, nullable=True, index=True)
    full_name = Column(String(255), nullable=True)
    avatar_url = Column(String(500), nullable=True)
    bio = Column(Text, nullable=True, default="")
    role = Column(String(20), nullable=False, default="member")  # admin | moderator | member
    level = Column(Integer, nullable=False, default=1)
    followers_count = Column(Integer, nullable=False, default=0)
    following_count = Column(Integer, nullable=False, default=0)

    posts = relationship("Post", back_populates="author", cascade="all, delete-orphan")


class UserFollow(Base):
    """Follower -> followed relation between two profiles."""

    __tablename__ = "user_follows"

    id = Column(Integer, primary_key=True, index=True)
    follower_id = Column(
        String(255), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    )
    following_id = Column(
        String(255), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    )
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    __table_args__ = (
        UniqueConstraint("follower_id", "following_id", name="uq_user_follow"),
    )

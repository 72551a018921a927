"""
Education content: articles and video tutorials.
"""

from sqlalchemy import Column, Date, Index, Integer, String, Text

from waterwise.core.database import Base
from waterwise.models.base import BaseModel, JSONType


class Article(Base, BaseModel):
    """Education article. Read-only for members."""

    __tablename__ = "articles"

    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False, default="")
    category = Column(String(50), nullable=False, index=True)
    image_url = Column(String(500), nullable=True)
    author = Column(String(100), nullable=True)
    date = Column(Date, nullable=True)
    tags = Column(JSONType, nullable=False, default=list)


class VideoTutorial(Base, BaseModel):
    """Video tutorial linked from the education hub."""

    __tablename__ = "video_tutorials"

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    thumbnail_url = Column(String(500), nullable=True)
    video_url = Column(String(500), nullable=False)
    category = Column(String(50), nullable=False)
    duration = Column(String(20), nullable=True)  # display string, e.g. "12:34"
    instructor = Column(String(100), nullable=True)
    date = Column(Date, nullable=True)
    views = Column(Integer, nullable=False, default=0)

    __table_args__ = (Index("idx_video_category", "category"),)

import datetime as dt
from typing import List, Optional

from pydantic import BaseModel, Field, computed_field

from waterwise.models.base import PydanticBase
from waterwise.services import reading
from waterwise.services.embeds import embed_url_for

# --- Articles ---


class ArticleBase(PydanticBase):
    title: str = Field(min_length=1, max_length=255)
    content: str = ""
    category: str = Field(min_length=1, max_length=50)
    image_url: Optional[str] = None
    author: Optional[str] = None
    date: Optional[dt.date] = None
    tags: List[str] = Field(default_factory=list)


class ArticleCreate(ArticleBase):
    pass


class ArticleResponse(ArticleBase):
    id: int
    created_at: dt.datetime


class ArticleDetail(ArticleResponse):
    """Article page payload: the article plus reading aids."""

    @computed_field
    @property
    def paragraphs(self) -> List[str]:
        return reading.split_paragraphs(self.content)

    @computed_field
    @property
    def reading_minutes(self) -> int:
        return reading.reading_minutes(self.content)


class ReadingProgressRequest(BaseModel):
    scroll_offset: float = Field(..., description="Current vertical scroll offset")
    content_height: float = Field(..., ge=0, description="Rendered article height")
    viewport_height: float = Field(..., ge=0, description="Visible window height")


class ReadingProgressResponse(BaseModel):
    progress: float = Field(..., ge=0, le=100)


# --- Video tutorials ---


class VideoBase(PydanticBase):
    title: str = Field(min_length=1, max_length=255)
    description: str = ""
    thumbnail_url: Optional[str] = None
    video_url: str = Field(min_length=1, max_length=500)
    category: str = Field(min_length=1, max_length=50)
    duration: Optional[str] = None
    instructor: Optional[str] = None
    date: Optional[dt.date] = None


class VideoCreate(VideoBase):
    pass


class VideoResponse(VideoBase):
    id: int
    views: int

    @computed_field
    @property
    def embed_url(self) -> str:
        return embed_url_for(self.video_url)

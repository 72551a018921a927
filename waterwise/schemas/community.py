from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, computed_field

from waterwise.models.base import PydanticBase
from waterwise.schemas.profile import AuthorSummary


class PostCreate(BaseModel):
    content: str = Field(..., min_length=1)
    image_url: Optional[str] = Field(None, max_length=500)
    tags: List[str] = Field(default_factory=list)


class CommentCreate(BaseModel):
    content: str = Field(..., min_length=1)


class CommentResponse(PydanticBase):
    id: int
    post_id: int
    user_id: str
    content: str
    created_at: datetime
    author: Optional[AuthorSummary] = None


class PostResponse(PydanticBase):
    id: int
    user_id: str
    content: str
    image_url: Optional[str] = None
    likes: List[str] = Field(default_factory=list)
    shares: int = 0
    tags: List[str] = Field(default_factory=list)
    created_at: datetime
    author: Optional[AuthorSummary] = None
    comments: List[CommentResponse] = Field(default_factory=list)

    @computed_field
    @property
    def like_count(self) -> int:
        return len(self.likes)

    @computed_field
    @property
    def comment_count(self) -> int:
        return len(self.comments)


class LikeResponse(BaseModel):
    post_id: int
    liked: bool
    likes: List[str]


class ShareResponse(BaseModel):
    post_id: int
    shares: int
    share_url: str


class CommunityStats(BaseModel):
    members: int
    discussions: int
    shares: int
    likes: int

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from waterwise.models.base import PydanticBase


class AuthorSummary(PydanticBase):
    """Author fields embedded in posts and comments."""

    id: str
    username: Optional[str] = None
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None


class ProfileResponse(PydanticBase):
    id: str
    username: Optional[str] = None
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    bio: Optional[str] = None
    role: str
    level: int
    followers_count: int
    following_count: int
    created_at: datetime
    updated_at: datetime


class ProfileUpdate(BaseModel):
    username: Optional[str] = Field(None, min_length=1, max_length=100)
    full_name: Optional[str] = Field(None, max_length=255)
    bio: Optional[str] = None
    avatar_url: Optional[str] = Field(None, max_length=500)


class AvatarResponse(BaseModel):
    avatar_url: str


class FollowResponse(BaseModel):
    follower_id: str
    following_id: str
    following: bool
    followers_count: int

"""
Database models for WaterWise.
"""

from .base import BaseModel
from .community import Comment, Post
from .content import Article, VideoTutorial
from .profile import Profile, UserFollow
from .water_zone import WaterZone

__all__ = [
    "BaseModel",
    "Article",
    "VideoTutorial",
    "Profile",
    "UserFollow",
    "Post",
    "Comment",
    "WaterZone",
]

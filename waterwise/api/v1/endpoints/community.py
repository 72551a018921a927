"""
Community feed endpoints.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from waterwise.api import deps
from waterwise.core.database import get_db
from waterwise.schemas.community import (
    CommentCreate,
    CommentResponse,
    CommunityStats,
    LikeResponse,
    PostCreate,
    PostResponse,
    ShareResponse,
)
from waterwise.services.community_service import CommunityService

router = APIRouter()


@router.get("/posts", response_model=List[PostResponse])
def list_posts(database: Session = Depends(get_db)) -> Any:
    """Newest posts first, each with its author and comments."""
    return CommunityService.list_posts(database)


@router.post(
    "/posts", response_model=PostResponse, status_code=status.HTTP_201_CREATED
)
def create_post(
    post_in: PostCreate,
    database: Session = Depends(get_db),
    user: Dict[str, Any] = Depends(deps.get_current_user),
) -> Any:
    return CommunityService.create_post(database, user, post_in)


@router.get("/posts/{post_id}", response_model=PostResponse)
def get_post(post_id: int, database: Session = Depends(get_db)) -> Any:
    return CommunityService.get_post(database, post_id)


@router.post("/posts/{post_id}/like", response_model=LikeResponse)
def toggle_like(
    post_id: int,
    database: Session = Depends(get_db),
    user: Dict[str, Any] = Depends(deps.get_current_user),
) -> Any:
    """Like the post, or remove the like if the caller already liked it."""
    post = CommunityService.toggle_like(database, post_id, user["sub"])
    return {"post_id": post.id, "liked": user["sub"] in post.likes, "likes": post.likes}


@router.post("/posts/{post_id}/share", response_model=ShareResponse)
def share_post(post_id: int, database: Session = Depends(get_db)) -> Any:
    return CommunityService.share(database, post_id)


@router.post(
    "/posts/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_comment(
    post_id: int,
    comment_in: CommentCreate,
    database: Session = Depends(get_db),
    user: Dict[str, Any] = Depends(deps.get_current_user),
) -> Any:
    """
    Add a comment. Comments unrelated to water conservation are rejected
    with 422 and never stored.
    """
    return CommunityService.add_comment(database, post_id, user, comment_in)


@router.get("/stats", response_model=CommunityStats)
def community_stats(database: Session = Depends(get_db)) -> Any:
    return CommunityService.stats(database)

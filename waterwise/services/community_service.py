"""
Community feed service: posts, likes, shares, comments and stats.
"""

import logging
from typing import Any, Dict, List

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from waterwise.core.config import settings
from waterwise.core.constants import OFF_TOPIC_COMMENT_MESSAGE
from waterwise.core.exceptions import (
    DatabaseException,
    ResourceNotFoundException,
    ValidationException,
)
from waterwise.models.community import Comment, Post
from waterwise.models.profile import Profile
from waterwise.schemas.community import CommentCreate, PostCreate
from waterwise.services.moderation_service import ModerationService
from waterwise.services.profile_service import ProfileService

logger = logging.getLogger(__name__)


def toggle_user(likes: List[str], user_id: str) -> List[str]:
    """New likes list with ``user_id`` added if absent, removed if present."""
    if user_id in likes:
        return [liker for liker in likes if liker != user_id]
    return [*likes, user_id]


def share_url(post_id: int) -> str:
    return f"{settings.public_base_url.rstrip('/')}/post/{post_id}"


class CommunityService:
    @staticmethod
    def list_posts(db: Session) -> List[Post]:
        """All posts, newest first, with authors and comments loaded."""
        try:
            return (
                db.query(Post)
                .options(selectinload(Post.comments))
                .order_by(Post.created_at.desc(), Post.id.desc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Error fetching posts: {e}")
            raise DatabaseException("Failed to fetch posts")

    @staticmethod
    def get_post(db: Session, post_id: int) -> Post:
        try:
            post = db.query(Post).filter(Post.id == post_id).first()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching post {post_id}: {e}")
            raise DatabaseException("Failed to fetch post")
        if not post:
            raise ResourceNotFoundException(
                message="Post not found", details={"id": post_id}
            )
        return post

    @staticmethod
    def _save(db: Session, post: Post, failure_message: str) -> Post:
        try:
            db.commit()
            db.refresh(post)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"{failure_message}: {e}")
            raise DatabaseException(failure_message)
        return post

    @staticmethod
    def create_post(db: Session, user: Dict[str, Any], post_in: PostCreate) -> Post:
        # Posting is the first write many members make; make sure the author exists
        ProfileService.provision_from_claims(db, user)
        post = Post(
            user_id=user["sub"],
            content=post_in.content,
            image_url=post_in.image_url,
            tags=list(post_in.tags),
            likes=[],
            shares=0,
        )
        db.add(post)
        CommunityService._save(db, post, "Failed to create post")
        logger.info(f"Created post {post.id} by {post.user_id}")
        return post

    @staticmethod
    def toggle_like(db: Session, post_id: int, user_id: str) -> Post:
        post = CommunityService.get_post(db, post_id)
        # Assign a new list so the JSON column registers the change
        post.likes = toggle_user(list(post.likes or []), user_id)
        return CommunityService._save(db, post, "Failed to update likes")

    @staticmethod
    def share(db: Session, post_id: int) -> Dict[str, Any]:
        post = CommunityService.get_post(db, post_id)
        post.shares = (post.shares or 0) + 1
        CommunityService._save(db, post, "Failed to record share")
        return {"post_id": post.id, "shares": post.shares, "share_url": share_url(post.id)}

    @staticmethod
    def add_comment(
        db: Session, post_id: int, user: Dict[str, Any], comment_in: CommentCreate
    ) -> Comment:
        """
        Insert a comment once it passes the relevance check.

        The moderation call and the insert are separate steps; an off-topic or
        unmoderated comment is never written.
        """
        CommunityService.get_post(db, post_id)

        if not ModerationService.is_relevant(comment_in.content):
            logger.info(f"Rejected off-topic comment on post {post_id}")
            raise ValidationException(
                message=OFF_TOPIC_COMMENT_MESSAGE, details={"post_id": post_id}
            )

        ProfileService.provision_from_claims(db, user)
        comment = Comment(post_id=post_id, user_id=user["sub"], content=comment_in.content)
        try:
            db.add(comment)
            db.commit()
            db.refresh(comment)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to add comment to post {post_id}: {e}")
            raise DatabaseException("Failed to add comment")
        return comment

    @staticmethod
    def stats(db: Session) -> Dict[str, int]:
        """Member, discussion, share and like totals for the community header."""
        try:
            members = db.query(func.count(Profile.id)).scalar() or 0
            discussions = db.query(func.count(Post.id)).scalar() or 0
            shares = db.query(func.coalesce(func.sum(Post.shares), 0)).scalar() or 0
            likes = sum(len(row.likes or []) for row in db.query(Post.likes).all())
        except SQLAlchemyError as e:
            logger.error(f"Error computing community stats: {e}")
            raise DatabaseException("Failed to fetch community stats")
        return {
            "members": members,
            "discussions": discussions,
            "shares": int(shares),
            "likes": likes,
        }

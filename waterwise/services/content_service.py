"""
Education content service: articles and video tutorials.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from waterwise.core.exceptions import DatabaseException, ResourceNotFoundException
from waterwise.models.content import Article, VideoTutorial
from waterwise.schemas.content import ArticleCreate, VideoCreate
from waterwise.services.filtering import filter_items

logger = logging.getLogger(__name__)


class ArticleService:
    @staticmethod
    def list_articles(
        db: Session, search: Optional[str] = None, category: Optional[str] = None
    ) -> List[Article]:
        """All articles matching the search text and category."""
        try:
            articles = db.query(Article).order_by(Article.id).all()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching articles: {e}")
            raise DatabaseException("Failed to fetch articles")
        return filter_items(articles, search=search, category=category)

    @staticmethod
    def get_article(db: Session, article_id: int) -> Article:
        try:
            article = Article.get_by_id(db, article_id)
        except SQLAlchemyError as e:
            logger.error(f"Error fetching article {article_id}: {e}")
            raise DatabaseException("Failed to fetch article")
        if not article:
            raise ResourceNotFoundException(
                message="Article not found", details={"id": article_id}
            )
        return article

    @staticmethod
    def create_article(db: Session, article_in: ArticleCreate) -> Article:
        article = Article(**article_in.model_dump())
        try:
            db.add(article)
            db.commit()
            db.refresh(article)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to create article: {e}")
            raise DatabaseException("Failed to create article")
        logger.info(f"Created article {article.id}: {article.title}")
        return article


class VideoService:
    @staticmethod
    def list_videos(
        db: Session, search: Optional[str] = None, category: Optional[str] = None
    ) -> List[VideoTutorial]:
        """All videos matching the search text (title or description) and category."""
        try:
            videos = db.query(VideoTutorial).order_by(VideoTutorial.id).all()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching videos: {e}")
            raise DatabaseException("Failed to fetch videos")
        return filter_items(
            videos, search=search, category=category, body_field="description"
        )

    @staticmethod
    def get_video(db: Session, video_id: int) -> VideoTutorial:
        try:
            video = VideoTutorial.get_by_id(db, video_id)
        except SQLAlchemyError as e:
            logger.error(f"Error fetching video {video_id}: {e}")
            raise DatabaseException("Failed to fetch video")
        if not video:
            raise ResourceNotFoundException(
                message="Video not found", details={"id": video_id}
            )
        return video

    @staticmethod
    def record_view(db: Session, video_id: int) -> VideoTutorial:
        video = VideoService.get_video(db, video_id)
        video.views = (video.views or 0) + 1
        try:
            db.commit()
            db.refresh(video)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to record view for video {video_id}: {e}")
            raise DatabaseException("Failed to record video view")
        return video

    @staticmethod
    def create_video(db: Session, video_in: VideoCreate) -> VideoTutorial:
        video = VideoTutorial(**video_in.model_dump(), views=0)
        try:
            db.add(video)
            db.commit()
            db.refresh(video)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to create video: {e}")
            raise DatabaseException("Failed to create video")
        logger.info(f"Created video tutorial {video.id}: {video.title}")
        return video

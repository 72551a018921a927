from typing import Any, List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from waterwise.api import deps
from waterwise.core.constants import ALL
from waterwise.core.database import get_db
from waterwise.schemas.content import (
    ArticleCreate,
    ArticleDetail,
    ArticleResponse,
    ReadingProgressRequest,
    ReadingProgressResponse,
)
from waterwise.services.content_service import ArticleService
from waterwise.services.reading import reading_progress

router = APIRouter()


@router.get("", response_model=List[ArticleResponse])
def list_articles(
    search: Optional[str] = Query(None, description="Matches title or content"),
    category: str = Query(ALL, description="Category name or 'all'"),
    database: Session = Depends(get_db),
) -> Any:
    """Education page: articles filtered by search text and category."""
    return ArticleService.list_articles(database, search=search, category=category)


@router.post(
    "",
    response_model=ArticleResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(deps.require_content_editor)],
)
def create_article(
    article_in: ArticleCreate, database: Session = Depends(get_db)
) -> Any:
    return ArticleService.create_article(database, article_in)


@router.post("/reading-progress", response_model=ReadingProgressResponse)
def compute_reading_progress(body: ReadingProgressRequest) -> Any:
    """Percentage of the article read for a given scroll position."""
    return {
        "progress": reading_progress(
            body.scroll_offset, body.content_height, body.viewport_height
        )
    }


@router.get("/{article_id}", response_model=ArticleDetail)
def get_article(article_id: int, database: Session = Depends(get_db)) -> Any:
    return ArticleService.get_article(database, article_id)

from typing import Any, List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from waterwise.api import deps
from waterwise.core.constants import ALL
from waterwise.core.database import get_db
from waterwise.schemas.content import VideoCreate, VideoResponse
from waterwise.services.content_service import VideoService

router = APIRouter()


@router.get("", response_model=List[VideoResponse])
def list_videos(
    search: Optional[str] = Query(None, description="Matches title or description"),
    category: str = Query(ALL, description="Category name or 'all'"),
    database: Session = Depends(get_db),
) -> Any:
    return VideoService.list_videos(database, search=search, category=category)


@router.post(
    "",
    response_model=VideoResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(deps.require_content_editor)],
)
def create_video(video_in: VideoCreate, database: Session = Depends(get_db)) -> Any:
    return VideoService.create_video(database, video_in)


@router.get("/{video_id}", response_model=VideoResponse)
def get_video(video_id: int, database: Session = Depends(get_db)) -> Any:
    """Video details including the embeddable player URL."""
    return VideoService.get_video(database, video_id)


@router.post("/{video_id}/views", response_model=VideoResponse)
def record_video_view(video_id: int, database: Session = Depends(get_db)) -> Any:
    return VideoService.record_view(database, video_id)

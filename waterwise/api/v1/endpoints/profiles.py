"""
Member profile endpoints.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, File, UploadFile
from sqlalchemy.orm import Session

from waterwise.api import deps
from waterwise.core.database import get_db
from waterwise.schemas.profile import (
    AvatarResponse,
    FollowResponse,
    ProfileResponse,
    ProfileUpdate,
)
from waterwise.services.profile_service import ProfileService
from waterwise.services.storage_service import StorageService, get_storage_service

router = APIRouter()


@router.put("/me", response_model=ProfileResponse)
def update_my_profile(
    profile_in: ProfileUpdate,
    database: Session = Depends(get_db),
    user: Dict[str, Any] = Depends(deps.get_current_user),
) -> Any:
    return ProfileService.update_profile(database, user, profile_in)


@router.post("/me/avatar", response_model=AvatarResponse)
def upload_my_avatar(
    file: UploadFile = File(...),
    database: Session = Depends(get_db),
    user: Dict[str, Any] = Depends(deps.get_current_user),
    storage: StorageService = Depends(get_storage_service),
) -> Any:
    """Upload a new avatar image and return its public URL."""
    file.file.seek(0, 2)
    length = file.file.tell()
    file.file.seek(0)
    profile = ProfileService.upload_avatar(
        database,
        user,
        filename=file.filename or "avatar",
        data=file.file,
        length=length,
        content_type=file.content_type,
        storage=storage,
    )
    return {"avatar_url": profile.avatar_url}


@router.get("/{profile_id}", response_model=ProfileResponse)
def get_profile(
    profile_id: str,
    database: Session = Depends(get_db),
    user: Optional[Dict[str, Any]] = Depends(deps.get_optional_current_user),
) -> Any:
    """
    Profile page. Signed-in members visiting their own page for the first
    time get a profile created from their session.
    """
    return ProfileService.get_profile(database, profile_id, user)


@router.post("/{profile_id}/follow", response_model=FollowResponse)
def follow_member(
    profile_id: str,
    database: Session = Depends(get_db),
    user: Dict[str, Any] = Depends(deps.get_current_user),
) -> Any:
    target = ProfileService.follow(database, user, profile_id)
    return {
        "follower_id": user["sub"],
        "following_id": target.id,
        "following": True,
        "followers_count": target.followers_count,
    }


@router.delete("/{profile_id}/follow", response_model=FollowResponse)
def unfollow_member(
    profile_id: str,
    database: Session = Depends(get_db),
    user: Dict[str, Any] = Depends(deps.get_current_user),
) -> Any:
    target = ProfileService.unfollow(database, user, profile_id)
    return {
        "follower_id": user["sub"],
        "following_id": target.id,
        "following": False,
        "followers_count": target.followers_count,
    }

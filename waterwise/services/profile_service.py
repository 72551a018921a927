"""
Profile service: provisioning, updates, avatars and follows.
"""

import logging
import re
from typing import Any, BinaryIO, Dict, Optional, Tuple

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from waterwise.core.constants import USERNAME_PATTERN
from waterwise.core.exceptions import (
    ConflictException,
    DatabaseException,
    ResourceNotFoundException,
    ValidationException,
)
from waterwise.models.base import utcnow
from waterwise.models.profile import Profile, UserFollow
from waterwise.schemas.profile import ProfileUpdate
from waterwise.services.storage_service import StorageService

logger = logging.getLogger(__name__)

_username_re = re.compile(USERNAME_PATTERN)


class ProfileService:
    @staticmethod
    def _find(db: Session, profile_id: str) -> Optional[Profile]:
        try:
            return db.query(Profile).filter(Profile.id == profile_id).first()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching profile {profile_id}: {e}")
            raise DatabaseException("Failed to fetch profile")

    @staticmethod
    def _commit(db: Session, failure_message: str) -> None:
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            logger.warning(f"{failure_message}: {e}")
            raise ConflictException(message=failure_message)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"{failure_message}: {e}")
            raise DatabaseException(failure_message)

    @staticmethod
    def profile_fields_from_claims(claims: Dict[str, Any]) -> Dict[str, Any]:
        """Initial profile values derived from the token claims."""
        email = claims.get("email") or ""
        local_part = email.split("@")[0] if email else claims["sub"]
        metadata = claims.get("user_metadata") or {}
        return {
            "id": claims["sub"],
            "username": local_part,
            "full_name": metadata.get("full_name") or local_part,
            "avatar_url": metadata.get("avatar_url"),
            "bio": "",
            "role": "member",
            "level": 1,
            "followers_count": 0,
            "following_count": 0,
        }

    @staticmethod
    def provision_from_claims(
        db: Session, claims: Dict[str, Any]
    ) -> Tuple[Profile, bool]:
        """
        Return ``(profile, created)``, creating the profile on first sign-in.
        """
        existing = ProfileService._find(db, claims["sub"])
        if existing:
            return existing, False

        fields = ProfileService.profile_fields_from_claims(claims)
        taken = db.query(Profile).filter(Profile.username == fields["username"]).first()
        if taken:
            # Keep usernames unique when two emails share a local part
            fields["username"] = f"{fields['username']}_{claims['sub'][:8]}"

        profile = Profile(**fields)
        db.add(profile)
        ProfileService._commit(db, "Failed to create profile")
        db.refresh(profile)
        logger.info(f"Provisioned profile {profile.id} ({profile.username})")
        return profile, True

    @staticmethod
    def get_profile(
        db: Session, profile_id: str, user: Optional[Dict[str, Any]] = None
    ) -> Profile:
        """
        Fetch a profile. A signed-in user viewing their own missing profile
        gets one provisioned; anyone else gets a 404.
        """
        profile = ProfileService._find(db, profile_id)
        if profile:
            return profile
        if user and user.get("sub") == profile_id:
            profile, _ = ProfileService.provision_from_claims(db, user)
            return profile
        raise ResourceNotFoundException(
            message="Profile not found", details={"id": profile_id}
        )

    @staticmethod
    def get_role(db: Session, user_id: str) -> Optional[str]:
        profile = ProfileService._find(db, user_id)
        return profile.role if profile else None

    @staticmethod
    def update_profile(
        db: Session, user: Dict[str, Any], profile_in: ProfileUpdate
    ) -> Profile:
        profile = ProfileService.get_profile(db, user["sub"], user)
        changes = profile_in.model_dump(exclude_unset=True)

        username = changes.get("username")
        if username is not None:
            if not _username_re.match(username):
                raise ValidationException(
                    message="Username can only contain letters, numbers, and underscores",
                    details={"username": username},
                )
            taken = (
                db.query(Profile)
                .filter(Profile.username == username, Profile.id != profile.id)
                .first()
            )
            if taken:
                raise ConflictException(
                    message="Username is already taken", details={"username": username}
                )

        for field, value in changes.items():
            setattr(profile, field, value)
        profile.updated_at = utcnow()

        ProfileService._commit(db, "Failed to update profile")
        db.refresh(profile)
        logger.info(f"Updated profile {profile.id}: {sorted(changes)}")
        return profile

    @staticmethod
    def upload_avatar(
        db: Session,
        user: Dict[str, Any],
        filename: str,
        data: BinaryIO,
        length: int,
        content_type: str,
        storage: StorageService,
    ) -> Profile:
        """Store the image and point the profile's avatar_url at it."""
        if not (content_type or "").startswith("image/"):
            raise ValidationException(
                message="Avatar must be an image", details={"content_type": content_type}
            )
        profile = ProfileService.get_profile(db, user["sub"], user)
        profile.avatar_url = storage.upload_avatar(
            profile.id, filename, data, length, content_type
        )
        profile.updated_at = utcnow()
        ProfileService._commit(db, "Failed to update avatar")
        db.refresh(profile)
        return profile

    @staticmethod
    def _follow_row(db: Session, follower_id: str, following_id: str):
        return (
            db.query(UserFollow)
            .filter(
                UserFollow.follower_id == follower_id,
                UserFollow.following_id == following_id,
            )
            .first()
        )

    @staticmethod
    def follow(db: Session, user: Dict[str, Any], target_id: str) -> Profile:
        """Follow another member. Returns the followed profile."""
        follower_id = user["sub"]
        if follower_id == target_id:
            raise ValidationException(message="You cannot follow yourself")

        target = ProfileService.get_profile(db, target_id)
        follower = ProfileService.get_profile(db, follower_id, user)
        if ProfileService._follow_row(db, follower_id, target_id):
            raise ConflictException(
                message="Already following this member", details={"id": target_id}
            )

        db.add(UserFollow(follower_id=follower_id, following_id=target_id))
        target.followers_count = (target.followers_count or 0) + 1
        follower.following_count = (follower.following_count or 0) + 1
        ProfileService._commit(db, "Failed to follow member")
        db.refresh(target)
        logger.info(f"{follower_id} followed {target_id}")
        return target

    @staticmethod
    def unfollow(db: Session, user: Dict[str, Any], target_id: str) -> Profile:
        follower_id = user["sub"]
        row = ProfileService._follow_row(db, follower_id, target_id)
        if not row:
            raise ResourceNotFoundException(
                message="Not following this member", details={"id": target_id}
            )

        target = ProfileService.get_profile(db, target_id)
        follower = ProfileService.get_profile(db, follower_id, user)
        db.delete(row)
        target.followers_count = max((target.followers_count or 0) - 1, 0)
        follower.following_count = max((follower.following_count or 0) - 1, 0)
        ProfileService._commit(db, "Failed to unfollow member")
        db.refresh(target)
        logger.info(f"{follower_id} unfollowed {target_id}")
        return target

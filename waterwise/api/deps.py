"""
API Dependencies for Authentication and Authorization.
"""

import logging
import os
from typing import Any, Callable, Dict, Optional, Sequence

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from waterwise.core.config import settings
from waterwise.core.constants import CONTENT_EDITOR_ROLES
from waterwise.core.database import get_db
from waterwise.core.security import verify_token
from waterwise.services.profile_service import ProfileService

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(
    # auto_error=False so a missing token can be handled per dependency
    tokenUrl=f"{os.getenv('ROOT_PATH', '')}{settings.api_prefix}/auth/token",
    auto_error=False,
)


async def get_current_user(token: str = Depends(oauth2_scheme)) -> Dict[str, Any]:
    """
    Validate the Bearer token and return the user payload.
    """
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return await verify_token(token)


async def get_current_user_with_token(
    token: str = Depends(oauth2_scheme),
) -> Dict[str, Any]:
    """
    Same as get_current_user, with the raw token kept under ``_token``
    for calls that are forwarded to the auth service.
    """
    payload = await get_current_user(token)
    payload["_token"] = token
    return payload


async def get_optional_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
) -> Optional[Dict[str, Any]]:
    """
    Get user from token if present, else None.
    Used by pages that are public but personalise for members.
    """
    if not token:
        return None
    try:
        return await verify_token(token)
    except HTTPException as error:
        logger.debug(f"Ignoring invalid optional token: {error.detail}")
        return None


def has_role(allowed_roles: Sequence[str]) -> Callable:
    """
    Dependency factory checking the caller's profile role.
    Roles live on the profile row, not in the token.
    """

    async def role_checker(
        user: Dict[str, Any] = Depends(get_current_user),
        database: Session = Depends(get_db),
    ) -> Dict[str, Any]:
        role = ProfileService.get_role(database, user["sub"])
        if role not in allowed_roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Operation requires one of the roles: {', '.join(allowed_roles)}",
            )
        return user

    return role_checker


require_content_editor = has_role(CONTENT_EDITOR_ROLES)

"""
Authentication and session endpoints, proxied to the hosted auth service.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from waterwise.api import deps
from waterwise.core.database import get_db
from waterwise.schemas.auth import (
    AuthCallbackResponse,
    SessionUser,
    TokenRefreshRequest,
    TokenSchema,
)
from waterwise.services.auth_service import AuthService
from waterwise.services.profile_service import ProfileService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/token", response_model=TokenSchema)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
) -> Any:
    """
    Sign in with email (sent as ``username``) and password.
    Enables Swagger UI to authenticate directly via the API.
    """
    return AuthService.login_user(form_data.username, form_data.password)


@router.post("/refresh", response_model=TokenSchema)
def refresh_access_token(body: TokenRefreshRequest) -> Any:
    return AuthService.refresh_user_token(body.refresh_token)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(user: Dict[str, Any] = Depends(deps.get_current_user_with_token)) -> None:
    """Revoke the current session."""
    AuthService.logout_user(user["_token"])
    logger.info(f"User {user['sub']} signed out")


@router.get("/me", response_model=SessionUser)
def read_session_user(user: Dict[str, Any] = Depends(deps.get_current_user)) -> Any:
    return user


@router.get("/callback", response_model=AuthCallbackResponse)
def auth_callback(
    database: Session = Depends(get_db),
    user: Optional[Dict[str, Any]] = Depends(deps.get_optional_current_user),
) -> Any:
    """
    Landing point after sign-in: make sure the member has a profile and tell
    the client where to go. Without a valid session the client goes back to
    the sign-in page.
    """
    if not user:
        return {"redirect_to": "/auth"}

    profile, created = ProfileService.provision_from_claims(database, user)
    return {
        "redirect_to": f"/profile/{profile.id}",
        "profile_created": created,
        "profile": profile,
    }

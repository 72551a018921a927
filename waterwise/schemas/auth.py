from typing import Any, Dict, Optional

from pydantic import BaseModel

from waterwise.schemas.profile import ProfileResponse


class TokenRefreshRequest(BaseModel):
    refresh_token: str


class TokenSchema(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str
    expires_in: int
    expires_at: Optional[int] = None
    user: Optional[Dict[str, Any]] = None


class SessionUser(BaseModel):
    """Claims of the signed-in user as seen by the API."""

    sub: str
    email: Optional[str] = None
    role: Optional[str] = None
    user_metadata: Dict[str, Any] = {}


class AuthCallbackResponse(BaseModel):
    """Outcome of the post sign-in callback and where the browser goes next."""

    redirect_to: str
    profile_created: bool = False
    profile: Optional[ProfileResponse] = None

"""
Security module for verifying session tokens issued by the hosted auth service.

The auth service signs access tokens with a shared HS256 secret, so
verification is local and needs no key-set round trip.
"""

import logging
from typing import Any, Dict

from fastapi import HTTPException, status
from jose import ExpiredSignatureError, JWTError, jwt

from waterwise.core.config import settings

logger = logging.getLogger(__name__)

ALGORITHMS = ["HS256"]


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def verify_token(token: str) -> Dict[str, Any]:
    """
    Verify JWT signature, expiry and audience.
    Returns the claims on success.
    """
    try:
        payload = jwt.decode(
            token,
            settings.auth_jwt_secret,
            algorithms=ALGORITHMS,
            audience=settings.auth_jwt_audience,
        )
    except ExpiredSignatureError:
        logger.info("Rejected expired session token")
        raise _unauthorized("Session expired")
    except JWTError as error:
        logger.warning(f"JWT Verification failed: {error}")
        raise _unauthorized("Could not validate credentials")

    if not payload.get("sub"):
        logger.warning("Token without subject rejected")
        raise _unauthorized("Could not validate credentials")

    logger.debug(f"Token verified for user: {payload.get('email', payload['sub'])}")
    return payload

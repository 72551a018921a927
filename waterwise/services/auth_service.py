"""
Proxy to the hosted auth service (GoTrue compatible REST API).
"""

import logging

import requests

from waterwise.core.config import settings
from waterwise.core.exceptions import AuthenticationException, ExternalServiceException

logger = logging.getLogger(__name__)


class AuthService:
    @staticmethod
    def _url(path: str) -> str:
        return f"{settings.auth_url.rstrip('/')}/{path.lstrip('/')}"

    @staticmethod
    def _headers(access_token: str = None) -> dict:
        headers = {"apikey": settings.auth_anon_key}
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"
        return headers

    @staticmethod
    def _token_request(grant_type: str, payload: dict, failure_message: str) -> dict:
        url = AuthService._url("token")
        try:
            response = requests.post(
                url,
                params={"grant_type": grant_type},
                json=payload,
                headers=AuthService._headers(),
                timeout=settings.auth_timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Connection error to auth service: {e}")
            raise ExternalServiceException(
                message="Authentication service is currently unavailable"
            )

        if response.status_code == 200:
            return response.json()

        logger.warning(
            f"Auth {grant_type} failed. Status: {response.status_code}, Body: {response.text}"
        )
        if response.status_code >= 500:
            raise ExternalServiceException(
                message="Authentication service returned an error",
                details={"status_code": response.status_code},
            )
        raise AuthenticationException(message=failure_message)

    @staticmethod
    def login_user(email: str, password: str) -> dict:
        """
        Sign in with email and password and return the session tokens.
        """
        logger.info(f"Password sign-in for {email}")
        return AuthService._token_request(
            "password", {"email": email, "password": password}, "Invalid credentials"
        )

    @staticmethod
    def refresh_user_token(refresh_token: str) -> dict:
        """
        Exchange a refresh token for a new session.
        """
        return AuthService._token_request(
            "refresh_token",
            {"refresh_token": refresh_token},
            "Invalid or expired refresh token",
        )

    @staticmethod
    def logout_user(access_token: str) -> None:
        """Revoke the session behind an access token."""
        try:
            response = requests.post(
                AuthService._url("logout"),
                headers=AuthService._headers(access_token),
                timeout=settings.auth_timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Connection error to auth service: {e}")
            raise ExternalServiceException(
                message="Authentication service is currently unavailable"
            )
        if response.status_code not in (200, 204):
            logger.warning(
                f"Sign-out failed. Status: {response.status_code}, Body: {response.text}"
            )
            raise AuthenticationException(message="Sign-out failed")

"""
Custom exceptions for WaterWise.
"""

from typing import Any, Dict, Optional

from fastapi import HTTPException, status


class AppException(Exception):
    """Base exception for WaterWise."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class DatabaseException(AppException):
    """Database operation exception."""

    pass


class ExternalServiceException(AppException):
    """Weather, moderation, auth or storage backend failure."""

    pass


class ValidationException(AppException):
    """Data validation exception."""

    pass


class AuthenticationException(AppException):
    """Authentication exception."""

    pass


class AuthorizationException(AppException):
    """Authorization exception."""

    pass


class ResourceNotFoundException(AppException):
    """Resource not found exception."""

    pass


class ConflictException(AppException):
    """Resource conflict exception."""

    pass


# HTTP Exception mappings
def create_http_exception(exc: AppException) -> HTTPException:
    """Convert custom exceptions to HTTP exceptions."""

    if isinstance(exc, ResourceNotFoundException):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=exc.message,
            headers={"X-Error-Details": str(exc.details)},
        )

    elif isinstance(exc, ValidationException):
        return HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=exc.message,
            headers={"X-Error-Details": str(exc.details)},
        )

    elif isinstance(exc, ConflictException):
        return HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=exc.message,
            headers={"X-Error-Details": str(exc.details)},
        )

    elif isinstance(exc, AuthenticationException):
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=exc.message,
            headers={"X-Error-Details": str(exc.details)},
        )

    elif isinstance(exc, AuthorizationException):
        return HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=exc.message,
            headers={"X-Error-Details": str(exc.details)},
        )

    elif isinstance(exc, DatabaseException):
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=exc.message or "Database operation failed",
            headers={"X-Error-Details": str(exc.details)},
        )

    elif isinstance(exc, ExternalServiceException):
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=exc.message or "External service unavailable",
            headers={"X-Error-Details": str(exc.details)},
        )

    else:
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=exc.message,
            headers={"X-Error-Details": str(exc.details)},
        )

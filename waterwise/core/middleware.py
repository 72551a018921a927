import logging
import time
import uuid
from contextvars import ContextVar
from typing import Any, Dict, Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from waterwise.core.exceptions import AppException, create_http_exception

logger = logging.getLogger(__name__)

# Context Variable for Request ID (accessed by logging filter)
request_id_context = ContextVar("request_id", default=None)

QUIET_PATHS = {"/health"}


def error_response(
    request_id: str,
    code: str,
    message: Any,
    status_code: int,
    details: Any = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    """Build the JSON error envelope shared by every failure."""
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code,
                "message": message,
                "details": details,
                "request_id": request_id,
                "status_code": status_code,
            }
        },
        headers={"X-Request-ID": request_id, **(headers or {})},
    )


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Stamps every request with an ID and logs method, path, status and duration.
    Must wrap ErrorHandlingMiddleware so the ID is set before errors are logged.
    """

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request_id_context.set(request_id)

        quiet = request.url.path in QUIET_PATHS
        if not quiet:
            logger.info(f"Request: {request.method} {request.url.path}")

        response = await call_next(request)

        if not quiet:
            process_time = time.time() - start_time
            logger.info(f"Response: {response.status_code} - {process_time:.3f}s")

        response.headers["X-Request-ID"] = request_id
        return response


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Turns exceptions raised by endpoints and services into the JSON error envelope.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request_id_context.get() or str(uuid.uuid4())

        try:
            return await call_next(request)

        except AppException as exc:
            http_exc = create_http_exception(exc)
            logger.warning(
                f"Application Error: {exc.message} ({exc.__class__.__name__})"
            )
            return error_response(
                request_id,
                exc.__class__.__name__,
                http_exc.detail,
                http_exc.status_code,
                details=exc.details,
                headers=http_exc.headers,
            )

        except StarletteHTTPException as exc:
            return error_response(
                request_id, "HTTPException", exc.detail, exc.status_code
            )

        except RequestValidationError as exc:
            return error_response(
                request_id,
                "ValidationError",
                "Data validation failed",
                status.HTTP_422_UNPROCESSABLE_ENTITY,
                details=exc.errors(),
            )

        except Exception as exc:
            logger.error(f"Unhandled exception: {exc}", exc_info=True)
            return error_response(
                request_id,
                "InternalServerException",
                "An unexpected error occurred.",
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                details=(
                    str(exc)
                    if logging.getLogger().isEnabledFor(logging.DEBUG)
                    else None
                ),
            )

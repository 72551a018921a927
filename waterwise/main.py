"""
Main FastAPI application.
"""

import logging
import os
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import RedirectResponse

from waterwise.api.v1.api import api_router
from waterwise.core.config import settings
from waterwise.core.constants import API_DESCRIPTION, FEATURES
from waterwise.core.database import SessionLocal, init_db
from waterwise.core.logging_config import setup_logging
from waterwise.core.middleware import ErrorHandlingMiddleware, LoggingMiddleware
from waterwise.core.seeding import seed_data

# Setup Centralized Logging
setup_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info("Starting WaterWise API...")

    app.state.startup_complete = False

    try:
        # create_all is idempotent; Alembic owns schema changes in production
        init_db()
        logger.info("Database initialized successfully")

        database_session = SessionLocal()
        try:
            seed_data(database_session)
        finally:
            database_session.close()

        app.state.startup_complete = True
        logger.info("Application is now fully healthy and ready.")

    except Exception as error:
        logger.error(f"Failed to initialize database: {error}")
        raise

    yield

    logger.info("Shutting down WaterWise API...")


app = FastAPI(
    root_path=os.getenv("ROOT_PATH", ""),
    title=settings.app_name,
    version=settings.version,
    description=API_DESCRIPTION,
    openapi_url=f"{settings.api_prefix}/openapi.json" if settings.debug else None,
    docs_url=f"{settings.api_prefix}/docs" if settings.debug else None,
    redoc_url=f"{settings.api_prefix}/redoc" if settings.debug else None,
    lifespan=lifespan,
    license_info={
        "name": "MIT License",
        "url": "https://opensource.org/licenses/MIT",
    },
)


@app.get("/health", tags=["General"])
async def health_check(response: Response):
    """
    ## Health Check

    Returns:
    - **200 OK**: Service is healthy.
    - **503 Service Unavailable**: Service is still initializing.
    """
    if not getattr(app.state, "startup_complete", False):
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return {
            "status": "initializing",
            "app_name": settings.app_name,
            "timestamp": time.time(),
        }

    return {
        "status": "healthy",
        "app_name": settings.app_name,
        "version": settings.version,
        "timestamp": time.time(),
    }


# Middleware Stack (Executed Top to Bottom)

app.add_middleware(TrustedHostMiddleware, allowed_hosts=["*"])

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(ErrorHandlingMiddleware)
app.add_middleware(LoggingMiddleware)


@app.get("/docs", tags=["General"])
async def redirect_to_swagger():
    """Redirects to the Swagger UI documentation."""
    return RedirectResponse(url=f"{settings.api_prefix}/docs")


@app.get(settings.api_prefix, tags=["General"])
@app.get("/", tags=["General"])
async def root():
    """
    ## Welcome to WaterWise

    Home page payload: feature highlights and links to every section.
    """
    prefix = settings.api_prefix
    return {
        "message": "WaterWise API",
        "version": settings.version,
        "status": "running",
        "features": FEATURES,
        "documentation": {
            "swagger_ui": f"{prefix}/docs",
            "redoc": f"{prefix}/redoc",
            "openapi_json": f"{prefix}/openapi.json",
        },
        "endpoints": {
            "education": f"{prefix}/articles",
            "videos": f"{prefix}/videos",
            "map": f"{prefix}/map/zones",
            "weather": f"{prefix}/weather",
            "community": f"{prefix}/community/posts",
            "calculator": f"{prefix}/calculator/harvest",
            "profiles": f"{prefix}/profiles",
            "auth": f"{prefix}/auth/token",
            "health": "/health",
        },
        "health_url": "/health",
    }


app.include_router(api_router, prefix=settings.api_prefix)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "waterwise.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )

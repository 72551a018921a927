"""
Database configuration and session management.
"""

import logging
import time
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from waterwise.core.config import settings
from waterwise.core.exceptions import DatabaseException

logger = logging.getLogger(__name__)


def _engine_options() -> dict:
    if settings.is_sqlite:
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_size": settings.database_pool_size,
        "max_overflow": settings.database_max_overflow,
        "pool_pre_ping": True,
    }


engine = create_engine(settings.database_url, echo=settings.debug, **_engine_options())


SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """
    Dependency to get database session.
    """
    db = SessionLocal()
    try:
        yield db
    except Exception as e:
        logger.error(f"Database session error: {e}")
        db.rollback()
        raise
    finally:
        db.close()


def init_db(max_retries: int = 30, retry_interval: int = 2) -> None:
    """
    Create all tables that don't exist yet.
    Waits for the database to accept connections on startup.
    """
    # Register models with Base.metadata
    from waterwise import models  # noqa: F401

    for attempt in range(max_retries):
        try:
            logger.info(
                f"Targeting tables for creation: {list(Base.metadata.tables.keys())}"
            )
            Base.metadata.create_all(bind=engine, checkfirst=True)
            logger.info("Database tables initialized successfully")
            return
        except OperationalError as e:
            if "connection refused" not in str(e).lower():
                logger.error(f"Database initialization failed: {e}")
                raise
            logger.warning(
                f"Database connection refused (Attempt {attempt + 1}/{max_retries}). "
                f"Retrying in {retry_interval}s..."
            )
            time.sleep(retry_interval)

    logger.error("Max retries exceeded. Could not connect to database.")
    raise DatabaseException("Max retries exceeded. Could not connect to database.")

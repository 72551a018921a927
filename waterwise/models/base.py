"""
Base model with common fields and functionality.
"""
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel as PydanticBaseModel, ConfigDict
from sqlalchemy import JSON, Column, DateTime, Integer
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Session

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in development and tests)
JSONType = JSON().with_variant(JSONB(), "postgresql")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseModel:
    """Base model with common fields."""

    id = Column(Integer, primary_key=True, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    @classmethod
    def get_by_id(cls, db: Session, id: Any):
        """Get model instance by ID."""
        return db.query(cls).filter(cls.id == id).first()


class PydanticBase(PydanticBaseModel):
    """Base Pydantic model with common configuration."""

    model_config = ConfigDict(from_attributes=True)

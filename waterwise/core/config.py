"""
Application configuration management using Pydantic Settings.
"""

from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application
    app_name: str = Field(default="WaterWise", alias="APP_NAME")
    debug: bool = Field(default=False, alias="DEBUG")
    version: str = Field(default="1.0.0", alias="VERSION")
    seeding: bool = Field(default=False, alias="SEEDING")

    # API
    api_prefix: str = Field(default="/api/v1", alias="API_PREFIX")
    # WARNING: CORS_ORIGINS set to "*" is for development only.
    # In production, specify exact allowed origins (e.g., "https://waterwise.app").
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")
    # Origin of the browser application, used to build share links.
    public_base_url: str = Field(
        default="http://localhost:5173", alias="PUBLIC_BASE_URL"
    )

    # Database
    database_url: str = Field(
        default="sqlite:///./waterwise.db", alias="DATABASE_URL"
    )
    database_pool_size: int = Field(default=10, alias="DATABASE_POOL_SIZE")
    database_max_overflow: int = Field(default=20, alias="DATABASE_MAX_OVERFLOW")

    # Hosted auth service (GoTrue compatible)
    auth_url: str = Field(default="http://localhost:9999", alias="AUTH_URL")
    auth_anon_key: str = Field(default="", alias="AUTH_ANON_KEY")
    auth_jwt_secret: str = Field(alias="AUTH_JWT_SECRET")
    auth_jwt_audience: str = Field(default="authenticated", alias="AUTH_JWT_AUDIENCE")
    auth_timeout: int = Field(default=10, alias="AUTH_TIMEOUT")

    # Weather
    weather_api_url: str = Field(
        default="https://api.openweathermap.org/data/2.5/weather",
        alias="WEATHER_API_URL",
    )
    weather_api_key: Optional[str] = Field(default=None, alias="WEATHER_API_KEY")
    weather_timeout: int = Field(default=10, alias="WEATHER_TIMEOUT")

    # Comment moderation (OpenAI compatible chat completions)
    moderation_api_url: str = Field(
        default="https://api.openai.com/v1/chat/completions",
        alias="MODERATION_API_URL",
    )
    moderation_api_key: Optional[str] = Field(default=None, alias="MODERATION_API_KEY")
    moderation_model: str = Field(default="gpt-4", alias="MODERATION_MODEL")
    moderation_timeout: int = Field(default=15, alias="MODERATION_TIMEOUT")

    # Object storage (avatars)
    minio_url: str = Field(default="localhost:9000", alias="MINIO_URL")
    minio_access_key: str = Field(default="minioadmin", alias="MINIO_ACCESS_KEY")
    minio_secret_key: str = Field(default="minioadmin", alias="MINIO_SECRET_KEY")
    minio_secure: bool = Field(default=False, alias="MINIO_SECURE")
    avatar_bucket: str = Field(default="avatars", alias="AVATAR_BUCKET")
    storage_public_url: str = Field(
        default="http://localhost:9000", alias="STORAGE_PUBLIC_URL"
    )

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="console", alias="LOG_FORMAT")
    sqlalchemy_log_level: str = Field(default="WARNING", alias="SQLALCHEMY_LOG_LEVEL")

    model_config = {"env_file": ".env", "case_sensitive": False}

    @property
    def cors_origins_list(self) -> List[str]:
        """Convert CORS origins string to list."""
        if self.cors_origins == "*":
            return ["*"]
        if self.cors_origins.strip().startswith("["):
            import json

            try:
                return json.loads(self.cors_origins)
            except json.JSONDecodeError:
                # Fallback to comma split if json parse fails
                pass
        return [origin.strip() for origin in self.cors_origins.split(",")]

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def moderation_enabled(self) -> bool:
        return bool(self.moderation_api_key)


# Global settings instance
settings = Settings()

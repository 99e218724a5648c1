"""
Configuration settings for the Config UI Example service.
"""
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings.
    """
    PROJECT_NAME: str = "Config UI Example"
    API_VERSION: str = "1.0"
    API_V1_STR: str = "/api/v1"
    PROJECT_DESCRIPTION: str = "Toy health and readiness resources with browsable API docs"

    # Listener
    HOST: str = "localhost"
    PORT: int = Field(default=8080, ge=0, le=65535)
    SHUTDOWN_TIMEOUT: float = Field(default=5.0, gt=0)

    # Logging
    LOG_LEVEL: Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_FILE: Optional[str] = None
    ACCESS_LOG: bool = True

    # Request binding
    EXPLICIT_BIND_ERRORS: bool = False

    # Documentation
    SWAGGER_PATH: str = "/swagger"
    SWAGGER_CDN_URL: str = "https://cdn.jsdelivr.net/npm/swagger-ui-dist@5.9.0"

    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: str) -> str:
        return str(v).upper()

    @field_validator("SWAGGER_PATH", "API_V1_STR")
    def strip_trailing_slash(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError("path must start with '/'")
        return v.rstrip("/")

    @field_validator("SWAGGER_PATH")
    def require_docs_segment(cls, v: str) -> str:
        # Swagger UI needs its own segment; "/" would register "//{asset}"
        if not v:
            raise ValueError("SWAGGER_PATH cannot be the root path")
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore"
    )


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()

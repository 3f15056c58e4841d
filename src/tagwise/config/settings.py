"""
Application settings and configuration management.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode

from tagwise import __version__

DEFAULT_SIZE_CLASSES = ["css1", "css2", "css3", "css4"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = Field(default="tagwise")
    app_version: str = Field(default=__version__)
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # Database
    database_url: str = Field(default="sqlite+aiosqlite:///./tagwise.db")
    db_log_queries: bool = Field(default=False)  # Log all SQL queries

    # Tagging
    tag_name_max_length: int = Field(default=50, ge=1, le=255)
    tag_cloud_size_classes: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_SIZE_CLASSES)
    )

    # API
    api_prefix: str = Field(default="/api/v1")

    @field_validator("tag_cloud_size_classes", mode="before")
    @classmethod
    def parse_size_classes(cls, v: str | list[str]) -> list[str]:
        """Parse size classes from comma-separated string or list."""
        if isinstance(v, str):
            v = [size_class.strip() for size_class in v.split(",")]
        classes = [size_class for size_class in v if size_class]
        if not classes:
            raise ValueError("At least one tag cloud size class is required")
        return classes

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()

    @property
    def is_sqlite(self) -> bool:
        """Check if database is SQLite."""
        return self.database_url.startswith("sqlite")

    @property
    def is_postgresql(self) -> bool:
        """Check if database is PostgreSQL."""
        return "postgresql" in self.database_url

    def get_sync_database_url(self) -> str:
        """Get synchronous database URL for Alembic migrations."""
        # Convert async drivers to sync
        return self.database_url.replace("+asyncpg", "").replace("+aiosqlite", "")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "env_prefix": "TAGWISE_",
    }


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()


# Global settings instance
settings = get_settings()

"""Configuration settings for the teleprompter service."""

from functools import lru_cache
from typing import List, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="TELEPROMPTER_",
        env_file=[".env.local", ".env"],
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str = Field(
        default="sqlite+aiosqlite:///./teleprompter.db",
        description="Database URL (PostgreSQL or SQLite)"
    )
    database_pool_size: int = Field(default=10, description="Database connection pool size")
    database_max_overflow: int = Field(default=20, description="Database pool max overflow")

    # Service
    service_name: str = Field(default="teleprompter", description="Service name")
    service_version: str = Field(default="0.1.0", description="Service version")
    service_port: int = Field(default=8787, description="Service port")
    service_host: str = Field(default="0.0.0.0", description="Service host")

    # Propagation
    queue_backend: Literal["memory", "redis"] = Field(
        default="memory",
        description="Transport used to notify subscribers of prompt changes"
    )
    redis_url: str = Field(default="redis://localhost:6379/0", description="Redis URL for the queue")
    queue_key_prefix: str = Field(
        default="teleprompter:",
        description="Prefix of the per-namespace queue keys"
    )
    default_namespace: str = Field(
        default="default",
        description="Namespace used for prompts written without one"
    )

    # Seed
    initial_data_path: Optional[str] = Field(
        default=None,
        description="YAML file with prompts to load when the store is empty"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    log_dir: str = Field(default="logs", description="Directory for log files")
    log_file: str = Field(default="teleprompter.log", description="Log file name")
    log_to_file: bool = Field(default=True, description="Write logs to a rotating file as well as the console")

    # CORS origins (comma-separated)
    cors_origins: str = Field(default="*", description="Comma-separated allowed CORS origins")

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Get global settings instance."""
    return Settings()

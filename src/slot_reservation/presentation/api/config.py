"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import List, Optional, Union
from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
    )

    # Database
    database_url: str = "sqlite+aiosqlite:///./slot_reservation.db"
    database_echo: bool = False
    database_ssl: Optional[bool] = None
    db_pool_pre_ping: bool = True

    # Application
    service_name: str = "slot-reservation-service"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 3000

    # Logging
    log_level: str = "INFO"
    log_dir: Optional[str] = None
    log_enable_console: bool = True
    log_enable_file: bool = False
    log_max_file_size: int = 10 * 1024 * 1024
    log_backup_count: int = 5

    # CORS
    allowed_origins: Union[str, List[str]] = "*"
    allowed_methods: Union[str, List[str]] = "GET,POST,OPTIONS"
    allowed_headers: Union[str, List[str]] = "*"

    @model_validator(mode='after')
    def convert_cors_lists(self):
        """Convert comma-separated strings to lists."""
        if isinstance(self.allowed_origins, str):
            self.allowed_origins = [item.strip() for item in self.allowed_origins.split(",") if item.strip()]
        if isinstance(self.allowed_methods, str):
            self.allowed_methods = [item.strip() for item in self.allowed_methods.split(",") if item.strip()]
        if isinstance(self.allowed_headers, str):
            self.allowed_headers = [item.strip() for item in self.allowed_headers.split(",") if item.strip()]
        return self


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()

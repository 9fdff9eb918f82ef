"""
Application Configuration
Централизованное управление настройками
"""
import logging
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings loaded from environment variables"""

    # Lists
    force_alpha_sort: bool = False  # Значение флага "sort", если его нет в JSON

    # Serialization
    json_indent: int = 1
    csv_delimiter: str = ","

    # Logging
    debug: bool = False
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


def configure_logging(settings: Optional[Settings] = None):
    """Configure root logging from settings"""
    settings = settings or get_settings()
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format=settings.log_format
    )


# Convenience instance
settings = get_settings()

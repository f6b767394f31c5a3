"""
API configuration settings.
"""

from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """API settings."""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = True

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # Data
    DATA_DIR: Optional[str] = None  # defaults to the repository's data/ directory
    SCALING_TABLE_FILE: Optional[str] = None

    # Tooltips
    DEFAULT_LOCALE: str = "en"
    DEFAULT_STAR_LEVEL: int = 2
    DEFAULT_RENDER_STYLE: str = "current"
    TOOLTIP_CACHE_SIZE: int = 512

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()

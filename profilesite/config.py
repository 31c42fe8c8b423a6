"""
Application settings for the profile site backend.

Extends the shared BaseAppSettings with storage, upload and OCR options.
"""

from functools import lru_cache
from typing import Optional

from common.config import BaseAppSettings


class Settings(BaseAppSettings):
    """Profile site settings loaded from the environment and `.env`."""

    # ==========================================================================
    # Storage
    # ==========================================================================
    STORAGE_BACKEND: str = "mongodb"  # mongodb | file
    DATA_DIR: str = "."

    # ==========================================================================
    # Files
    # ==========================================================================
    UPLOADS_DIR: str = "uploads"
    STATIC_DIR: Optional[str] = "public"

    # ==========================================================================
    # Name-card OCR
    # ==========================================================================
    OCR_LANGUAGES: str = "jpn+eng"
    MAX_UPLOAD_BYTES: int = 5 * 1024 * 1024

    def use_file_storage(self) -> bool:
        """True when the flat JSON file backend is selected."""
        return self.STORAGE_BACKEND.lower() == "file"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

"""
==============================================================================
Bookstore Settings Module
==============================================================================

Configuration management using Pydantic Settings.

A single cached Settings instance is shared across the process through
``get_settings()``.

Configuration Priority (highest to lowest):
------------------------------------------
1. Environment variables (prefixed with BOOKSTORE_)
2. .env file
3. Default values

==============================================================================
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Module logger
logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Bookstore settings loaded from environment variables.

    Attributes:
        app_name: Display name used in log banners
        debug: Enable debug mode for verbose logging
        store_file: Path of the persisted catalog file
        log_format: Format string passed to logging.basicConfig

    Example:
        >>> settings = Settings(store_file="/tmp/books.dat")
        >>> settings.store_path
        PosixPath('/tmp/books.dat')
    """

    # =========================================================================
    # PYDANTIC SETTINGS CONFIGURATION
    # =========================================================================
    model_config = SettingsConfigDict(
        env_prefix="BOOKSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================
    app_name: str = Field(
        default="Bookstore",
        description="Display name used in log banners"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode for verbose logging"
    )

    # =========================================================================
    # PERSISTENCE SETTINGS
    # =========================================================================
    store_file: str = Field(
        default="./store.dat",
        min_length=1,
        description="Path of the persisted catalog file"
    )

    # =========================================================================
    # LOGGING SETTINGS
    # =========================================================================
    log_format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        description="Format string for the root log handler"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================
    @field_validator("store_file")
    @classmethod
    def validate_store_file(cls, value: str) -> str:
        """Strip surrounding whitespace; a blank path is rejected."""
        stripped = value.strip()
        if not stripped:
            raise ValueError("store_file must not be blank")
        return stripped

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def log_level(self) -> int:
        """Root log level derived from the debug flag."""
        return logging.DEBUG if self.debug else logging.INFO

    @property
    def store_path(self) -> Path:
        """Store file as Path object."""
        return Path(self.store_file)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"Settings(app_name={self.app_name!r}, "
            f"debug={self.debug!r}, "
            f"store_file={self.store_file!r})"
        )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the global Settings instance.

    Cached with lru_cache so the environment is read once per process.
    Tests call ``get_settings.cache_clear()`` after changing the environment.
    """
    settings = Settings()

    if settings.debug:
        logger.info(f"Configuration loaded: {settings}")

    return settings

"""
==============================================================================
Bookstore Session Module
==============================================================================

Load-at-open, save-at-close lifecycle around one catalog.

Usage:
------
    with Bookstore() as catalog:
        catalog.add_book("1", "book1")
    # saved to the store file here, also when the block raises

The save happens once, when the session closes. A process killed before
that point loses its changes.

==============================================================================
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from bookstore.catalog import BookCatalog
from bookstore.config import Settings, get_settings
from bookstore.persistence import DecodeResult, StoreFile


# Module logger
logger = logging.getLogger(__name__)


class Bookstore:
    """
    Catalog bound to its store file for the lifetime of a session.

    Attributes:
        catalog: The session catalog
        store_file: The backing StoreFile
        last_load: Result of the load performed by ``open``
    """

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        settings: Optional[Settings] = None
    ) -> None:
        """
        Initialize the session.

        Args:
            path: Store file path (uses settings if None)
            settings: Settings instance (uses get_settings() if None)
        """
        self._settings = settings or get_settings()
        self._store_file = StoreFile(path if path is not None else self._settings.store_path)
        self._catalog = BookCatalog()
        self._last_load: Optional[DecodeResult] = None
        self._saved: Optional[bool] = None

    @property
    def catalog(self) -> BookCatalog:
        """Get the session catalog."""
        return self._catalog

    @property
    def store_file(self) -> StoreFile:
        """Get the backing store file."""
        return self._store_file

    @property
    def last_load(self) -> Optional[DecodeResult]:
        """Get the result of the startup load, or None before ``open``."""
        return self._last_load

    @property
    def is_open(self) -> bool:
        return self._last_load is not None and self._saved is None

    def open(self) -> BookCatalog:
        """
        Load the store file into the catalog.

        Loading happens once; later calls return the same catalog.
        """
        if self._last_load is None:
            logger.info(f"📚 Opening {self._settings.app_name} store: {self._store_file.path}")
            self._last_load = self._store_file.load(self._catalog)
        return self._catalog

    def _load_failed_on_existing_file(self) -> bool:
        error = self._last_load.error
        return (
            error is not None
            and error.code == "STORE_READ_FAILED"
            and self._store_file.path.exists()
        )

    def close(self) -> bool:
        """
        Save the catalog to the store file.

        Saving happens once; later calls do nothing and return the first
        outcome. A store file that exists but could not be read at open is
        left untouched.

        Returns:
            True if the catalog was written
        """
        if self._saved is None:
            if self._last_load is None:
                # Saving an unloaded catalog would wipe the file
                logger.warning(f"Store {self._store_file.path} closed without being opened; not saving")
                self._saved = False
            elif self._load_failed_on_existing_file():
                logger.warning(
                    f"Store {self._store_file.path} could not be read at startup; "
                    "not overwriting it"
                )
                self._saved = False
            else:
                self._saved = self._store_file.save(self._catalog)
            logger.info("🛑 Store closed")
        return self._saved

    def __enter__(self) -> BookCatalog:
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

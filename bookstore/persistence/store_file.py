"""
==============================================================================
Store File Module
==============================================================================

Reads and overwrites the file that holds the encoded catalog.

Behaviour:
----------
- Missing file: created empty on first read
- Save: written to a sibling temp file, then moved over the target, so a
  failed save leaves the last good file in place
- I/O failures surface as BookstoreException from ``read``/``write`` and
  are logged and absorbed by ``load``/``save``

==============================================================================
"""

from __future__ import annotations

import contextlib
import logging
import os
from pathlib import Path
from typing import Union

from bookstore.catalog import BookCatalog
from bookstore.core.exceptions import BookstoreException, store_read_failed, store_write_failed

from .codec import DecodeResult, encode, load_into


# Module logger
logger = logging.getLogger(__name__)


class StoreFile:
    """
    Persisted catalog file.

    Attributes:
        path: Location of the store file

    Example:
        >>> store_file = StoreFile("store.dat")
        >>> catalog = BookCatalog()
        >>> result = store_file.load(catalog)
        >>> store_file.save(catalog)
        True
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        """Get the store file path."""
        return self._path

    def __repr__(self) -> str:
        return f"StoreFile(path={str(self._path)!r})"

    # =========================================================================
    # RAW I/O
    # =========================================================================

    def read(self) -> str:
        """
        Read the store file, creating it empty when absent.

        Returns:
            File contents ("" for a newly created file)

        Raises:
            BookstoreException: STORE_READ_FAILED on any OS error
        """
        try:
            if not self._path.exists():
                self._path.parent.mkdir(parents=True, exist_ok=True)
                self._path.touch()
                logger.info(f"Created empty store file: {self._path}")
                return ""

            with self._path.open("r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise store_read_failed(str(self._path), str(e)) from e

    def write(self, text: str) -> None:
        """
        Replace the store file contents with ``text``.

        Raises:
            BookstoreException: STORE_WRITE_FAILED on any OS error
        """
        tmp_path = self._path.with_name(self._path.name + ".tmp")

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tmp_path.open("w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp_path, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp_path.unlink(missing_ok=True)
            raise store_write_failed(str(self._path), str(e)) from e

    # =========================================================================
    # CATALOG PERSISTENCE
    # =========================================================================

    def load(self, catalog: BookCatalog) -> DecodeResult:
        """
        Load the store file into ``catalog``.

        Never raises for I/O or format problems; the returned result
        carries the diagnostic instead.
        """
        try:
            blob = self.read()
        except BookstoreException as e:
            logger.error(f"❌ {e.message}")
            return DecodeResult(error=e)

        result = load_into(catalog, blob)
        logger.info(f"✅ Loaded {result.inserted} books from {self._path}")
        return result

    def save(self, catalog: BookCatalog) -> bool:
        """
        Overwrite the store file with the encoded catalog.

        Returns:
            True on success, False if the file could not be written
        """
        try:
            self.write(encode(catalog.snapshot()))
        except BookstoreException as e:
            logger.error(f"❌ {e.message}")
            return False

        logger.info(f"✅ Saved {len(catalog)} books to {self._path}")
        return True

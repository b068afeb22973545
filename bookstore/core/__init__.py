"""
Core package: shared exception type and factories.
"""

from .exceptions import (
    BookstoreException,
    malformed_store_data,
    store_read_failed,
    store_write_failed,
)

__all__ = [
    "BookstoreException",
    "malformed_store_data",
    "store_read_failed",
    "store_write_failed",
]

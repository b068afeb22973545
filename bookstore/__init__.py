"""
Bookstore: sorted in-memory book catalog with a text store file.
"""

from .catalog import Book, BookCatalog
from .store import Bookstore

__all__ = [
    "Book",
    "BookCatalog",
    "Bookstore",
]

__version__ = "1.0.0"

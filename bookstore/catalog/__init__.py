"""
==============================================================================
Catalog Package - Book Management
==============================================================================

Sorted in-memory book catalog with title search.

Classes:
--------
- Book: Pydantic model for book records
- BookCatalog: Catalog manager with search capabilities

==============================================================================
"""

from .models import UNCLASSIFIED, Book
from .catalog import BookCatalog

__all__ = [
    "UNCLASSIFIED",
    "Book",
    "BookCatalog",
]

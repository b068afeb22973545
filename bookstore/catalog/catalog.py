"""
==============================================================================
Book Catalog Module
==============================================================================

In-memory book catalog kept sorted by title.

Features:
---------
- Single ordered list, sorted by title with plain string comparison
- Books sharing a title form one contiguous run, in insertion order
- Binary search lookup expanded to the full run of equal titles
- Duplicate rejection on (isbn, title)

Ownership:
----------
The catalog copies books on the way in and on the way out. Mutating a
returned book never changes catalog state; use ``update_book`` for that.

==============================================================================
"""

from __future__ import annotations

import bisect
import logging
from collections import Counter
from operator import attrgetter
from typing import Dict, Iterable, List, Optional

from .models import Book


# Module logger
logger = logging.getLogger(__name__)

_title_key = attrgetter("title")

_UNSET = object()


class BookCatalog:
    """
    Sorted book catalog with title search.

    Attributes:
        books: Copy of every book in catalog order

    Example:
        >>> catalog = BookCatalog()
        >>> catalog.add_book("3", "book3")
        True
        >>> catalog.add_book("3", "book3")
        False
        >>> [book.isbn for book in catalog.find_all("book3")]
        ['3']
    """

    def __init__(self, books: Optional[Iterable[Book]] = None) -> None:
        """
        Initialize the catalog.

        Args:
            books: Optional books to insert, in order, through ``insert``
        """
        self._books: List[Book] = []

        for book in books or ():
            self.insert(book)

    def __len__(self) -> int:
        return len(self._books)

    def __contains__(self, book: object) -> bool:
        if not isinstance(book, Book):
            return False
        return any(self._books[idx] == book for idx in self._find_run(book.title))

    def __repr__(self) -> str:
        return f"BookCatalog(books={len(self._books)})"

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def books(self) -> List[Book]:
        """Get all books."""
        return self.snapshot()

    # =========================================================================
    # RUN LOOKUP
    # =========================================================================

    def _search_index(self, title: str) -> int:
        """
        Binary search for any index holding ``title``.

        Returns:
            Index of one matching book, or -1 when the title is absent
        """
        low, high = 0, len(self._books) - 1

        while low <= high:
            middle = (low + high) // 2
            current = self._books[middle].title

            if current == title:
                return middle
            if current > title:
                high = middle - 1
            else:
                low = middle + 1

        return -1

    def _find_run(self, title: str) -> range:
        """
        Locate the run of books whose title equals ``title``.

        A single binary search hit is widened by scanning backward to the
        first book of the run and then forward to its end.

        Returns:
            Range of list indices for the run (empty when absent)
        """
        hit = self._search_index(title)
        if hit == -1:
            return range(0)

        start = hit
        while start > 0 and self._books[start - 1].title == title:
            start -= 1

        stop = start
        while stop < len(self._books) and self._books[stop].title == title:
            stop += 1

        return range(start, stop)

    def _find_index(self, book: Book) -> int:
        """Index of the first book equal to ``book``, or -1."""
        for idx in self._find_run(book.title):
            if self._books[idx] == book:
                return idx
        return -1

    # =========================================================================
    # MUTATION
    # =========================================================================

    def insert(self, book: Book) -> bool:
        """
        Insert a book, keeping title order.

        The book lands at the first position whose title is strictly
        greater than its own, so it joins the end of its run.

        Args:
            book: Book to insert

        Returns:
            True if inserted, False if a book with the same ISBN and title
            is already present
        """
        if self._find_index(book) != -1:
            logger.debug(f"Rejected duplicate book: {book.identity}")
            return False

        position = bisect.bisect_right(self._books, book.title, key=_title_key)
        self._books.insert(position, book.model_copy())
        return True

    def add_book(
        self,
        isbn: str,
        title: str,
        category: Optional[str] = None,
        price: float = 0.0
    ) -> bool:
        """
        Build a book from its fields and insert it.

        Raises:
            pydantic.ValidationError: If the fields do not form a valid book
        """
        return self.insert(Book(isbn=isbn, title=title, category=category, price=price))

    def delete_one(self, book: Book) -> bool:
        """
        Delete the first book with the same ISBN and title.

        Returns:
            True if a book was removed
        """
        idx = self._find_index(book)
        if idx == -1:
            return False

        del self._books[idx]
        return True

    def delete_all(self, book: Book) -> bool:
        """
        Delete every book with the same ISBN and title.

        Returns:
            True if any book was removed
        """
        matches = [idx for idx in self._find_run(book.title) if self._books[idx] == book]

        # Back to front so earlier indices stay valid
        for idx in reversed(matches):
            del self._books[idx]

        return bool(matches)

    def update_book(self, book: Book, category=_UNSET, price=_UNSET) -> bool:
        """
        Change category and/or price of a stored book in place.

        Args:
            book: Book identifying the record (only ISBN and title are used)
            category: New category (None resets to "Unclassified")
            price: New price

        Returns:
            True if the book was found and updated

        Raises:
            pydantic.ValidationError: If a new value is invalid
        """
        idx = self._find_index(book)
        if idx == -1:
            return False

        stored = self._books[idx]
        if category is not _UNSET:
            stored.category = category
        if price is not _UNSET:
            stored.price = price

        return True

    def clear(self) -> None:
        """Remove every book."""
        self._books.clear()

    # =========================================================================
    # SEARCH METHODS
    # =========================================================================

    def find_one(self, title: str) -> Optional[Book]:
        """
        Find any one book with the given title.

        Returns:
            Copy of a matching book, or None
        """
        idx = self._search_index(title)
        if idx == -1:
            return None
        return self._books[idx].model_copy()

    def find_all(self, title: str) -> List[Book]:
        """
        Find every book with the given title.

        Returns:
            Copies of the matching books in insertion order (empty if none)
        """
        return [self._books[idx].model_copy() for idx in self._find_run(title)]

    def snapshot(self) -> List[Book]:
        """Copy of every book in catalog order."""
        return [book.model_copy() for book in self._books]

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def titles(self) -> List[str]:
        """Distinct titles in catalog order."""
        titles: List[str] = []
        for book in self._books:
            if not titles or titles[-1] != book.title:
                titles.append(book.title)
        return titles

    def get_stats(self) -> Dict:
        """Get catalog statistics."""
        return {
            "total_books": len(self._books),
            "distinct_titles": len(self.titles()),
            "categories": dict(Counter(book.category for book in self._books)),
        }

"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides catalog, store file and settings fixtures.

==============================================================================
"""

import pytest
from pathlib import Path
from typing import Generator, List

from bookstore.catalog import Book, BookCatalog
from bookstore.config import Settings, get_settings


# ============================================================================
# SETTINGS FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Make every test read the environment afresh."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    """Store file location inside the test's temp directory."""
    return tmp_path / "store.dat"


@pytest.fixture
def settings(store_path: Path) -> Settings:
    """Settings pointing at the temp store file."""
    return Settings(store_file=str(store_path))


# ============================================================================
# CATALOG FIXTURES
# ============================================================================

@pytest.fixture
def catalog() -> BookCatalog:
    """Empty catalog."""
    return BookCatalog()


@pytest.fixture
def numbered_books() -> List[Book]:
    """Books ("1", "book1") .. ("6", "book6")."""
    return [Book(isbn=str(n), title=f"book{n}") for n in range(1, 7)]


@pytest.fixture
def populated_catalog(numbered_books: List[Book]) -> BookCatalog:
    """Catalog holding book1 .. book6, inserted in numeric order."""
    catalog = BookCatalog()
    for book in numbered_books:
        assert catalog.insert(book)
    return catalog


@pytest.fixture
def mixed_books() -> List[Book]:
    """Books with repeated titles, categories and prices, in arrival order."""
    return [
        Book(isbn="978-3", title="Dune", category="SciFi", price=9.99),
        Book(isbn="978-1", title="Beloved", category="Fiction", price=12.5),
        Book(isbn="978-7", title="Dune", category="SciFi", price=14.0),
        Book(isbn="978-2", title="Atonement"),
        Book(isbn="978-9", title="Dune", category="Classics", price=4.25),
        Book(isbn="978-5", title="Cosmos", category="Science", price=20.0),
    ]

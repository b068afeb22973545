"""
==============================================================================
Bookstore - Entry Point
==============================================================================

Loads the store file, runs a short demo against the catalog and saves the
result when the session closes.

Usage:
------
    python -m bookstore.main
    python -m bookstore.main --store-file /tmp/store.dat

    # or through the console script
    bookstore-demo

==============================================================================
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from bookstore.catalog import BookCatalog
from bookstore.config import get_settings
from bookstore.store import Bookstore


logger = logging.getLogger(__name__)


# ============================================================================
# DEMO SCENARIO
# ============================================================================

def run_demo(catalog: BookCatalog) -> None:
    """Add six books, list the ones titled "book3" and delete the first."""
    for number in range(1, 7):
        catalog.add_book(str(number), f"book{number}")

    books = catalog.find_all("book3")
    for book in books:
        print(book)

    if books:
        catalog.delete_one(books[0])

    logger.info(f"Catalog now holds {len(catalog)} books")


# ============================================================================
# ENTRY POINT
# ============================================================================

def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Bookstore catalog demo")
    parser.add_argument(
        "--store-file",
        default=None,
        help="Path of the store file (default: BOOKSTORE_STORE_FILE or ./store.dat)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    settings = get_settings()

    logging.basicConfig(level=settings.log_level, format=settings.log_format)

    with Bookstore(args.store_file, settings=settings) as catalog:
        run_demo(catalog)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

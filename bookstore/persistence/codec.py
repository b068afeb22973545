"""
==============================================================================
Store Codec Module
==============================================================================

Text encoding of the catalog used by the store file.

Format:
-------
    Store{books=[Book{isbn='1', title='book1', category='Unclassified', price=0.0}, Book{...}]}

Books are written in catalog order with a fixed field order. There is no
escaping: values containing delimiter characters are written as-is and
will not decode.

Decoding:
---------
The blob is split on ``{ } [ ] ' , =`` and whitespace, then the tokens are
walked against the exact grammar. The first deviation stops decoding;
books decoded before it are kept. Category and price may be missing from
the end of a record (older files) when another Book follows, or when it is
the last record and its width matches the record before it. Missing fields
take their defaults; data that simply stops mid-record is malformed.

==============================================================================
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from bookstore.catalog import Book, BookCatalog
from bookstore.core.exceptions import BookstoreException, malformed_store_data


# Module logger
logger = logging.getLogger(__name__)


STORE_LITERAL = "Store"
BOOK_LITERAL = "Book"
BOOKS_LABEL = "books"

DELIMITERS = "{}[]', ="

_SPLIT_PATTERN = re.compile(r"[{}\[\]', =\r\n\t]+")
_DELIMITER_PATTERN = re.compile(r"[{}\[\]', =\r\n\t]")


# =============================================================================
# FIELD TABLE
# =============================================================================

FieldSetter = Callable[[Dict[str, object], str], None]


def _set_isbn(fields: Dict[str, object], value: str) -> None:
    fields["isbn"] = value


def _set_title(fields: Dict[str, object], value: str) -> None:
    fields["title"] = value


def _set_category(fields: Dict[str, object], value: str) -> None:
    fields["category"] = value


def _set_price(fields: Dict[str, object], value: str) -> None:
    try:
        fields["price"] = float(value)
    except ValueError:
        raise malformed_store_data(f"price '{value}' is not a number") from None


# Labels in the order they appear inside Book{...}
RECORD_FIELDS: Tuple[Tuple[str, FieldSetter], ...] = (
    ("isbn", _set_isbn),
    ("title", _set_title),
    ("category", _set_category),
    ("price", _set_price),
)

# Leading fields every record must carry; the rest may be cut off
REQUIRED_FIELDS = 2


# =============================================================================
# RESULT
# =============================================================================

class DecodeResult(BaseModel):
    """
    Outcome of decoding (and optionally loading) a store blob.

    Attributes:
        books: Books decoded before any deviation, in file order
        error: Diagnostic that stopped decoding or loading, if any
        inserted: Books accepted by the catalog (``load_into`` only)
        duplicates: Books rejected as duplicates (``load_into`` only)
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    books: List[Book] = Field(default_factory=list)
    error: Optional[BookstoreException] = None
    inserted: int = 0
    duplicates: int = 0

    @property
    def ok(self) -> bool:
        """True when no diagnostic was raised."""
        return self.error is None

    @property
    def malformed(self) -> bool:
        """True when decoding stopped on malformed data."""
        return self.error is not None and self.error.code == "MALFORMED_STORE_DATA"


# =============================================================================
# ENCODING
# =============================================================================

def encode_book(book: Book) -> str:
    """Render one book as ``Book{isbn='..', title='..', category='..', price=..}``."""
    for label, value in (("isbn", book.isbn), ("title", book.title), ("category", book.category)):
        if _DELIMITER_PATTERN.search(value):
            logger.warning(
                f"Book {book.identity} has a {label} with delimiter characters; "
                "it will not decode"
            )

    return (
        f"Book{{isbn='{book.isbn}', title='{book.title}', "
        f"category='{book.category}', price={book.price!r}}}"
    )


def encode(books: Iterable[Book]) -> str:
    """
    Encode books into a single store blob.

    Args:
        books: Books in catalog order (e.g. ``catalog.snapshot()``)

    Returns:
        The encoded text
    """
    return f"{STORE_LITERAL}{{{BOOKS_LABEL}=[{', '.join(encode_book(book) for book in books)}]}}"


# =============================================================================
# DECODING
# =============================================================================

def tokenize(blob: str) -> List[str]:
    """Split a blob on the delimiter set, dropping empty tokens."""
    return [token for token in _SPLIT_PATTERN.split(blob) if token]


class _TokenReader:
    """Cursor over the token list that raises on any mismatch."""

    def __init__(self, tokens: List[str]) -> None:
        self._tokens = tokens
        self.position = 0

    @property
    def exhausted(self) -> bool:
        return self.position >= len(self._tokens)

    def peek(self) -> Optional[str]:
        if self.exhausted:
            return None
        return self._tokens[self.position]

    def take(self, expected: str) -> str:
        if self.exhausted:
            raise malformed_store_data(f"expected {expected}, found end of data", self.position)
        token = self._tokens[self.position]
        self.position += 1
        return token

    def expect(self, literal: str) -> None:
        token = self.take(f"'{literal}'")
        if token != literal:
            raise malformed_store_data(
                f"expected '{literal}', found '{token}'", self.position - 1
            )


def _build_book(fields: Dict[str, object], position: int) -> Book:
    try:
        return Book(**fields)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        raise malformed_store_data(f"invalid book ({problems})", position) from exc


def _iter_books(reader: _TokenReader) -> Iterator[Book]:
    reader.expect(STORE_LITERAL)
    reader.take("books label")

    # Field count of the previous record; a short last record must match it
    previous_width: Optional[int] = None

    while not reader.exhausted:
        start = reader.position
        reader.expect(BOOK_LITERAL)

        fields: Dict[str, object] = {}
        for count, (label, setter) in enumerate(RECORD_FIELDS):
            if count >= REQUIRED_FIELDS:
                following = reader.peek()
                if following == BOOK_LITERAL:
                    break
                if following is None and count == previous_width:
                    break
            reader.expect(label)
            setter(fields, reader.take(f"value for '{label}'"))

        previous_width = len(fields)
        yield _build_book(fields, start)


def decode(blob: str) -> DecodeResult:
    """
    Decode a store blob.

    An empty blob decodes to no books. A blob that does not start with
    ``Store`` decodes to no books and a diagnostic. Any later deviation
    keeps the books decoded so far and reports a diagnostic.

    Args:
        blob: Text read from the store file

    Returns:
        DecodeResult with the decoded books and any diagnostic
    """
    result = DecodeResult()
    tokens = tokenize(blob)
    if not tokens:
        return result

    try:
        for book in _iter_books(_TokenReader(tokens)):
            result.books.append(book)
    except BookstoreException as exc:
        logger.warning(
            f"{exc.message}; not reading further ({len(result.books)} books kept)"
        )
        result.error = exc

    return result


def load_into(catalog: BookCatalog, blob: str) -> DecodeResult:
    """
    Decode a blob and insert each book into the catalog.

    Books go through ``BookCatalog.insert``, so ordering and duplicate
    rules apply exactly as for any other insertion.

    Returns:
        DecodeResult with inserted/duplicate counts filled in
    """
    result = decode(blob)

    for book in result.books:
        if catalog.insert(book):
            result.inserted += 1
        else:
            result.duplicates += 1

    if result.duplicates:
        logger.warning(f"Skipped {result.duplicates} duplicate books in store data")

    return result
